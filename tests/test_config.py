"""Tests for settings loading."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from versionlock.config import DEFAULT_VERSIONLOCK_PATH, get_settings, load_config


def test_defaults_without_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test defaults when no YAML and no environment."""
    monkeypatch.delenv("VERSIONLOCK_PATH", raising=False)
    monkeypatch.delenv("VERSIONLOCK_LOG_LEVEL", raising=False)
    
    with TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "missing.yaml"
        assert load_config(config_path) == {}
        
        settings = get_settings(config_path)
        assert settings.versionlock_path == DEFAULT_VERSIONLOCK_PATH
        assert settings.log_level == "WARNING"


def test_yaml_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test YAML values and environment overrides."""
    monkeypatch.delenv("VERSIONLOCK_PATH", raising=False)
    monkeypatch.setenv("VERSIONLOCK_LOG_LEVEL", "debug")
    
    with TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "versionlock.yaml"
        config_path.write_text("versionlock_path: /tmp/locks.toml\nlog_level: info\n")
        
        settings = get_settings(config_path)
        assert settings.versionlock_path == Path("/tmp/locks.toml")
        assert settings.log_level == "DEBUG"
        
        monkeypatch.setenv("VERSIONLOCK_PATH", "/srv/other.toml")
        assert get_settings(config_path).versionlock_path == Path("/srv/other.toml")
