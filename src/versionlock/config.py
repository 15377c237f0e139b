"""Configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_VERSIONLOCK_PATH = Path("/etc/dnf/versionlock.toml")


@dataclass
class Settings:
    """Command line tool settings."""
    versionlock_path: Path = DEFAULT_VERSIONLOCK_PATH
    log_level: str = "WARNING"


def load_config(config_path: Path = Path("versionlock.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("versionlock.yaml")) -> Settings:
    """Get settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()
    
    # Apply YAML config
    if "versionlock_path" in config:
        settings.versionlock_path = Path(config["versionlock_path"])
    if "log_level" in config:
        settings.log_level = str(config["log_level"]).upper()
    
    # Environment overrides
    env_path = os.getenv("VERSIONLOCK_PATH")
    if env_path:
        settings.versionlock_path = Path(env_path)
    env_level = os.getenv("VERSIONLOCK_LOG_LEVEL")
    if env_level:
        settings.log_level = env_level.upper()
    
    return settings
