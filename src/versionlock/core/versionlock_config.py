"""Versionlock configuration file loading and serialization."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Iterable, Optional

import tomli_w

from versionlock.core.entities import VersionlockCondition, VersionlockPackage

logger = logging.getLogger(__name__)

# Supported config file version
CONFIG_FILE_VERSION = "1.0"


def _find_str(record: dict[str, Any], key: str) -> str:
    value = record.get(key, "")
    return value if isinstance(value, str) else ""


def _find_tables(record: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Return a list of tables stored under key, or [] for anything else."""
    value = record.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        return []
    return value


def condition_from_record(record: dict[str, Any]) -> VersionlockCondition:
    return VersionlockCondition(
        _find_str(record, "key"),
        _find_str(record, "comparator"),
        _find_str(record, "value"),
    )


def condition_to_record(condition: VersionlockCondition) -> dict[str, Any]:
    return {
        "key": condition.key_str,
        "comparator": condition.comparator_str,
        "value": condition.value,
    }


def package_from_record(record: dict[str, Any]) -> VersionlockPackage:
    package = VersionlockPackage(_find_str(record, "name"))
    package.set_conditions(
        condition_from_record(item) for item in _find_tables(record, "conditions")
    )
    return package


def package_to_record(package: VersionlockPackage) -> dict[str, Any]:
    return {
        "name": package.name,
        "conditions": [condition_to_record(c) for c in package.conditions],
    }


def dumps(packages: Iterable[VersionlockPackage], extra: Optional[dict[str, Any]] = None) -> str:
    """Render packages as a versioned TOML document.

    Top-level keys in extra are written after version and packages.
    """
    document = {
        "version": CONFIG_FILE_VERSION,
        "packages": [package_to_record(p) for p in packages],
    }
    for key, value in (extra or {}).items():
        document.setdefault(key, value)
    return tomli_w.dumps(document)


class VersionlockConfig:
    """Versionlock entries read from a TOML file.

    A missing file, a file without ``version`` or with an unsupported
    version all give an empty package list. Malformed TOML raises
    ``tomllib.TOMLDecodeError`` and content that is not UTF-8 raises
    ``UnicodeDecodeError``. Unknown top-level keys of a supported file are
    kept in ``extra`` and written back by ``save``.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.version: Optional[Any] = None
        self._packages: list[VersionlockPackage] = []
        self.extra: dict[str, Any] = {}

        if not self.path.exists():
            logger.debug("Versionlock file %s does not exist", self.path)
            return

        with open(self.path, "rb") as f:
            data = tomllib.load(f)

        if "version" not in data:
            logger.warning("Skipping unversioned versionlock file %s", self.path)
            return

        self.version = data["version"]
        if self.version != CONFIG_FILE_VERSION:
            logger.warning(
                "Skipping versionlock file %s with unsupported version %r",
                self.path,
                self.version,
            )
            return

        self._packages = [package_from_record(r) for r in _find_tables(data, "packages")]
        self.extra = {k: v for k, v in data.items() if k not in ("version", "packages")}

    def get_packages(self) -> list[VersionlockPackage]:
        """Get list of configured versionlock entries."""
        return list(self._packages)

    @property
    def packages(self) -> list[VersionlockPackage]:
        return self.get_packages()

    def save(self, packages: Iterable[VersionlockPackage]) -> None:
        """Write packages to the file, replacing its content."""
        packages = list(packages)
        text = dumps(packages, self.extra)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

        self.version = CONFIG_FILE_VERSION
        self._packages = packages
        logger.info("Saved %d versionlock entries to %s", len(packages), self.path)
