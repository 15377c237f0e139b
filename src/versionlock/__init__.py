"""Versionlock configuration for package managers."""

from versionlock.core import (
    VersionlockCondition,
    VersionlockConfig,
    VersionlockPackage,
)

__all__ = ["VersionlockCondition", "VersionlockConfig", "VersionlockPackage"]
