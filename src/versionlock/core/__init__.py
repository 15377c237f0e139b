"""Core domain layer."""

from versionlock.core.entities import (
    COMPARATORS,
    ConditionKey,
    VersionlockCondition,
    VersionlockPackage,
    lookup_comparator,
)
from versionlock.core.query_cmp import QueryCmp
from versionlock.core.versionlock_config import (
    CONFIG_FILE_VERSION,
    VersionlockConfig,
    condition_from_record,
    condition_to_record,
    dumps,
    package_from_record,
    package_to_record,
)

__all__ = [
    "COMPARATORS",
    "CONFIG_FILE_VERSION",
    "ConditionKey",
    "QueryCmp",
    "VersionlockCondition",
    "VersionlockConfig",
    "VersionlockPackage",
    "condition_from_record",
    "condition_to_record",
    "dumps",
    "lookup_comparator",
    "package_from_record",
    "package_to_record",
]
