"""Versionlock entries: packages and their conditions."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Optional

from versionlock.core.query_cmp import QueryCmp


# Largest epoch, an unsigned 64-bit value
MAX_EPOCH = 2**64 - 1

# Maps comparator tokens as written in the file to query operators.
COMPARATORS = MappingProxyType({
    "=": QueryCmp.EQ,
    "==": QueryCmp.EQ,
    "<": QueryCmp.LT,
    "<=": QueryCmp.LTE,
    ">": QueryCmp.GT,
    ">=": QueryCmp.GTE,
    "<>": QueryCmp.NEQ,
    "!=": QueryCmp.NEQ,
})


def lookup_comparator(token: str) -> Optional[QueryCmp]:
    """Return the operator for an exact comparator token, or None."""
    return COMPARATORS.get(token)


class ConditionKey(str, Enum):
    """Package attribute a condition constrains."""

    EPOCH = "epoch"
    VERSION = "version"
    EVR = "evr"
    ARCH = "arch"


@dataclass(frozen=True)
class VersionlockCondition:
    """Single ``key comparator value`` constraint.

    Construction never fails. Problems are collected in ``errors`` and
    reflected by ``is_valid``.
    """

    key_str: str
    comparator_str: str
    value: str
    key: Optional[ConditionKey] = field(init=False, default=None)
    comparator: Optional[QueryCmp] = field(init=False, default=None)
    _errors: tuple[str, ...] = field(init=False, default=(), repr=False)

    def __post_init__(self) -> None:
        errors = []

        key = next((k for k in ConditionKey if k.value == self.key_str), None)
        if key is None:
            if not self.key_str:
                errors.append("Missing condition key.")
            else:
                errors.append("Invalid condition key.")

        comparator = lookup_comparator(self.comparator_str)
        if comparator is None:
            if not self.comparator_str:
                errors.append("Missing condition comparator.")
            else:
                errors.append("Invalid condition comparator.")

        if not self.value:
            errors.append("Missing condition value.")

        # Key specific rules only apply to an otherwise well-formed condition
        if not errors:
            if key is ConditionKey.EPOCH:
                if not (self.value.isascii() and self.value.isdigit()) or int(self.value) > MAX_EPOCH:
                    errors.append("Epoch condition needs to be an unsigned integer value.")
            elif key is ConditionKey.ARCH:
                if comparator not in (QueryCmp.EQ, QueryCmp.NEQ):
                    errors.append("Arch condition only supports '=' and '!=' comparison operators.")

        object.__setattr__(self, "key", key)
        object.__setattr__(self, "comparator", comparator)
        object.__setattr__(self, "_errors", tuple(errors))

    @classmethod
    def parse(cls, text: str) -> "VersionlockCondition":
        """Build a condition from its display form, e.g. ``version >= 2.0``.

        The value is everything after the comparator. Missing parts become
        empty strings, so short input yields an invalid condition.
        """
        key_str, comparator_str, value = (text.split(maxsplit=2) + ["", "", ""])[:3]
        return cls(key_str, comparator_str, value)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def __str__(self) -> str:
        return f"{self.key_str} {self.comparator_str} {self.value}"


class VersionlockPackage:
    """Package name with the conditions its versions must satisfy.

    Conditions are ANDed and keep their order. The entry's own validity
    depends on the name only; conditions carry their own validity.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._conditions: list[VersionlockCondition] = []
        self._errors: list[str] = []

        if not name:
            self._errors.append("Missing package name.")

    @property
    def name(self) -> str:
        return self._name

    @property
    def conditions(self) -> list[VersionlockCondition]:
        return list(self._conditions)

    def set_conditions(self, conditions: Iterable[VersionlockCondition]) -> None:
        """Replace all conditions of the entry."""
        self._conditions = list(conditions)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def all_errors(self) -> list[str]:
        """Diagnostics for the entry and each of its invalid conditions."""
        messages = list(self._errors)
        for condition in self._conditions:
            for error in condition.errors:
                messages.append(f"{condition}: {error}")
        return messages

    def __repr__(self) -> str:
        return f"VersionlockPackage(name={self._name!r}, conditions={self._conditions!r})"
