"""Comparison operators understood by the package query engine."""

from enum import Enum


class QueryCmp(Enum):
    """Relational operator applied to a package attribute."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
