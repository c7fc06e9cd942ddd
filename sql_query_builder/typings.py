"""Typing Extensions"""

from typing import Any, Literal, Mapping, Sequence, TypeAlias

StatementKind: TypeAlias = Literal["SELECT", "INSERT", "UPDATE", "DELETE"]
Direction: TypeAlias = Literal["ASC", "DESC"] | str
Data: TypeAlias = Mapping[str, Any]
Aliases: TypeAlias = Mapping[str, str]
Fields: TypeAlias = Sequence[str] | Aliases | str
WhereCondition: TypeAlias = str | Data

__all__ = (
    "StatementKind",
    "Direction",
    "Data",
    "Aliases",
    "Fields",
    "WhereCondition",
)
