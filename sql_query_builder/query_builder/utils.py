"""Utility"""

from typing import Any, Iterable, Optional

from ..typings import Aliases, Data


def quote_value(value: Any) -> str:
    """Wrap a value in single quotes. The value is not escaped."""
    return f"'{value}'"


def format_aliases(aliases: Aliases) -> list[str]:
    """Format alias -> expression mapping into `expression AS alias`"""
    return [f"{expression} AS {alias}" for alias, expression in aliases.items()]


def format_equals(data: Data) -> list[str]:
    """Format column -> value mapping into `column = 'value'`"""
    return [f"{column} = {quote_value(value)}" for column, value in data.items()]


def format_where(conditions: Iterable[str]) -> str:
    """Format accumulated conditions into a WHERE clause, empty when there's none"""
    conditions = tuple(conditions)
    if not conditions:
        return ""
    return f"WHERE {' AND '.join(conditions)}"


def format_limit(count: Any, offset: Optional[Any] = None) -> str:
    """Format LIMIT clause. Offset goes first, as in `LIMIT offset, count`"""
    if offset is not None:
        return f"LIMIT {offset}, {count}"
    return f"LIMIT {count}"


def join_fragments(*fragments: str) -> str:
    """Join clause fragments with a single space and terminate the statement"""
    stripped = (fragment.strip() for fragment in fragments)
    return " ".join(fragment for fragment in stripped if fragment) + ";"
