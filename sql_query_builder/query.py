"""Query"""

from typing import Any


class Query:
    """A rendered SQL statement.

    Only QueryBuilder.build() is expected to create these. The text is exposed
    verbatim through str(), .to_string() and .query. Comparing against a
    plain string compares the text."""

    __slots__ = ("_query",)

    def __init__(self, query: str) -> None:
        object.__setattr__(self, "_query", query)

    def __setattr__(self, __name: str, __value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, __name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def query(self) -> str:
        """The statement text"""
        return self._query

    def to_string(self) -> str:
        """Return the statement text"""
        return self._query

    def __str__(self) -> str:
        return self._query

    def __eq__(self, __o: object) -> bool:
        if isinstance(__o, Query):
            return self._query == __o.query
        if isinstance(__o, str):
            return self._query == __o
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._query)

    def __repr__(self) -> str:
        return f"<Query -> {self._query!r}>"
