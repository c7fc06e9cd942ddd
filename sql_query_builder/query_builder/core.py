"""Core builder"""

from typing import Any, Optional

from .engine import QueryParams, render
from .utils import (
    format_aliases,
    format_equals,
    format_limit,
)

from .._debug import if_debug_print
from ..query import Query
from ..typings import Aliases, Data, Direction, Fields, StatementKind, WhereCondition


class QueryBuilder:  # pylint: disable=too-many-instance-attributes
    """Fluent SQL statement builder.

    Every configuration method returns the builder itself, so calls can be
    chained. build() renders the active statement, resets the builder and
    returns a Query. Values are interpolated as-is, nothing is escaped.

    Example:
        >>> QueryBuilder().select({"userId": "u.id"}).from_("users u")\\
        ...     .where({"u.status": "active"}).build()
        <Query -> "SELECT u.id AS userId FROM users u WHERE u.status = 'active';">

    A builder is not meant to be shared between threads."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self):
        self._kind: Optional[StatementKind] = None
        self._select_fields: list[str] = []
        self._from_table = ""
        self._joins: list[str] = []
        self._where: list[str] = []
        self._order_by = ""
        self._limit = ""
        self._group_by = ""
        self._insert_table = ""
        self._insert_values: Optional[Data] = None
        self._update_table = ""
        self._update_values: Optional[Data] = None
        self._delete_table = ""

    @property
    def kind(self) -> Optional[StatementKind]:
        """Active statement kind, None if nothing is configured"""
        return self._kind

    # ----- SELECT -----

    def select(self, fields: Fields = "*"):
        """Select fields. Accepts a list of expressions, a mapping of
        alias -> expression, or a single expression. Calls accumulate."""
        if isinstance(fields, dict):
            return self.select_as(fields)
        if isinstance(fields, str):
            return self.select_fields(fields)
        return self.select_fields(*fields)

    def select_fields(self, *fields: str):
        """Select raw expressions"""
        self._kind = "SELECT"
        self._select_fields.extend(fields)
        return self

    def select_as(self, aliases: Aliases):
        """Select expressions under an alias, `expression AS alias`"""
        self._kind = "SELECT"
        self._select_fields.extend(format_aliases(aliases))
        return self

    def from_(self, table: str):
        """Sets source table"""
        self._from_table = table
        return self

    def left_join(self, table: str, condition: str):
        """Add LEFT JOIN table ON condition"""
        self._joins.append(f"LEFT JOIN {table} ON {condition}")
        return self

    def where(self, condition: WhereCondition):
        """Sets conditioning. Accepts a raw expression or a mapping of
        column -> value. Every condition is joined with AND."""
        if isinstance(condition, str):
            return self.where_raw(condition)
        return self.where_eq(condition)

    def where_raw(self, condition: str):
        """Add a raw boolean expression"""
        self._where.append(condition)
        return self

    def where_eq(self, conditions: Data):
        """Add `column = 'value'` for every item"""
        self._where.extend(format_equals(conditions))
        return self

    def order_by(self, field: str, direction: Direction = "ASC"):
        """Order the query by a field"""
        self._order_by = f"ORDER BY {field} {direction}"
        return self

    def group_by(self, field: str):
        """Group the query by a field"""
        self._group_by = f"GROUP BY {field}"
        return self

    def limit(self, count: Any, offset: Optional[Any] = None):
        """Sets limit, and offset if given"""
        self._limit = format_limit(count, offset)
        return self

    # ----- INSERT -----

    def insert_into(self, table: str, values: Data):
        """Insert a row into table"""
        self._kind = "INSERT"
        self._insert_table = table
        self._insert_values = values
        return self

    # ----- UPDATE -----

    def update(self, table: str, values: Data):
        """Update table with new values"""
        self._kind = "UPDATE"
        self._update_table = table
        self._update_values = values
        return self

    # ----- DELETE -----

    def delete_from(self, table: str):
        """Delete from table"""
        self._kind = "DELETE"
        self._delete_table = table
        return self

    # ----- BUILD QUERY -----

    def _params(self):
        return QueryParams(
            kind=self._kind,
            fields=tuple(self._select_fields),
            from_table=self._from_table,
            joins=tuple(self._joins),
            where=tuple(self._where),
            order_by=self._order_by,
            limit=self._limit,
            group_by=self._group_by,
            insert_table=self._insert_table,
            insert_values=tuple((self._insert_values or {}).items()),
            update_table=self._update_table,
            update_values=tuple((self._update_values or {}).items()),
            delete_table=self._delete_table,
        )

    def build(self) -> Query:
        """Render the statement and reset the builder.

        Raises:
            UndefinedStatementKindError: select/insert_into/update/delete_from
                was not called.

        Returns:
            Query: rendered statement"""
        query = render(self._params())
        if_debug_print("[sql_query_builder] built:", query)
        self._reset()
        return Query(query)

    def __repr__(self) -> str:
        return f"<QueryBuilder -> {self._kind or 'undefined'}>"
