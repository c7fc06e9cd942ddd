"""Generic query building engine"""

from dataclasses import dataclass
from typing import Callable, Optional

from .typings import CacheData, CacheFields
from .utils import format_where, join_fragments, quote_value

from ..errors import UndefinedStatementKindError
from ..typings import StatementKind


@dataclass(frozen=True)
class QueryParams:  # pylint: disable=too-many-instance-attributes
    """Snapshot of QueryBuilder state, taken at build time."""

    kind: Optional[StatementKind] = None
    fields: CacheFields = ()
    from_table: str = ""
    joins: CacheFields = ()
    where: CacheFields = ()
    order_by: str = ""
    limit: str = ""
    group_by: str = ""
    insert_table: str = ""
    insert_values: CacheData = ()
    update_table: str = ""
    update_values: CacheData = ()
    delete_table: str = ""


def _build_select(query_params: QueryParams):
    fields = ", ".join(query_params.fields) if query_params.fields else "*"
    return join_fragments(
        f"SELECT {fields}",
        f"FROM {query_params.from_table}",
        " ".join(query_params.joins),
        format_where(query_params.where),
        query_params.group_by,
        query_params.order_by,
        query_params.limit,
    )


def _build_insert(query_params: QueryParams):
    columns = ", ".join(column for column, _ in query_params.insert_values)
    values = ", ".join(quote_value(value) for _, value in query_params.insert_values)
    return join_fragments(
        f"INSERT INTO {query_params.insert_table} ({columns}) VALUES ({values})"
    )


def _build_update(query_params: QueryParams):
    new_str = ", ".join(
        f"{column} = {quote_value(value)}"
        for column, value in query_params.update_values
    )
    return join_fragments(
        f"UPDATE {query_params.update_table} SET {new_str}",
        format_where(query_params.where),
    )


def _build_delete(query_params: QueryParams):
    return join_fragments(
        f"DELETE FROM {query_params.delete_table}",
        format_where(query_params.where),
    )


ENGINES: dict[str, Callable[[QueryParams], str]] = {
    "SELECT": _build_select,
    "INSERT": _build_insert,
    "UPDATE": _build_update,
    "DELETE": _build_delete,
}


def render(query_params: QueryParams) -> str:
    """Render a statement string for the active statement kind"""
    try:
        engine = ENGINES[query_params.kind]  # type: ignore
    except KeyError:
        raise UndefinedStatementKindError("Query type not defined.") from None
    return engine(query_params)
