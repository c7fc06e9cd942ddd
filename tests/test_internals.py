"""Test engine and clause helpers"""

# pylint: disable=protected-access
from dataclasses import FrozenInstanceError

from pytest import raises

from sql_query_builder.errors import UndefinedStatementKindError
from sql_query_builder.query_builder import QueryParams, render
from sql_query_builder.query_builder.utils import (
    format_aliases,
    format_equals,
    format_limit,
    format_where,
    join_fragments,
    quote_value,
)


def test_quote_value():
    """Test 0000 values are quoted but not escaped"""
    assert quote_value("a") == "'a'"
    assert quote_value(5) == "'5'"
    assert quote_value(None) == "'None'"
    assert quote_value("it's") == "'it's'"


def test_format_aliases():
    """Test 0001 alias mapping keeps insertion order"""
    assert format_aliases({"b": "x.b", "a": "x.a"}) == ["x.b AS b", "x.a AS a"]


def test_format_equals():
    """Test 0002 equality mapping"""
    assert format_equals({"id": 1, "name": "a"}) == ["id = '1'", "name = 'a'"]


def test_format_where():
    """Test 0003 where clause"""
    assert format_where(()) == ""
    assert format_where(["a = '1'"]) == "WHERE a = '1'"
    assert format_where(iter(["a", "b", "c"])) == "WHERE a AND b AND c"


def test_format_limit():
    """Test 0004 limit clause"""
    assert format_limit(10) == "LIMIT 10"
    assert format_limit(10, 5) == "LIMIT 5, 10"
    assert format_limit(10, 0) == "LIMIT 0, 10"


def test_join_fragments():
    """Test 0005 fragments joined with single spaces"""
    assert join_fragments("SELECT *", "FROM t", "", "", "LIMIT 1") == (
        "SELECT * FROM t LIMIT 1;"
    )


def test_render_params():
    """Test 0006 render straight from params"""
    params = QueryParams(
        kind="UPDATE",
        update_table="users",
        update_values=(("status", "inactive"),),
        where=("id = '5'",),
        from_table="ignored",
    )
    assert render(params) == "UPDATE users SET status = 'inactive' WHERE id = '5';"
    assert render(QueryParams(kind="SELECT", from_table="t")) == "SELECT * FROM t;"


def test_render_undefined_kind():
    """Test 0007 render without kind"""
    with raises(UndefinedStatementKindError, match="Query type not defined."):
        render(QueryParams())


def test_params_frozen():
    """Test 0008 params are frozen"""
    params = QueryParams(kind="DELETE", delete_table="t")
    with raises(FrozenInstanceError):
        params.kind = "SELECT"  # type: ignore


def test_join_fragments_strips():
    """Test 0009 fragments with stray whitespace are stripped"""
    assert join_fragments("UPDATE t SET ", "") == "UPDATE t SET;"
    assert join_fragments("  ", "DELETE FROM t ") == "DELETE FROM t;"
