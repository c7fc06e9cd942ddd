"""SQL Query Builder"""

from ._debug import set_debug
from .errors import UndefinedStatementKindError, UndefinedStatementKind
from .query import Query
from .query_builder import QueryBuilder


def test_installed():
    """Is the module installed?"""
    return True


__version__ = "0.1.0"
__all__ = [
    "QueryBuilder",
    "Query",
    "UndefinedStatementKindError",
    "UndefinedStatementKind",
    "set_debug",
]
