"""Query Builder"""

from .core import QueryBuilder
from .engine import QueryParams, render

__all__ = [
    "QueryBuilder",
    "QueryParams",
    "render",
]
