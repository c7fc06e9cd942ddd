"""Typings"""

from typing import Any, TypeAlias

CacheFields: TypeAlias = tuple[str, ...]
CacheData: TypeAlias = tuple[tuple[str, Any], ...]
