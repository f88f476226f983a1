"""Diff output cache."""

from .CacheEntry import CacheEntry
from .CacheKey import CacheKey
from .CacheStats import CacheStats
from .DiffCache import DiffCache
from .DiffMode import DiffMode
from .estimate_size import estimate_size

__all__ = [
    "CacheEntry",
    "CacheKey",
    "CacheStats",
    "DiffCache",
    "DiffMode",
    "estimate_size",
]
