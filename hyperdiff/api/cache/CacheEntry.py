"""Cached diff output."""

from dataclasses import dataclass

from ..diff.DiffLine import DiffLine
from .CacheKey import CacheKey


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache slot; touching it creates a replacement entry."""

    key: CacheKey
    lines: tuple[DiffLine, ...]
    size_bytes: int
    created_at: float
    last_access: float
