"""Approximate memory footprint of diff output."""

from collections.abc import Iterable

from ..diff.DiffLine import DiffLine

# Line numbers, type tag and object headers of one DiffLine.
LINE_OVERHEAD_BYTES = 64


def estimate_size(lines: Iterable[DiffLine]) -> int:
    """Bytes charged against the cache budget for ``lines``."""
    return sum(len(line.content.encode("utf-8")) + LINE_OVERHEAD_BYTES for line in lines)
