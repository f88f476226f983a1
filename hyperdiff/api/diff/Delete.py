"""Deleted run of lines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Delete:
    """Lines ``old_range`` (0-based, half-open) exist only in the old file."""

    old_range: range
