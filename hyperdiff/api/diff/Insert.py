"""Inserted run of lines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Insert:
    """Lines ``new_range`` (0-based, half-open) exist only in the new file."""

    new_range: range
