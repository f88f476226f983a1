"""Unchanged run of lines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Equal:
    """Lines ``old_range`` of the old file match lines ``new_range`` of the new file.

    Ranges are 0-based and half-open, and always the same length.
    """

    old_range: range
    new_range: range
