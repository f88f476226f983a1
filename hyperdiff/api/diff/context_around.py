"""Slice of diff output around a line."""

from collections.abc import Sequence

from .DiffLine import DiffLine


def context_around(lines: Sequence[DiffLine], new_line_number: int, radius: int = 3) -> list[DiffLine]:
    """Return the DiffLines within ``radius`` positions of ``new_line_number``.

    Returns an empty list when no line carries that new line number.
    """
    for index, line in enumerate(lines):
        if line.new_line_number == new_line_number:
            return list(lines[max(0, index - radius) : index + radius + 1])
    return []
