"""Hunk-mode diff output."""

from collections.abc import Sequence

from ..repo.LineRecord import LineRecord
from .build_hunks import build_hunks
from .DiffLine import DiffLine
from .EditOp import EditScript


def assemble_hunks(
    old: Sequence[LineRecord | str],
    new: Sequence[LineRecord | str],
    script: EditScript,
    context_lines: int = 3,
) -> list[DiffLine]:
    """Flatten hunks into DiffLines, each hunk preceded by its ``@@`` header line."""
    lines: list[DiffLine] = []
    for hunk in build_hunks(old, new, script, context_lines):
        lines.append(hunk.header_line())
        lines.extend(hunk.lines)
    return lines
