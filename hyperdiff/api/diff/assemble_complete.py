"""Full-file diff output."""

from collections.abc import Sequence

from ..repo.LineRecord import LineRecord
from ._line_text import _line_text
from .Delete import Delete
from .DiffLine import DiffLine
from .EditOp import EditScript
from .Equal import Equal


def assemble_complete(
    old: Sequence[LineRecord | str],
    new: Sequence[LineRecord | str],
    script: EditScript,
) -> list[DiffLine]:
    """Reconstruct the whole new file with removed lines inlined.

    Removed lines appear where they stood in the old file, just before the
    lines that follow them. Dropping the removed lines leaves the new file
    verbatim, numbered 1..N without gaps.
    """
    lines: list[DiffLine] = []
    for op in script:
        if isinstance(op, Equal):
            for i, j in zip(op.old_range, op.new_range):
                lines.append(DiffLine.context(_line_text(new[j]), i + 1, j + 1))
        elif isinstance(op, Delete):
            for i in op.old_range:
                lines.append(DiffLine.removed(_line_text(old[i]), i + 1))
        else:
            for j in op.new_range:
                lines.append(DiffLine.added(_line_text(new[j]), j + 1))
    return lines
