"""Group an edit script into unified-diff hunks."""

from collections.abc import Sequence

from ..repo.LineRecord import LineRecord
from ._line_text import _line_text
from .Delete import Delete
from .DiffLine import DiffLine
from .EditOp import EditScript
from .Equal import Equal
from .Hunk import Hunk

# (tag, old_start, old_end, new_start, new_end), 0-based half-open
_Span = tuple[str, int, int, int, int]


def build_hunks(
    old: Sequence[LineRecord | str],
    new: Sequence[LineRecord | str],
    script: EditScript,
    context_lines: int = 3,
) -> list[Hunk]:
    """Build hunks from an edit script.

    Each change is surrounded by up to ``context_lines`` unchanged lines on
    either side; changes whose context windows touch or overlap share a hunk.
    An all-equal script yields no hunks.

    Args:
        old: Old file lines
        new: New file lines
        script: Edit script from ``myers_diff(old, new)``
        context_lines: Unchanged lines kept around each change

    Returns:
        Hunks in ascending position order
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be non-negative (found: {context_lines})")
    return [_make_hunk(old, new, group) for group in _group_spans(_spans(script), context_lines)]


def _spans(script: EditScript) -> list[_Span]:
    spans: list[_Span] = []
    i = j = 0
    for op in script:
        if isinstance(op, Equal):
            spans.append(("equal", op.old_range.start, op.old_range.stop, op.new_range.start, op.new_range.stop))
            i, j = op.old_range.stop, op.new_range.stop
        elif isinstance(op, Delete):
            spans.append(("delete", op.old_range.start, op.old_range.stop, j, j))
            i = op.old_range.stop
        else:
            spans.append(("insert", i, i, op.new_range.start, op.new_range.stop))
            j = op.new_range.stop
    return spans


def _group_spans(spans: list[_Span], n: int) -> list[list[_Span]]:
    """Split spans into hunk groups, trimming equal runs to ``n`` lines of context."""
    if not any(tag != "equal" for tag, *_ in spans):
        return []

    spans = list(spans)
    tag, i1, i2, j1, j2 = spans[0]
    if tag == "equal":
        spans[0] = (tag, max(i1, i2 - n), i2, max(j1, j2 - n), j2)
    tag, i1, i2, j1, j2 = spans[-1]
    if tag == "equal":
        spans[-1] = (tag, i1, min(i2, i1 + n), j1, min(j2, j1 + n))

    groups: list[list[_Span]] = []
    group: list[_Span] = []
    for tag, i1, i2, j1, j2 in spans:
        # An equal run longer than two context windows ends the current hunk.
        if tag == "equal" and i2 - i1 > 2 * n:
            group.append((tag, i1, min(i2, i1 + n), j1, min(j2, j1 + n)))
            groups.append(group)
            group = []
            i1, j1 = max(i1, i2 - n), max(j1, j2 - n)
        group.append((tag, i1, i2, j1, j2))
    if group and not (len(group) == 1 and group[0][0] == "equal"):
        groups.append(group)
    return [g for g in groups if any(tag != "equal" for tag, *_ in g)]


def _make_hunk(old: Sequence[LineRecord | str], new: Sequence[LineRecord | str], group: list[_Span]) -> Hunk:
    old_begin, old_end = group[0][1], group[-1][2]
    new_begin, new_end = group[0][3], group[-1][4]

    lines: list[DiffLine] = []
    for tag, i1, i2, j1, j2 in group:
        if tag == "equal":
            for offset in range(i2 - i1):
                lines.append(DiffLine.context(_line_text(new[j1 + offset]), i1 + offset + 1, j1 + offset + 1))
        elif tag == "delete":
            for i in range(i1, i2):
                lines.append(DiffLine.removed(_line_text(old[i]), i + 1))
        else:
            for j in range(j1, j2):
                lines.append(DiffLine.added(_line_text(new[j]), j + 1))

    old_count = old_end - old_begin
    new_count = new_end - new_begin
    return Hunk(
        old_start=old_begin + 1 if old_count else old_begin,
        old_count=old_count,
        new_start=new_begin + 1 if new_count else new_begin,
        new_count=new_count,
        lines=tuple(lines),
    )
