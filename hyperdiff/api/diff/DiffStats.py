"""Summary counts for a diff."""

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from .DiffLine import DiffLine
from .DiffLineType import DiffLineType


@dataclass(frozen=True)
class DiffStats:
    """Counts of added and removed lines and hunks."""

    lines_added: int
    lines_removed: int
    total_hunks: int
    is_identical: bool

    @classmethod
    def from_lines(cls, lines: Iterable[DiffLine]) -> "DiffStats":
        added = removed = hunks = 0
        marker = False
        for line in lines:
            if line.line_type == DiffLineType.ADDED:
                added += 1
            elif line.line_type == DiffLineType.REMOVED:
                removed += 1
            elif line.line_type == DiffLineType.HEADER:
                if line.content.startswith("@@"):
                    hunks += 1
                else:
                    marker = True
        return cls(
            lines_added=added,
            lines_removed=removed,
            total_hunks=hunks,
            is_identical=not (added or removed or marker),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
