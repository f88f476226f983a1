"""Old/new line number correspondence."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .DiffLine import DiffLine
from .DiffLineType import DiffLineType


@dataclass
class LineMapping:
    """Maps unchanged lines between the old and new file.

    Built from complete-mode output, so every line of both files is seen.
    """

    old_to_new: dict[int, int] = field(default_factory=dict)
    new_to_old: dict[int, int] = field(default_factory=dict)
    removed_anchor: dict[int, int | None] = field(default_factory=dict)

    @classmethod
    def from_complete(cls, lines: Iterable[DiffLine]) -> "LineMapping":
        mapping = cls()
        pending: list[int] = []
        last_new: int | None = None
        for line in lines:
            if line.line_type == DiffLineType.REMOVED:
                assert line.old_line_number is not None
                pending.append(line.old_line_number)
                continue
            if line.new_line_number is None:
                continue
            for old_line in pending:
                mapping.removed_anchor[old_line] = line.new_line_number
            pending.clear()
            last_new = line.new_line_number
            if line.line_type == DiffLineType.CONTEXT:
                assert line.old_line_number is not None
                mapping.old_to_new[line.old_line_number] = line.new_line_number
                mapping.new_to_old[line.new_line_number] = line.old_line_number
        # Removals at the end of the file fall back to the last new line.
        for old_line in pending:
            mapping.removed_anchor[old_line] = last_new
        return mapping

    def find_new_line(self, old_line: int) -> int | None:
        """New line for ``old_line``; a removed line maps to the line that now follows it."""
        if old_line in self.old_to_new:
            return self.old_to_new[old_line]
        return self.removed_anchor.get(old_line)
