"""Diff of one file between two versions, with provenance."""

from dataclasses import dataclass
from typing import Any

from ..cache.DiffMode import DiffMode
from ..repo.RepoPath import RepoPath
from .DiffLine import DiffLine
from .DiffStats import DiffStats


@dataclass(frozen=True)
class FileDiff:
    """DiffLines for ``path`` plus the refs and object ids they came from.

    ``new_ref`` is None when the new side is the working tree.
    """

    path: RepoPath
    mode: DiffMode
    old_ref: str
    new_ref: str | None
    old_id: str
    new_id: str
    lines: tuple[DiffLine, ...]

    @property
    def stats(self) -> DiffStats:
        return DiffStats.from_lines(self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "mode": DiffMode(self.mode).value,
            "old_ref": self.old_ref,
            "new_ref": self.new_ref,
            "old_id": self.old_id,
            "new_id": self.new_id,
            "stats": self.stats.to_dict(),
            "lines": [line.to_dict() for line in self.lines],
        }
