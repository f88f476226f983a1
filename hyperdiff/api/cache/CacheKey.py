"""Identity of a cacheable diff computation."""

from dataclasses import dataclass

from ..repo.RepoPath import RepoPath
from .DiffMode import DiffMode


@dataclass(frozen=True)
class CacheKey:
    """Resolved object ids (never ref names) plus everything that shapes the output.

    ``context_lines`` is None in complete mode, where it has no effect.
    """

    repository: str
    path: RepoPath
    old_id: str
    new_id: str
    mode: DiffMode
    context_lines: int | None = None

    def __str__(self) -> str:
        return f"{self.path}@{self.old_id[:12]}..{self.new_id[:12]}/{DiffMode(self.mode).value}"
