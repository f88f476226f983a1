"""Entry point for computing file diffs."""

import os

from ...utils.get_logger import get_logger
from ..cache.CacheKey import CacheKey
from ..cache.DiffCache import DiffCache
from ..cache.DiffMode import DiffMode
from ..config.DiffConfig import DiffConfig
from ..repo.Absent import Absent
from ..repo.Binary import Binary
from ..repo.ContentResult import ContentResult
from ..repo.ObjectResolver import ObjectResolver
from ..repo.ObjectStore import ObjectStore
from ..repo.RepoPath import RepoPath
from .assemble_complete import assemble_complete
from .assemble_hunks import assemble_hunks
from .DiffLine import DiffLine
from .FileDiff import FileDiff
from .myers_diff import myers_diff

logger = get_logger("diff")


class DiffService:
    """Computes hunk-mode and complete-mode diffs of files in one repository.

    Refs are resolved to object ids before the cache is consulted, so moving a
    branch never serves stale output. Without a cache every call computes.
    """

    def __init__(self, store: ObjectStore, cache: DiffCache | None = None, config: DiffConfig | None = None):
        self.resolver = ObjectResolver(store)
        self.cache = cache
        self.config = config or DiffConfig()

    def compute_file_diff(
        self,
        path: str | os.PathLike | RepoPath,
        old_ref: str | None = None,
        new_ref: str | None = None,
        context_lines: int | None = None,
    ) -> list[DiffLine]:
        """Hunk-mode diff of ``path``.

        Args:
            path: File path, absolute or relative to the repository root
            old_ref: Old side; defaults to the configured ref ("HEAD")
            new_ref: New side; None means the working tree
            context_lines: Unchanged lines around each change; defaults to the config

        Returns:
            Each hunk's header line followed by its lines. Empty when nothing changed.

        Raises:
            InvalidPathError: If the path is outside the repository
            RefNotFoundError: If a ref does not resolve
            RepositoryError: If the object store cannot be read
            CacheComputationFailed: If a shared cached computation failed
        """
        return list(self.file_diff(path, old_ref, new_ref, context_lines).lines)

    def compute_complete_diff(self, path: str | os.PathLike | RepoPath, old_ref: str, new_ref: str) -> list[DiffLine]:
        """Complete-mode diff of ``path``: the whole new file with removals inlined.

        Raises:
            ValueError: If either ref is missing
            InvalidPathError: If the path is outside the repository
            RefNotFoundError: If a ref does not resolve
            RepositoryError: If the object store cannot be read
            CacheComputationFailed: If a shared cached computation failed
        """
        return list(self.complete_diff(path, old_ref, new_ref).lines)

    def file_diff(
        self,
        path: str | os.PathLike | RepoPath,
        old_ref: str | None = None,
        new_ref: str | None = None,
        context_lines: int | None = None,
    ) -> FileDiff:
        """Hunk-mode diff with provenance; see ``compute_file_diff``."""
        if context_lines is None:
            context_lines = self.config.context_lines
        if context_lines < 0:
            raise ValueError(f"context_lines must be non-negative (found: {context_lines})")
        return self._diff(DiffMode.HUNK, path, old_ref or self.config.default_old_ref, new_ref, context_lines)

    def complete_diff(self, path: str | os.PathLike | RepoPath, old_ref: str, new_ref: str) -> FileDiff:
        """Complete-mode diff with provenance; see ``compute_complete_diff``."""
        if not old_ref or not new_ref:
            raise ValueError("Complete diffs require both an old and a new ref")
        return self._diff(DiffMode.COMPLETE, path, old_ref, new_ref, None)

    def _diff(
        self,
        mode: DiffMode,
        path: str | os.PathLike | RepoPath,
        old_ref: str,
        new_ref: str | None,
        context_lines: int | None,
    ) -> FileDiff:
        repo_path = self.resolver.normalize_path(path)
        old_id, old_content = self.resolver.resolve_side(old_ref, repo_path)
        new_id, new_content = self.resolver.resolve_side(new_ref, repo_path)
        logger.info(
            "%s diff of %s: %s (%s) -> %s (%s)",
            mode.value,
            repo_path,
            old_ref,
            old_id,
            new_ref or "working tree",
            new_id,
        )

        def compute() -> list[DiffLine]:
            return self._compute(mode, repo_path, old_id, new_id, context_lines, old_content, new_content)

        if self.cache is None:
            lines = compute()
        else:
            key = CacheKey(self.resolver.store.identity, repo_path, old_id, new_id, mode, context_lines)
            lines = self.cache.get_or_compute(key, compute)

        return FileDiff(
            path=repo_path,
            mode=mode,
            old_ref=old_ref,
            new_ref=new_ref,
            old_id=old_id,
            new_id=new_id,
            lines=tuple(lines),
        )

    def _compute(
        self,
        mode: DiffMode,
        path: RepoPath,
        old_id: str,
        new_id: str,
        context_lines: int | None,
        old: ContentResult | None = None,
        new: ContentResult | None = None,
    ) -> list[DiffLine]:
        # Working-tree content arrives already read so it matches its object id.
        if old is None:
            old = self.resolver.load(old_id, path)
        if new is None:
            new = self.resolver.load(new_id, path)

        if isinstance(old, Binary) or isinstance(new, Binary):
            if mode is DiffMode.HUNK and old != new:
                return [DiffLine.header(f"Binary files a/{path} and b/{path} differ")]
            return []

        old_lines = () if isinstance(old, Absent) else old.lines
        new_lines = () if isinstance(new, Absent) else new.lines
        script = myers_diff(old_lines, new_lines)

        if mode is DiffMode.HUNK:
            lines = assemble_hunks(old_lines, new_lines, script, context_lines)
        else:
            lines = assemble_complete(old_lines, new_lines, script)
        logger.debug("Computed %d %s lines for %s", len(lines), mode.value, path)
        return lines
