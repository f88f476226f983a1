"""Resolve (ref, path) pairs into line content."""

import os

from ...utils.get_logger import get_logger
from .Absent import Absent
from .Binary import Binary
from .blob_id import blob_id
from .classify_content import classify_content
from .ContentResult import ContentResult
from .ObjectStore import ObjectStore
from .RepoPath import RepoPath

logger = get_logger("repo")

WORKTREE_PREFIX = "worktree:"
WORKTREE_ABSENT = "worktree:absent"


class ObjectResolver:
    """Turns refs and raw paths into object ids and ContentResults.

    A ``ref`` of None stands for the working tree. Its object id is
    ``worktree:<blob sha>`` of the current file bytes, so it changes whenever
    the file does.
    """

    def __init__(self, store: ObjectStore):
        self.store = store

    def normalize_path(self, path: str | os.PathLike | RepoPath) -> RepoPath:
        """Canonicalize ``path`` against the store's working directory.

        Raises:
            InvalidPathError: If the path is outside the working directory
        """
        if isinstance(path, RepoPath):
            return path
        repo_path = RepoPath.from_user_path(path, self.store.working_dir())
        logger.debug("Normalized path %s -> %s", path, repo_path)
        return repo_path

    def resolve_object_id(self, ref: str | None, path: RepoPath) -> str:
        """Resolve ``ref`` to an immutable object id.

        Raises:
            RefNotFoundError: If ``ref`` does not resolve
            RepositoryError: If the object store cannot be read
        """
        return self.resolve_side(ref, path)[0]

    def resolve_side(self, ref: str | None, path: RepoPath) -> tuple[str, ContentResult | None]:
        """Resolve ``ref`` to an object id, with the content when it was read.

        The working tree is read exactly once here and its content is returned
        alongside the id computed from those same bytes. Committed objects are
        immutable, so their content is left to ``load`` and comes back as None.

        Raises:
            RefNotFoundError: If ``ref`` does not resolve
            RepositoryError: If the object store cannot be read
        """
        if ref is None:
            data = self.store.read_worktree(path)
            object_id = WORKTREE_ABSENT if data is None else WORKTREE_PREFIX + blob_id(data)
            return object_id, self._classify(data, path, object_id)
        return self.store.resolve_ref(ref), None

    def load(self, object_id: str, path: RepoPath) -> ContentResult:
        """Read and classify ``path`` at an id from ``resolve_object_id``."""
        if object_id.startswith(WORKTREE_PREFIX):
            data = self.store.read_worktree(path)
        else:
            data = self.store.read_blob(object_id, path)
        return self._classify(data, path, object_id)

    def _classify(self, data: bytes | None, path: RepoPath, object_id: str) -> ContentResult:
        content = classify_content(data)
        if isinstance(content, Absent):
            logger.info("%s is absent at %s", path, object_id)
        elif isinstance(content, Binary):
            logger.info("%s is binary at %s (%d bytes)", path, object_id, content.size)
        return content

    def resolve(self, ref: str | None, path: str | os.PathLike | RepoPath) -> ContentResult:
        """Resolve ``ref`` and read ``path`` in one step.

        Raises:
            InvalidPathError: If the path is outside the working directory
            RefNotFoundError: If ``ref`` does not resolve
            RepositoryError: If the object store cannot be read
        """
        repo_path = self.normalize_path(path)
        object_id, content = self.resolve_side(ref, repo_path)
        return content if content is not None else self.load(object_id, repo_path)
