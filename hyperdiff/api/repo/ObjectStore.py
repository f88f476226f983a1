"""Interface to the git object store."""

from abc import ABC, abstractmethod
from pathlib import Path

from .RepoPath import RepoPath


class ObjectStore(ABC):
    """The repository operations the diff engine depends on.

    Implementations translate their own failures into ``RefNotFoundError``
    and ``RepositoryError``.
    """

    @property
    @abstractmethod
    def identity(self) -> str:
        """Stable identifier of the repository (used in cache keys)."""

    @abstractmethod
    def working_dir(self) -> Path:
        """Absolute path of the repository working directory."""

    @abstractmethod
    def resolve_ref(self, name: str) -> str:
        """Resolve a branch, tag, SHA or revision expression to a commit id.

        Raises:
            RefNotFoundError: If ``name`` does not resolve to a commit
            RepositoryError: If the object store cannot be read
        """

    @abstractmethod
    def read_blob(self, object_id: str, path: RepoPath) -> bytes | None:
        """Read ``path`` from the tree of commit ``object_id``.

        Returns:
            The blob bytes, or None if the path is not a file in that tree

        Raises:
            RepositoryError: If the object store cannot be read
        """

    @abstractmethod
    def read_worktree(self, path: RepoPath) -> bytes | None:
        """Read ``path`` from the working directory, or None if it does not exist."""
