"""ObjectStore backed by GitPython."""

import threading
from pathlib import Path

import git
from git.exc import BadName, BadObject, GitError, InvalidGitRepositoryError, NoSuchPathError

from ...utils.get_logger import get_logger
from ..errors.RefNotFoundError import RefNotFoundError
from ..errors.RepositoryError import RepositoryError
from .ObjectStore import ObjectStore
from .RepoPath import RepoPath

logger = get_logger("repo")


class GitObjectStore(ObjectStore):
    """Read commits, trees and blobs of a local git repository.

    GitPython keeps long-running ``git cat-file`` processes per repository,
    which are not safe to share between threads, so every access holds a lock.
    """

    def __init__(self, path: str | Path):
        """Open the repository containing ``path``.

        Raises:
            RepositoryError: If ``path`` is not inside a non-bare git repository
        """
        try:
            self._repo = git.Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as exc:
            raise RepositoryError(f"Not a git repository: {path}") from exc

        if self._repo.working_tree_dir is None:
            self._repo.close()
            raise RepositoryError(f"Repository at {path} is bare and has no working directory")

        self._working_dir = Path(self._repo.working_tree_dir)
        self._identity = str(Path(self._repo.git_dir).resolve())
        self._lock = threading.Lock()

    def __enter__(self) -> "GitObjectStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release the git helper processes."""
        self._repo.close()

    @property
    def identity(self) -> str:
        return self._identity

    def working_dir(self) -> Path:
        return self._working_dir

    def resolve_ref(self, name: str) -> str:
        if not name or not name.strip():
            raise RefNotFoundError(name, "empty ref")
        with self._lock:
            try:
                commit = self._repo.commit(name)
            except (BadName, BadObject, ValueError) as exc:
                raise RefNotFoundError(name, str(exc)) from exc
            except GitError as exc:
                raise RepositoryError(f"Failed to resolve {name!r}: {exc}") from exc
        logger.debug("Resolved %s -> %s", name, commit.hexsha)
        return commit.hexsha

    def read_blob(self, object_id: str, path: RepoPath) -> bytes | None:
        with self._lock:
            try:
                commit = self._repo.commit(object_id)
                try:
                    entry = commit.tree / path.value
                except KeyError:
                    return None
                if entry.type != "blob":
                    return None
                return entry.data_stream.read()
            except (BadName, BadObject, ValueError, GitError) as exc:
                raise RepositoryError(f"Failed to read {path} at {object_id}: {exc}") from exc

    def read_worktree(self, path: RepoPath) -> bytes | None:
        file_path = self._working_dir / path.value
        if not file_path.is_file():
            return None
        try:
            return file_path.read_bytes()
        except OSError as exc:
            raise RepositoryError(f"Failed to read {file_path}: {exc}") from exc
