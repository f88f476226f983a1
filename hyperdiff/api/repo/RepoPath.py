"""Repository-relative path."""

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path

from ..errors.InvalidPathError import InvalidPathError


@dataclass(frozen=True)
class RepoPath:
    """A path relative to the repository root.

    Always forward-slash separated, normalized, and free of the working
    directory prefix. Build one with ``from_user_path`` when the input may be
    absolute.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidPathError(str(self.value), "path is empty")
        if self.value.startswith("/"):
            raise InvalidPathError(self.value, "path must be relative to the repository root")
        parts = self.value.split("/")
        if any(part in ("", ".", "..") for part in parts):
            raise InvalidPathError(self.value, "path must be normalized")

    def __str__(self) -> str:
        return self.value

    @property
    def name(self) -> str:
        """Final path component."""
        return self.value.rsplit("/", 1)[-1]

    @classmethod
    def from_user_path(cls, path: str | os.PathLike, working_dir: Path) -> "RepoPath":
        """Canonicalize a repo-relative or absolute path.

        Args:
            path: Path as supplied by a caller
            working_dir: Repository working directory (trailing separator tolerated)

        Returns:
            RepoPath relative to ``working_dir``

        Raises:
            InvalidPathError: If the path is empty, lies outside the working
                directory, or names the repository root itself
        """
        raw = os.fspath(path)
        if not raw:
            raise InvalidPathError(raw, "path is empty")

        if os.path.isabs(raw):
            relative = _strip_working_dir(raw, os.fspath(working_dir))
            if relative is None:
                raise InvalidPathError(raw, f"path is outside the working directory {working_dir}")
        else:
            relative = raw

        if os.sep != "/":
            relative = relative.replace(os.sep, "/")

        normalized = posixpath.normpath(relative) if relative else "."
        if normalized == ".":
            raise InvalidPathError(raw, "path names the repository root, not a file")
        if normalized == ".." or normalized.startswith("../"):
            raise InvalidPathError(raw, "path escapes the working directory")
        return cls(normalized.lstrip("/"))


def _strip_working_dir(raw: str, working_dir: str) -> str | None:
    """Return ``raw`` without the working directory prefix, or None if it is outside."""
    candidates = [(raw, working_dir), (os.path.realpath(raw), os.path.realpath(working_dir))]
    for candidate, root in candidates:
        root = root.rstrip(os.sep) or os.sep
        if candidate == root:
            return ""
        prefix = root if root.endswith(os.sep) else root + os.sep
        if candidate.startswith(prefix):
            return candidate[len(prefix) :]
    return None
