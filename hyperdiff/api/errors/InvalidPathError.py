"""Invalid path error."""

from .DiffError import DiffError


class InvalidPathError(DiffError, ValueError):
    """Raised when a path cannot be expressed relative to the repository root."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")
