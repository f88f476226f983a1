"""Object store failure."""

from .DiffError import DiffError


class RepositoryError(DiffError):
    """Raised when the underlying repository cannot be opened or read."""
