"""Shared computation failure."""

from typing import Any

from .DiffError import DiffError


class CacheComputationFailed(DiffError):
    """Raised to every caller of a shared computation that failed.

    ``cause`` holds the original error; nothing is cached for ``key``.
    """

    def __init__(self, key: Any, cause: BaseException):
        self.key = key
        self.cause = cause
        super().__init__(f"Diff computation failed: {type(cause).__name__}: {cause}")
