"""Typed errors raised by the diff engine."""

from .CacheComputationFailed import CacheComputationFailed
from .DiffError import DiffError
from .InvalidPathError import InvalidPathError
from .RefNotFoundError import RefNotFoundError
from .RepositoryError import RepositoryError
from .Utf8DecodeError import Utf8DecodeError

__all__ = [
    "CacheComputationFailed",
    "DiffError",
    "InvalidPathError",
    "RefNotFoundError",
    "RepositoryError",
    "Utf8DecodeError",
]
