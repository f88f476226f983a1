"""Configuration models."""

from .CacheConfig import CacheConfig
from .DiffConfig import DiffConfig
from .HyperdiffConfig import HyperdiffConfig
from .LogConfig import LogConfig

__all__ = [
    "CacheConfig",
    "DiffConfig",
    "HyperdiffConfig",
    "LogConfig",
]
