"""Outcome of reading a path at a ref."""

from .Absent import Absent
from .Binary import Binary
from .Present import Present

ContentResult = Present | Absent | Binary

__all__ = ["ContentResult"]
