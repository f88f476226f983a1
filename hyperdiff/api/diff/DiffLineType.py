"""Kinds of diff output lines."""

from enum import Enum


class DiffLineType(str, Enum):
    """Role of a DiffLine in the output."""

    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    HEADER = "header"
