"""Output shapes of a diff."""

from enum import Enum


class DiffMode(str, Enum):
    """Which assembler produced a diff."""

    HUNK = "hunk"
    COMPLETE = "complete"
