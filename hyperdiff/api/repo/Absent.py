"""Path missing at a ref."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Absent:
    """The path does not exist at the ref (added or deleted file)."""
