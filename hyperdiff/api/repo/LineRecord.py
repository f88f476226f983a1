"""Single line of file content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRecord:
    """One line with its terminator removed; ``index`` starts at 1."""

    index: int
    text: str
