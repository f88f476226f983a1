"""Annotated diff output line."""

from dataclasses import dataclass
from typing import Any

from .DiffLineType import DiffLineType


@dataclass(frozen=True)
class DiffLine:
    """One line of diff output with its position in the old and new file.

    Added lines carry only a new line number, removed lines only an old one,
    context lines both, and header lines neither (their content is the header).
    """

    old_line_number: int | None
    new_line_number: int | None
    content: str
    line_type: DiffLineType

    def __post_init__(self):
        has_old = self.old_line_number is not None
        has_new = self.new_line_number is not None
        expected = {
            DiffLineType.CONTEXT: (True, True),
            DiffLineType.ADDED: (False, True),
            DiffLineType.REMOVED: (True, False),
            DiffLineType.HEADER: (False, False),
        }[DiffLineType(self.line_type)]
        if (has_old, has_new) != expected:
            raise ValueError(
                f"{DiffLineType(self.line_type).value} line has old_line_number={self.old_line_number!r}, "
                f"new_line_number={self.new_line_number!r}"
            )

    @classmethod
    def context(cls, content: str, old_line_number: int, new_line_number: int) -> "DiffLine":
        return cls(old_line_number, new_line_number, content, DiffLineType.CONTEXT)

    @classmethod
    def added(cls, content: str, new_line_number: int) -> "DiffLine":
        return cls(None, new_line_number, content, DiffLineType.ADDED)

    @classmethod
    def removed(cls, content: str, old_line_number: int) -> "DiffLine":
        return cls(old_line_number, None, content, DiffLineType.REMOVED)

    @classmethod
    def header(cls, content: str) -> "DiffLine":
        return cls(None, None, content, DiffLineType.HEADER)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the process-boundary shape."""
        return {
            "old_line_number": self.old_line_number,
            "new_line_number": self.new_line_number,
            "content": self.content,
            "line_type": DiffLineType(self.line_type).value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiffLine":
        return cls(
            old_line_number=data.get("old_line_number"),
            new_line_number=data.get("new_line_number"),
            content=data["content"],
            line_type=DiffLineType(data["line_type"]),
        )
