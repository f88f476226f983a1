"""Contiguous changed region with context."""

from dataclasses import dataclass

from .DiffLine import DiffLine


@dataclass(frozen=True)
class Hunk:
    """A changed region plus bounded context, in unified-diff coordinates."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: tuple[DiffLine, ...]

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"

    def header_line(self) -> DiffLine:
        return DiffLine.header(self.header)
