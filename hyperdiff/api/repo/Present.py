"""Text content found at a ref."""

from dataclasses import dataclass

from .LineRecord import LineRecord


@dataclass(frozen=True)
class Present:
    """The path exists and holds UTF-8 text."""

    lines: tuple[LineRecord, ...]

    @property
    def texts(self) -> list[str]:
        """Line texts in order."""
        return [line.text for line in self.lines]
