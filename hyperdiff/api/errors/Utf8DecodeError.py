"""Text decoding error."""

from .DiffError import DiffError


class Utf8DecodeError(DiffError):
    """Raised when bytes handed to a text API are not valid UTF-8."""

    def __init__(self, position: int, reason: str):
        self.position = position
        super().__init__(f"Content is not valid UTF-8 at byte {position}: {reason}")
