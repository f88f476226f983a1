"""Line splitting with terminator normalization."""

from .LineRecord import LineRecord


def split_lines(text: str) -> tuple[LineRecord, ...]:
    """Split ``text`` on ``\\n`` and ``\\r\\n`` into numbered records.

    Terminators are dropped, so the same text with either line ending yields
    identical records. A trailing terminator does not start an extra line.
    Other Unicode line breaks are ordinary characters here.
    """
    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(
        LineRecord(index=number, text=part[:-1] if part.endswith("\r") else part)
        for number, part in enumerate(parts, start=1)
    )
