"""Turn raw bytes into a ContentResult."""

from ..errors.Utf8DecodeError import Utf8DecodeError
from .Absent import Absent
from .Binary import Binary
from .blob_id import blob_id
from .ContentResult import ContentResult
from .decode_text import decode_text
from .Present import Present
from .split_lines import split_lines


def classify_content(data: bytes | None) -> ContentResult:
    """Classify blob bytes.

    Args:
        data: Blob content, or None when the path does not exist

    Returns:
        Absent for None, Binary for content with NUL bytes or invalid UTF-8,
        otherwise Present with the split lines
    """
    if data is None:
        return Absent()
    if b"\x00" in data:
        return Binary(size=len(data), digest=blob_id(data))
    try:
        text = decode_text(data)
    except Utf8DecodeError:
        return Binary(size=len(data), digest=blob_id(data))
    return Present(lines=split_lines(text))
