"""Strict UTF-8 decoding."""

from ..errors.Utf8DecodeError import Utf8DecodeError


def decode_text(data: bytes) -> str:
    """Decode ``data`` as UTF-8.

    Raises:
        Utf8DecodeError: If ``data`` is not valid UTF-8
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(exc.start, exc.reason) from exc
