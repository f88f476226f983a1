"""Content-addressed id for raw bytes."""

import hashlib


def blob_id(data: bytes) -> str:
    """SHA-1 of ``data`` in git blob form, so it matches ``git hash-object``."""
    header = f"blob {len(data)}\0".encode()
    return hashlib.sha1(header + data).hexdigest()
