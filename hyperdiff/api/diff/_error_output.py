"""Output dict for a failed diff command."""

from typing import Any


def _error_output(path: str, exc: Exception) -> dict[str, Any]:
    return {"path": path, "error": {"type": type(exc).__name__, "message": str(exc)}}
