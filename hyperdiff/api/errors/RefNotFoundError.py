"""Unresolvable ref error."""

from .DiffError import DiffError


class RefNotFoundError(DiffError):
    """Raised when a ref string does not name any commit."""

    def __init__(self, ref: str, detail: str | None = None):
        self.ref = ref
        message = f"Ref not found: {ref!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
