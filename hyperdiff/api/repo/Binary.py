"""Binary content found at a ref."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Binary:
    """The path exists but its content is not text; it is never diffed.

    ``digest`` is the git blob id of the bytes, so two Binary results compare
    equal exactly when their content does.
    """

    size: int
    digest: str = ""
