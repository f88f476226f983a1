"""Edit script operations."""

from .Delete import Delete
from .Equal import Equal
from .Insert import Insert

EditOp = Equal | Insert | Delete

# Ordered operations covering every old and new line exactly once.
EditScript = tuple[EditOp, ...]

__all__ = ["EditOp", "EditScript"]
