"""Line diff algorithm and output assembly.

``DiffService`` and ``FileDiff`` depend on the cache package and are imported
from their modules directly.
"""

from .assemble_complete import assemble_complete
from .assemble_hunks import assemble_hunks
from .build_hunks import build_hunks
from .context_around import context_around
from .Delete import Delete
from .DiffLine import DiffLine
from .DiffLineType import DiffLineType
from .DiffStats import DiffStats
from .EditOp import EditOp, EditScript
from .Equal import Equal
from .Hunk import Hunk
from .Insert import Insert
from .LineMapping import LineMapping
from .myers_diff import myers_diff

__all__ = [
    "Delete",
    "DiffLine",
    "DiffLineType",
    "DiffStats",
    "EditOp",
    "EditScript",
    "Equal",
    "Hunk",
    "Insert",
    "LineMapping",
    "assemble_complete",
    "assemble_hunks",
    "build_hunks",
    "context_around",
    "myers_diff",
]
