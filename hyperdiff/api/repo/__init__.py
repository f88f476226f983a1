"""Repository access: refs, paths and blob content."""

from .Absent import Absent
from .Binary import Binary
from .blob_id import blob_id
from .classify_content import classify_content
from .ContentResult import ContentResult
from .decode_text import decode_text
from .GitObjectStore import GitObjectStore
from .LineRecord import LineRecord
from .ObjectResolver import ObjectResolver
from .ObjectStore import ObjectStore
from .Present import Present
from .RepoPath import RepoPath
from .split_lines import split_lines

__all__ = [
    "Absent",
    "Binary",
    "ContentResult",
    "GitObjectStore",
    "LineRecord",
    "ObjectResolver",
    "ObjectStore",
    "Present",
    "RepoPath",
    "blob_id",
    "classify_content",
    "decode_text",
    "split_lines",
]
