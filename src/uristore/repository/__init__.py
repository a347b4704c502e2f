"""Repositories: URI-addressed storage backends and their shared algorithms."""

from uristore.repository._file import FileRepository, URIFileIO
from uristore.repository._generic import generic_child, generic_copy, generic_move, generic_parent
from uristore.repository._helpers import put_file, read_bytes, write_bytes
from uristore.repository._memory import InMemoryRepository
from uristore.repository._protocols import (
    CopyableRepository,
    HierarchicalRepository,
    ListableRepository,
    MovableRepository,
    Repository,
    URIReadCloser,
    URIWriteCloser,
    WriteableRepository,
)
from uristore.repository._registry import for_scheme, for_uri, register, registered_schemes, unregister
from uristore.repository._stream import HandleMode, StreamHandle

__all__ = [
    "CopyableRepository",
    "FileRepository",
    "HandleMode",
    "HierarchicalRepository",
    "InMemoryRepository",
    "ListableRepository",
    "MovableRepository",
    "Repository",
    "StreamHandle",
    "URIFileIO",
    "URIReadCloser",
    "URIWriteCloser",
    "WriteableRepository",
    "for_scheme",
    "for_uri",
    "generic_child",
    "generic_copy",
    "generic_move",
    "generic_parent",
    "put_file",
    "read_bytes",
    "register",
    "registered_schemes",
    "unregister",
    "write_bytes",
]
