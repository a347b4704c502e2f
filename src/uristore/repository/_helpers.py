"""Whole-blob helpers built on the registry and the stream protocols."""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
from typing import TYPE_CHECKING

from uristore.errors import OperationNotSupportedError
from uristore.repository._protocols import WriteableRepository
from uristore.repository._registry import for_uri

if TYPE_CHECKING:
    from uristore.repository._protocols import URIWriteCloser
    from uristore.uri import URI


def writeable_repository_for(uri: URI) -> WriteableRepository:
    """Return the repository serving ``uri``, requiring write support."""
    repository = for_uri(uri)
    if not isinstance(repository, WriteableRepository):
        msg = f"Repository for scheme {uri.scheme!r} is not writeable."
        raise OperationNotSupportedError(msg)
    return repository


def write_all(writer: URIWriteCloser, data: bytes | bytearray | memoryview) -> int:
    """Write every byte of ``data``, looping over short writes."""
    view = memoryview(data)
    total = len(view)
    if not total:
        # Writers truncate on their first call, even an empty one.
        writer.write(view)
    while view:
        written = writer.write(view)
        if not written:
            msg = f"Writer for {writer.uri} accepted no bytes."
            raise OSError(msg)
        view = view[written:]
    return total


def read_bytes(uri: URI) -> bytes:
    """Read the full content stored at ``uri``."""
    repository = for_uri(uri)
    with closing(repository.reader(uri)) as reader:
        return reader.read()


def write_bytes(uri: URI, data: bytes | bytearray | memoryview) -> int:
    """Replace the content stored at ``uri`` with ``data``."""
    repository = writeable_repository_for(uri)
    with closing(repository.writer(uri)) as writer:
        return write_all(writer, data)


def put_file(path: str | Path, uri: URI) -> URI:
    """Store a local file's bytes at ``uri``.

    Read the file at the given path and write its contents through whichever
    repository serves ``uri``.
    """
    write_bytes(uri, Path(path).read_bytes())
    return uri
