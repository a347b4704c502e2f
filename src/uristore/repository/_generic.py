"""Generic path algebra and stream-based copy/move shared by repositories.

Everything here is expressed in terms of URI strings and the repository
protocols, so any backend can delegate to it.
"""

from __future__ import annotations

import posixpath
from contextlib import closing
from typing import TYPE_CHECKING

import structlog

from uristore.config import settings
from uristore.errors import InvalidPathError, URIRootError
from uristore.repository._helpers import writeable_repository_for, write_all
from uristore.repository._registry import for_uri

if TYPE_CHECKING:
    from uristore.uri import URI

logger = structlog.get_logger(__name__)


def generic_parent(uri: URI) -> URI:
    """Return the URI one level above ``uri``.

    The parent is computed from the path string alone; it need not exist.
    """
    path = uri.path
    if path in ("", "/"):
        raise URIRootError(uri)
    if path.endswith("/"):
        path = path[:-1]
    parent = posixpath.dirname(path)
    if not parent:
        raise URIRootError(uri)
    return uri.with_path(parent)


def generic_child(uri: URI, component: str) -> URI:
    """Return ``uri`` extended by ``component`` with a single separator."""
    component = component.lstrip("/")
    if not component:
        raise InvalidPathError(component)
    base = uri.path if uri.path.endswith("/") else f"{uri.path}/"
    return uri.with_path(base + component)


def generic_copy(source: URI, destination: URI, *, chunk_size: int | None = None) -> None:
    """Copy ``source`` to ``destination`` through their repositories' streams.

    Copying a URI onto itself is a no-op.
    """
    if chunk_size is None:
        chunk_size = settings.copy_chunk_size
    if chunk_size <= 0:
        msg = "chunk_size must be > 0."
        raise ValueError(msg)
    if source == destination:
        return

    source_repository = for_uri(source)
    destination_repository = writeable_repository_for(destination)

    copied = 0
    with (
        closing(source_repository.reader(source)) as reader,
        closing(destination_repository.writer(destination)) as writer,
    ):
        # Truncate or create the destination even when the source is empty.
        writer.write(b"")
        while True:
            chunk = reader.read(chunk_size)
            if not chunk:
                break
            copied += write_all(writer, chunk)

    logger.debug("generic_copy_completed", source=str(source), destination=str(destination), size=copied)


def generic_move(source: URI, destination: URI) -> None:
    """Move ``source`` to ``destination`` by copying then deleting the source.

    If the copy fails the source is left untouched and the error propagates.
    """
    source_repository = writeable_repository_for(source)
    if source == destination:
        return

    try:
        generic_copy(source, destination)
    except Exception:
        logger.exception("generic_move_failed", source=str(source), destination=str(destination))
        raise

    source_repository.delete(source)
    logger.debug("generic_move_completed", source=str(source), destination=str(destination))
