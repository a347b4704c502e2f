"""FileRepository: local-disk repository for ``file://`` URIs."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from uristore.errors import InvalidPathError, NotFoundError
from uristore.repository._generic import generic_child, generic_copy, generic_move, generic_parent

if TYPE_CHECKING:
    from uristore.uri import URI

logger = structlog.get_logger(__name__)


class URIFileIO(io.FileIO):
    """``io.FileIO`` that remembers the URI it was opened from."""

    def __init__(self, path: Path, mode: str, uri: URI) -> None:
        """Open ``path`` in ``mode`` on behalf of ``uri``."""
        super().__init__(path, mode)
        self._uri = uri

    @property
    def uri(self) -> URI:
        """Return the URI this file was opened from."""
        return self._uri


class FileRepository:
    """Repository over the local filesystem.

    URI paths are used verbatim as filesystem paths, so ``file:///tmp/a.txt``
    addresses ``/tmp/a.txt``.
    """

    def __init__(self, scheme: str = "file") -> None:
        """Initialize for ``scheme`` (``file`` unless overridden)."""
        self._scheme = scheme.lower()

    @property
    def scheme(self) -> str:
        """Return the scheme this repository answers to."""
        return self._scheme

    def _local_path(self, uri: URI) -> Path:
        """Resolve a URI to a local path, rejecting an empty one."""
        if not uri.path:
            raise InvalidPathError(uri.path)
        return Path(uri.path)

    def exists(self, uri: URI) -> bool:
        """Check whether a file or directory exists at the URI."""
        return self._local_path(uri).exists()

    def can_read(self, uri: URI) -> bool:
        """Check whether the URI names a readable regular file."""
        path = self._local_path(uri)
        return path.is_file() and os.access(path, os.R_OK)

    def can_write(self, uri: URI) -> bool:
        """Check whether the file can be written, or created in its directory."""
        path = self._local_path(uri)
        if path.exists():
            return path.is_file() and os.access(path, os.W_OK)
        return path.parent.is_dir() and os.access(path.parent, os.W_OK)

    def can_list(self, uri: URI) -> bool:
        """Only directories can be listed."""
        return self._local_path(uri).is_dir()

    def reader(self, uri: URI) -> URIFileIO:
        """Open an existing file for reading."""
        path = self._local_path(uri)
        if not path.is_file():
            raise NotFoundError(uri.path)
        return URIFileIO(path, "r", uri)

    def writer(self, uri: URI) -> URIFileIO:
        """Open a file for writing, truncating or creating it."""
        path = self._local_path(uri)
        if not path.parent.is_dir():
            raise NotFoundError(str(path.parent))
        return URIFileIO(path, "w", uri)

    def delete(self, uri: URI) -> None:
        """Delete a file or an empty directory; missing paths are ignored."""
        path = self._local_path(uri)
        if path.is_dir():
            path.rmdir()
        elif path.exists() or path.is_symlink():
            path.unlink(missing_ok=True)
        else:
            return
        logger.debug("file_repository_entry_deleted", path=uri.path)

    def destroy(self, scheme: str) -> None:
        """Nothing to release."""

    def parent(self, uri: URI) -> URI:
        """Return the parent URI; it need not exist."""
        return generic_parent(uri)

    def child(self, uri: URI, component: str) -> URI:
        """Return ``uri`` extended by one component."""
        return generic_child(uri, component)

    def copy(self, source: URI, destination: URI) -> None:
        """Copy through the stream handles of both repositories."""
        generic_copy(source, destination)

    def move(self, source: URI, destination: URI) -> None:
        """Copy, then delete the source."""
        generic_move(source, destination)

    def list(self, uri: URI) -> tuple[URI, ...]:
        """Return the directory's entries as child URIs, sorted by name."""
        path = self._local_path(uri)
        if not path.is_dir():
            raise NotFoundError(uri.path)
        return tuple(generic_child(uri, entry.name) for entry in sorted(path.iterdir()))
