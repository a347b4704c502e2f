"""InMemoryRepository: dict-based hierarchical repository for development and testing."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog

from uristore.config import settings
from uristore.errors import InvalidPathError, NotFoundError
from uristore.repository._generic import generic_child, generic_copy, generic_move, generic_parent
from uristore.repository._stream import StreamHandle
from uristore.uri import URI

if TYPE_CHECKING:
    from collections.abc import Mapping


logger = structlog.get_logger(__name__)

_SEPARATOR = "/"


def _checked_path(uri: URI) -> str:
    """Return the URI's path, rejecting an empty one."""
    if not uri.path:
        raise InvalidPathError(uri.path)
    return uri.path


def _component_count(path: str) -> int:
    """Count ``/``-separated components, ignoring one trailing separator."""
    count = len(path.split(_SEPARATOR))
    if path.endswith(_SEPARATOR):
        count -= 1
    return count


class InMemoryRepository:
    """In-memory repository emulating a directory tree over a flat path map.

    Known quirks of the emulation:

    - the parent of an existing path does not necessarily exist;
    - listing is proportional to the number of stored paths, not to the
      number of children of the listed path.

    Register an instance for its scheme with ``uristore.repository.register``.
    """

    def __init__(self, scheme: str | None = None) -> None:
        """Initialize an empty repository answering to ``scheme``."""
        if scheme is None:
            scheme = settings.default_scheme
        if not scheme:
            msg = "scheme must be a non-empty string."
            raise ValueError(msg)
        self._scheme = scheme.lower()
        self._entries: dict[str, bytes | bytearray] = {}
        self._lock = threading.RLock()
        logger.debug("memory_repository_created", scheme=self._scheme)

    @classmethod
    def from_preloaded(
        cls,
        entries_by_path: Mapping[str, bytes],
        *,
        scheme: str | None = None,
    ) -> InMemoryRepository:
        """Build a repository holding a copy of ``entries_by_path``."""
        repository = cls(scheme)
        for path, data in entries_by_path.items():
            repository._entries[path] = bytearray(data)
        return repository

    @property
    def scheme(self) -> str:
        """Return the scheme this repository answers to."""
        return self._scheme

    @property
    def data(self) -> dict[str, bytes | bytearray]:
        """Return the live path-to-bytes mapping, for direct test injection."""
        return self._entries

    def exists(self, uri: URI) -> bool:
        """Check whether an entry is stored under the URI's exact path."""
        path = _checked_path(uri)
        with self._lock:
            return path in self._entries

    def can_read(self, uri: URI) -> bool:
        """Only stored entries are readable."""
        return self.exists(uri)

    def can_write(self, uri: URI) -> bool:
        """Every non-empty path is writeable."""
        _checked_path(uri)
        return True

    def can_list(self, uri: URI) -> bool:
        """Treat any stored entry as a potential container."""
        return self.exists(uri)

    def reader(self, uri: URI) -> StreamHandle:
        """Open a stored entry for reading."""
        path = _checked_path(uri)
        with self._lock:
            if path not in self._entries:
                raise NotFoundError(path)
        return StreamHandle(self, path, "read")

    def writer(self, uri: URI) -> StreamHandle:
        """Open a path for writing; the entry is created on first write."""
        path = _checked_path(uri)
        return StreamHandle(self, path, "write")

    def delete(self, uri: URI) -> None:
        """Remove the entry if present."""
        with self._lock:
            removed = self._entries.pop(uri.path, None)
        if removed is not None:
            logger.debug("memory_repository_entry_deleted", scheme=self._scheme, path=uri.path)

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
        """Return the URIs of entries exactly one component below ``uri``.

        The queried path is given one trailing separator so that ``/a/b``
        matches under ``/a`` but ``/abc`` does not. Order follows the
        underlying mapping and is not guaranteed.
        """
        prefix = _checked_path(uri)
        if not prefix.endswith(_SEPARATOR):
            prefix += _SEPARATOR
        # The trailing separator's empty component counts towards the prefix.
        depth = len(prefix.split(_SEPARATOR))

        with self._lock:
            paths = tuple(self._entries)
        return tuple(
            URI(scheme=self._scheme, path=path)
            for path in paths
            if path.startswith(prefix) and _component_count(path) == depth
        )
