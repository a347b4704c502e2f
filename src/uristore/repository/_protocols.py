"""Repository capability protocols shared by every storage backend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uristore.uri import URI


@runtime_checkable
class URIReadCloser(Protocol):
    """Sequential reader bound to one URI."""

    @property
    def uri(self) -> URI:
        """Return the URI this reader was opened on."""
        ...

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes; ``b""`` once exhausted."""
        ...

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        """Fill ``buffer`` and return the number of bytes copied."""
        ...

    def close(self) -> None:
        """Release the reader."""
        ...


@runtime_checkable
class URIWriteCloser(Protocol):
    """Sequential writer bound to one URI."""

    @property
    def uri(self) -> URI:
        """Return the URI this writer was opened on."""
        ...

    def write(self, data: bytes | bytearray | memoryview) -> int | None:
        """Write ``data`` and return the number of bytes written."""
        ...

    def close(self) -> None:
        """Release the writer."""
        ...


@runtime_checkable
class Repository(Protocol):
    """Minimal read-only repository.

    Implementations answer for one or more URI schemes and are looked up
    through the registry.
    """

    def exists(self, uri: URI) -> bool:
        """Return whether ``uri`` refers to an existing resource."""
        ...

    def reader(self, uri: URI) -> URIReadCloser:
        """Open ``uri`` for sequential reading."""
        ...

    def can_read(self, uri: URI) -> bool:
        """Return whether ``uri`` can be opened for reading."""
        ...

    def destroy(self, scheme: str) -> None:
        """Release resources held for ``scheme``."""
        ...


@runtime_checkable
class WriteableRepository(Repository, Protocol):
    """Repository that can create, replace and delete resources."""

    def writer(self, uri: URI) -> URIWriteCloser:
        """Open ``uri`` for sequential writing, replacing its content."""
        ...

    def can_write(self, uri: URI) -> bool:
        """Return whether ``uri`` can be opened for writing."""
        ...

    def delete(self, uri: URI) -> None:
        """Delete ``uri``; absent resources are ignored."""
        ...


@runtime_checkable
class HierarchicalRepository(Repository, Protocol):
    """Repository with parent/child navigation."""

    def parent(self, uri: URI) -> URI:
        """Return the parent of ``uri``."""
        ...

    def child(self, uri: URI, component: str) -> URI:
        """Return ``uri`` extended by one path component."""
        ...


@runtime_checkable
class CopyableRepository(Repository, Protocol):
    """Repository that can copy resources."""

    def copy(self, source: URI, destination: URI) -> None:
        """Copy ``source`` to ``destination``."""
        ...


@runtime_checkable
class MovableRepository(Repository, Protocol):
    """Repository that can move resources."""

    def move(self, source: URI, destination: URI) -> None:
        """Move ``source`` to ``destination``."""
        ...


@runtime_checkable
class ListableRepository(Repository, Protocol):
    """Repository that can enumerate the children of a resource."""

    def can_list(self, uri: URI) -> bool:
        """Return whether ``uri`` can be listed."""
        ...

    def list(self, uri: URI) -> tuple[URI, ...]:
        """Return the immediate children of ``uri``."""
        ...
