"""StreamHandle: cursor-based reader/writer over one InMemoryRepository entry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from uristore.errors import NotFoundError, OperationNotSupportedError
from uristore.uri import URI

if TYPE_CHECKING:
    from types import TracebackType

    from uristore.repository._memory import InMemoryRepository

HandleMode = Literal["read", "write"]


class StreamHandle:
    """Sequential access to the blob stored under one path.

    The handle does not own any bytes. Every call looks the blob up in the
    repository again, so a blob deleted after open surfaces as
    ``NotFoundError`` on the next read.

    Closing resets both cursors and the first-write flag; the next I/O call on
    a closed handle starts a fresh session on the same path.
    """

    __slots__ = ("_at_eof", "_closed", "_has_written", "_mode", "_path", "_read_cursor", "_repository", "_write_cursor")

    def __init__(self, repository: InMemoryRepository, path: str, mode: HandleMode) -> None:
        """Bind the handle to ``path`` in ``repository`` for ``mode`` access."""
        self._repository = repository
        self._path = path
        self._mode: HandleMode = mode
        self._read_cursor = 0
        self._write_cursor = 0
        self._has_written = False
        self._at_eof = False
        self._closed = False

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"StreamHandle(path={self._path!r}, mode={self._mode!r}, closed={self._closed})"

    def __enter__(self) -> StreamHandle:
        """Return self for use in ``with`` blocks."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the handle on block exit."""
        self.close()

    @property
    def path(self) -> str:
        """Return the bound path."""
        return self._path

    @property
    def repository(self) -> InMemoryRepository:
        """Return the repository the handle reads from or writes to."""
        return self._repository

    @property
    def mode(self) -> HandleMode:
        """Return ``"read"`` or ``"write"``."""
        return self._mode

    @property
    def read_cursor(self) -> int:
        """Return the offset of the next byte to read."""
        return self._read_cursor

    @property
    def write_cursor(self) -> int:
        """Return the offset of the next byte to write."""
        return self._write_cursor

    @property
    def has_written(self) -> bool:
        """Return whether this session has truncated the blob yet."""
        return self._has_written

    @property
    def at_eof(self) -> bool:
        """Return whether the last read reached the end of the blob."""
        return self._at_eof

    @property
    def closed(self) -> bool:
        """Return whether the handle is between sessions."""
        return self._closed

    @property
    def uri(self) -> URI:
        """Rebuild the full ``scheme://path`` URI of the handle."""
        return URI(scheme=self._repository.scheme, path=self._path)

    def _start_io(self, mode: HandleMode) -> None:
        """Check the handle mode and reopen a closed handle."""
        if self._mode != mode:
            msg = f"Handle for {self._path!r} was opened for {self._mode}, not {mode}."
            raise OperationNotSupportedError(msg)
        self._closed = False

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Copy bytes from the read cursor into ``buffer``.

        Return the number of bytes copied. ``at_eof`` is set by the same call
        that reaches the end of the blob; reading an exhausted stream returns
        ``0`` and leaves it set.
        """
        self._start_io("read")
        view = memoryview(buffer).cast("B")
        with self._repository._lock:
            data = self._repository._entries.get(self._path)
            if data is None:
                raise NotFoundError(self._path)
            start = self._read_cursor
            count = max(0, min(len(view), len(data) - start))
            view[:count] = data[start : start + count]
            self._read_cursor = start + count
            self._at_eof = self._read_cursor >= len(data)
        return count

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left when ``size`` < 0."""
        if size < 0:
            with self._repository._lock:
                data = self._repository._entries.get(self._path)
                remaining = 0 if data is None else len(data) - self._read_cursor
            size = max(remaining, 0)
        buffer = bytearray(size)
        count = self.readinto(buffer)
        return bytes(buffer[:count])

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` at the write cursor and return its length.

        The first write of a session truncates the blob, creating the entry
        if needed. Later writes extend the blob with zero bytes up to the end
        of the written range before copying.
        """
        self._start_io("write")
        payload = memoryview(data).cast("B")
        with self._repository._lock:
            entries = self._repository._entries
            if not self._has_written:
                entries[self._path] = bytearray()
                self._has_written = True

            blob = entries.get(self._path)
            if not isinstance(blob, bytearray):
                blob = bytearray(b"" if blob is None else blob)
                entries[self._path] = blob

            start = self._write_cursor
            end = start + len(payload)
            if len(blob) < end:
                blob.extend(bytes(end - len(blob)))
            blob[start:end] = payload
            self._write_cursor = end
        return len(payload)

    def close(self) -> None:
        """End the session and reset cursors. Safe to call repeatedly."""
        self._read_cursor = 0
        self._write_cursor = 0
        self._has_written = False
        self._at_eof = False
        self._closed = True
