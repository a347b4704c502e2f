"""URI: immutable value type for repository addresses."""

from __future__ import annotations

import mimetypes
import posixpath
from dataclasses import dataclass, replace
from urllib.parse import urlsplit

from uristore.errors import InvalidURIError

_DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class URI:
    """A parsed ``scheme://authority/path?query#fragment`` address."""

    scheme: str
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    def __str__(self) -> str:
        """Render the URI back to text."""
        text = f"{self.scheme}://{self.authority}{self.path}"
        if self.query:
            text += f"?{self.query}"
        if self.fragment:
            text += f"#{self.fragment}"
        return text

    @property
    def name(self) -> str:
        """Return the last path component, ignoring a trailing separator."""
        return posixpath.basename(self.path.rstrip("/"))

    @property
    def extension(self) -> str:
        """Return the file extension including its leading dot, or ``""``."""
        return posixpath.splitext(self.name)[1]

    @property
    def mime_type(self) -> str:
        """Guess the media type from the extension."""
        media_type, _ = mimetypes.guess_type(self.name)
        return media_type or _DEFAULT_MIME_TYPE

    def with_path(self, path: str) -> URI:
        """Return a copy of this URI addressing another path."""
        return replace(self, path=path)


def parse_uri(text: str) -> URI:
    """Parse ``scheme://path`` text into a URI.

    The scheme is normalized to lower case. Text without a scheme is rejected.
    """
    if not text:
        raise InvalidURIError(text)
    try:
        parts = urlsplit(text)
    except ValueError as exc:
        raise InvalidURIError(text) from exc
    if not parts.scheme:
        raise InvalidURIError(text)
    return URI(
        scheme=parts.scheme.lower(),
        authority=parts.netloc,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )
