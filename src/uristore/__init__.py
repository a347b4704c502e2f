"""uristore: URI-addressed storage repositories with stream handles."""

import importlib.metadata as importlib_metadata

from uristore.errors import (
    InvalidPathError,
    InvalidURIError,
    NotFoundError,
    OperationNotSupportedError,
    RepositoryNotFoundError,
    URIRootError,
    UristoreError,
)
from uristore.repository import (
    FileRepository,
    InMemoryRepository,
    Repository,
    StreamHandle,
    WriteableRepository,
    for_uri,
    register,
    unregister,
)
from uristore.uri import URI, parse_uri


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("uristore")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "URI",
    "FileRepository",
    "InMemoryRepository",
    "InvalidPathError",
    "InvalidURIError",
    "NotFoundError",
    "OperationNotSupportedError",
    "Repository",
    "RepositoryNotFoundError",
    "StreamHandle",
    "URIRootError",
    "UristoreError",
    "WriteableRepository",
    "for_uri",
    "parse_uri",
    "register",
    "unregister",
]
