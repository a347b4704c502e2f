"""Typed errors for uristore."""


class UristoreError(Exception):
    """Base exception for all uristore errors."""


class InvalidPathError(UristoreError):
    """Raised when an operation is given an empty or malformed path."""

    def __init__(self, path: str) -> None:
        """Initialize with the rejected path."""
        self.path = path
        super().__init__(f"Invalid path: {path!r}")


class NotFoundError(UristoreError):
    """Raised when an operation requires an entry that does not exist."""

    def __init__(self, path: str) -> None:
        """Initialize with the missing path."""
        self.path = path
        super().__init__(f"Path not found: {path!r}")


class InvalidURIError(UristoreError):
    """Raised when text cannot be parsed into a URI."""

    def __init__(self, text: str) -> None:
        """Initialize with the unparseable text."""
        self.text = text
        super().__init__(f"Invalid URI: {text!r}")


class URIRootError(UristoreError):
    """Raised when the parent of a root URI is requested."""

    def __init__(self, uri: object) -> None:
        """Initialize with the root URI."""
        self.uri = uri
        super().__init__(f"URI has no parent: {uri}")


class RepositoryNotFoundError(UristoreError):
    """Raised when no repository is registered for a scheme."""

    def __init__(self, scheme: str) -> None:
        """Initialize with the unregistered scheme."""
        self.scheme = scheme
        super().__init__(f"No repository registered for scheme: {scheme!r}")


class OperationNotSupportedError(UristoreError):
    """Raised when a repository or handle lacks the requested capability."""
