"""Scheme-keyed registry resolving URIs to the repository that serves them."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog

from uristore.errors import RepositoryNotFoundError

if TYPE_CHECKING:
    from uristore.repository._protocols import Repository
    from uristore.uri import URI

logger = structlog.get_logger(__name__)

_lock = threading.Lock()
_repositories: dict[str, Repository] = {}


def register(scheme: str, repository: Repository) -> None:
    """Serve ``scheme`` from ``repository``.

    A repository previously registered for the same scheme is destroyed.
    """
    scheme = scheme.lower()
    with _lock:
        previous = _repositories.get(scheme)
        _repositories[scheme] = repository
    if previous is not None and previous is not repository:
        previous.destroy(scheme)
    logger.debug("repository_registered", scheme=scheme, repository=type(repository).__name__)


def unregister(scheme: str) -> None:
    """Stop serving ``scheme``; unknown schemes are ignored."""
    scheme = scheme.lower()
    with _lock:
        previous = _repositories.pop(scheme, None)
    if previous is not None:
        previous.destroy(scheme)
        logger.debug("repository_unregistered", scheme=scheme)


def for_scheme(scheme: str) -> Repository:
    """Return the repository registered for ``scheme``."""
    scheme = scheme.lower()
    with _lock:
        repository = _repositories.get(scheme)
    if repository is None:
        raise RepositoryNotFoundError(scheme)
    return repository


def for_uri(uri: URI) -> Repository:
    """Return the repository serving ``uri``."""
    return for_scheme(uri.scheme)


def registered_schemes() -> tuple[str, ...]:
    """Return every registered scheme, sorted."""
    with _lock:
        return tuple(sorted(_repositories))
