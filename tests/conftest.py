"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from uristore.repository import FileRepository, InMemoryRepository, _registry, register


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test an empty repository registry."""
    monkeypatch.setattr(_registry, "_repositories", {})
    yield


@pytest.fixture
def memory_repo() -> InMemoryRepository:
    """Return an InMemoryRepository registered for the ``mem`` scheme."""
    repository = InMemoryRepository("mem")
    register("mem", repository)
    return repository


@pytest.fixture
def file_repo() -> FileRepository:
    """Return a FileRepository registered for the ``file`` scheme."""
    repository = FileRepository()
    register("file", repository)
    return repository
