"""Tests for FileRepository."""

from pathlib import Path

import pytest

from uristore.errors import InvalidPathError, NotFoundError
from uristore.repository import (
    FileRepository,
    InMemoryRepository,
    ListableRepository,
    MovableRepository,
    URIFileIO,
    WriteableRepository,
    read_bytes,
    write_bytes,
)
from uristore.uri import URI, parse_uri


def _uri(path: Path) -> URI:
    return parse_uri(f"file://{path}")


def test_satisfies_protocols() -> None:
    repo = FileRepository()
    assert isinstance(repo, WriteableRepository)
    assert isinstance(repo, ListableRepository)
    assert isinstance(repo, MovableRepository)


def test_round_trip(file_repo: FileRepository, tmp_path: Path) -> None:
    uri = _uri(tmp_path / "a.txt")
    with file_repo.writer(uri) as writer:
        writer.write(b"hello ")
        writer.write(b"disk")
    with file_repo.reader(uri) as reader:
        assert reader.read() == b"hello disk"


def test_handles_carry_uri(file_repo: FileRepository, tmp_path: Path) -> None:
    uri = _uri(tmp_path / "a.txt")
    with file_repo.writer(uri) as writer:
        assert isinstance(writer, URIFileIO)
        assert writer.uri == uri


def test_second_writer_truncates(file_repo: FileRepository, tmp_path: Path) -> None:
    uri = _uri(tmp_path / "a.txt")
    write_bytes(uri, b"long original")
    write_bytes(uri, b"short")
    assert read_bytes(uri) == b"short"


def test_exists_and_capabilities(file_repo: FileRepository, tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    present.write_bytes(b"x")
    missing = tmp_path / "missing.txt"

    assert file_repo.exists(_uri(present)) is True
    assert file_repo.exists(_uri(missing)) is False
    assert file_repo.can_read(_uri(present)) is True
    assert file_repo.can_read(_uri(missing)) is False
    assert file_repo.can_write(_uri(missing)) is True
    assert file_repo.can_write(_uri(tmp_path / "no-dir" / "x")) is False
    assert file_repo.can_list(_uri(tmp_path)) is True
    assert file_repo.can_list(_uri(present)) is False


@pytest.mark.parametrize("method", ["exists", "can_read", "can_write", "can_list", "reader", "writer", "delete", "list"])
def test_empty_path_rejected(method: str) -> None:
    with pytest.raises(InvalidPathError):
        getattr(FileRepository(), method)(parse_uri("file://"))


def test_reader_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        FileRepository().reader(_uri(tmp_path / "missing"))


def test_reader_on_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        FileRepository().reader(_uri(tmp_path))


def test_writer_missing_parent_raises(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        FileRepository().writer(_uri(tmp_path / "no-dir" / "x"))


def test_delete_file_and_empty_directory(tmp_path: Path) -> None:
    repo = FileRepository()
    target = tmp_path / "f.txt"
    target.write_bytes(b"x")
    folder = tmp_path / "empty"
    folder.mkdir()

    repo.delete(_uri(target))
    repo.delete(_uri(folder))

    assert not target.exists()
    assert not folder.exists()


def test_delete_missing_is_silent(tmp_path: Path) -> None:
    repo = FileRepository()
    repo.delete(_uri(tmp_path / "ghost"))
    repo.delete(_uri(tmp_path / "ghost"))


def test_list_sorted_children(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_bytes(b"")
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "nested.txt").write_bytes(b"")

    listing = FileRepository().list(_uri(tmp_path))

    assert [uri.path for uri in listing] == [f"{tmp_path}/a", f"{tmp_path}/b.txt"]


def test_list_non_directory_raises(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"")
    with pytest.raises(NotFoundError):
        FileRepository().list(_uri(target))


def test_parent_and_child(tmp_path: Path) -> None:
    repo = FileRepository()
    child = repo.child(_uri(tmp_path), "x.txt")
    assert child.path == f"{tmp_path}/x.txt"
    assert repo.parent(child) == _uri(tmp_path)


def test_move(file_repo: FileRepository, tmp_path: Path) -> None:
    source = tmp_path / "x"
    source.write_bytes(b"hi")
    file_repo.move(_uri(source), _uri(tmp_path / "y"))
    assert not source.exists()
    assert (tmp_path / "y").read_bytes() == b"hi"


def test_copy_matches_memory_behaviour(
    file_repo: FileRepository,
    memory_repo: InMemoryRepository,
    tmp_path: Path,
) -> None:
    (tmp_path / "x").write_bytes(b"hi")
    memory_repo.data["/x"] = b"hi"

    file_repo.copy(_uri(tmp_path / "x"), _uri(tmp_path / "y"))
    memory_repo.copy(parse_uri("mem:///x"), parse_uri("mem:///y"))

    assert read_bytes(_uri(tmp_path / "y")) == read_bytes(parse_uri("mem:///y"))


def test_destroy_is_noop(tmp_path: Path) -> None:
    FileRepository().destroy("file")
    assert tmp_path.exists()


@pytest.mark.parametrize("repository_type", [FileRepository, InMemoryRepository])
def test_public_methods_are_documented(repository_type: type) -> None:
    for name in ("exists", "reader", "writer", "delete", "parent", "child", "copy", "move", "list"):
        assert getattr(repository_type, name).__doc__, name
