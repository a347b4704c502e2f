"""Tests for URI and parse_uri."""

import pytest

from uristore.errors import InvalidURIError
from uristore.uri import URI, parse_uri


def test_parse_scheme_and_path() -> None:
    uri = parse_uri("mem:///a/b.txt")
    assert uri.scheme == "mem"
    assert uri.authority == ""
    assert uri.path == "/a/b.txt"


def test_parse_lowercases_scheme() -> None:
    assert parse_uri("MEM:///x").scheme == "mem"


def test_parse_keeps_authority_query_and_fragment() -> None:
    uri = parse_uri("http://example.com/a?q=1#top")
    assert uri.authority == "example.com"
    assert uri.path == "/a"
    assert uri.query == "q=1"
    assert uri.fragment == "top"


def test_parse_empty_path() -> None:
    assert parse_uri("mem://").path == ""


@pytest.mark.parametrize("text", ["", "/no/scheme", "relative.txt"])
def test_parse_rejects_text_without_scheme(text: str) -> None:
    with pytest.raises(InvalidURIError):
        parse_uri(text)


def test_str_round_trips() -> None:
    for text in ("mem:///a/b", "http://example.com/a?q=1#top", "file:///tmp/x.txt"):
        assert str(parse_uri(text)) == text


def test_name_and_extension() -> None:
    uri = URI(scheme="mem", path="/docs/report.final.pdf")
    assert uri.name == "report.final.pdf"
    assert uri.extension == ".pdf"


def test_name_ignores_trailing_separator() -> None:
    assert URI(scheme="mem", path="/docs/").name == "docs"


def test_extension_empty_without_dot() -> None:
    assert URI(scheme="mem", path="/Makefile").extension == ""


def test_mime_type_guess_and_default() -> None:
    assert URI(scheme="mem", path="/a.png").mime_type == "image/png"
    assert URI(scheme="mem", path="/a.qzx").mime_type == "application/octet-stream"


def test_with_path_keeps_other_fields() -> None:
    uri = parse_uri("http://example.com/a?q=1")
    moved = uri.with_path("/b")
    assert moved == URI(scheme="http", authority="example.com", path="/b", query="q=1")


def test_uri_is_hashable_and_comparable() -> None:
    assert {parse_uri("mem:///a"), parse_uri("mem:///a")} == {URI(scheme="mem", path="/a")}
