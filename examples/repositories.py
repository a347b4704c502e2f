"""Repository backends, stream handles and the generic copy/move helpers."""

import tempfile
from pathlib import Path

from uristore import FileRepository, InMemoryRepository, parse_uri, register
from uristore.logging import setup_logging
from uristore.repository import generic_move, put_file, read_bytes, write_bytes

setup_logging(level="DEBUG")

# ---- InMemoryRepository ----
# A flat path map that behaves like a directory tree.

memory = InMemoryRepository("mem")
register("mem", memory)

with memory.writer(parse_uri("mem:///docs/readme.txt")) as writer:
    writer.write(b"hello ")
    writer.write(b"world")

with memory.reader(parse_uri("mem:///docs/readme.txt")) as reader:
    buffer = bytearray(4)
    while not reader.at_eof:
        count = reader.readinto(buffer)
        print(f"[InMemory] chunk={bytes(buffer[:count])!r} eof={reader.at_eof}")

write_bytes(parse_uri("mem:///docs/guide/intro.txt"), b"nested")
write_bytes(parse_uri("mem:///docs2"), b"sibling, not a child")
print(f"  list(/docs) = {sorted(str(uri) for uri in memory.list(parse_uri('mem:///docs')))}")

parent = memory.parent(parse_uri("mem:///docs/guide/intro.txt"))
print(f"  parent = {parent}, exists = {memory.exists(parent)}")

# ---- Move across backends ----
# Copy/move only need reader, writer and delete, so backends can be mixed.

with tempfile.TemporaryDirectory() as tmpdir:
    register("file", FileRepository())
    target = parse_uri(f"file://{Path(tmpdir) / 'readme.txt'}")

    generic_move(parse_uri("mem:///docs/readme.txt"), target)
    print(f"\n[File] moved content = {read_bytes(target)!r}")
    print(f"  source still exists = {memory.exists(parse_uri('mem:///docs/readme.txt'))}")

    local = Path(tmpdir) / "photo.png"
    local.write_bytes(b"\x89PNG fake image")
    uri = put_file(local, parse_uri("mem:///images/photo.png"))
    print(f"  put_file -> {uri} ({uri.mime_type})")
