"""Writing a file completely and reading it back in small chunks."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO

DEFAULT_PATH = "file"


def write_all(path: str | os.PathLike[str], data: bytes) -> int:
    """Create or truncate path and write all of data, retrying partial writes."""
    fd = os.open(path, os.O_CREAT | os.O_TRUNC | os.O_RDWR, 0o666)
    try:
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    finally:
        os.close(fd)
    return len(data)


def copy_in_chunks(path: str | os.PathLike[str], out: BinaryIO, chunk_size: int = 5) -> int:
    """Copy a file to out, chunk_size bytes at a time; return the bytes copied."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    total = 0
    with open(path, "rb") as source:
        while chunk := source.read(chunk_size):
            out.write(chunk)
            total += len(chunk)
    return total


def write_main(argv: list[str] | None = None) -> int:
    """Write "foobar" to the file named by the first argument (default "file")."""
    args = sys.argv[1:] if argv is None else argv
    write_all(args[0] if args else DEFAULT_PATH, b"foobar")
    return 0


def read_main(argv: list[str] | None = None) -> int:
    """Copy the named file (default "file") to standard output."""
    args = sys.argv[1:] if argv is None else argv
    sys.stdout.flush()
    out = sys.stdout.buffer
    copy_in_chunks(args[0] if args else DEFAULT_PATH, out)
    out.flush()
    return 0