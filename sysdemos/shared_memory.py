"""Passing a string between processes through a memory-mapped file."""

from __future__ import annotations

import mmap
import os
import sys

SHARED_FILE = "shared.dat"


def publish(path: str | os.PathLike[str], text: str) -> int:
    """Write text and a terminating NUL into a mapping of path; return the mapped size."""
    data = text.encode() + b"\0"
    size = len(data)
    with open(path, "w+b") as handle:
        handle.seek(size)
        handle.write(b"\0")
        handle.flush()
        with mmap.mmap(handle.fileno(), size, access=mmap.ACCESS_WRITE) as mapping:
            mapping[:size] = data
            mapping.flush()
    return size


def read_shared(path: str | os.PathLike[str]) -> str:
    """Map the whole file and return its text up to the first NUL."""
    with open(path, "r+b") as handle:
        size = os.fstat(handle.fileno()).st_size
        if size == 0:
            raise ValueError(f"cannot map empty file {os.fspath(path)!r}")
        with mmap.mmap(handle.fileno(), size, access=mmap.ACCESS_READ) as mapping:
            data = mapping[:size]
    return data.split(b"\0", 1)[0].decode(errors="replace")


def producer_main(argv: list[str] | None = None) -> int:
    """Publish "Hello World" and wait for a key press."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else SHARED_FILE
    try:
        publish(path, "Hello World")
    except OSError as exc:
        sys.stdout.write(f"open returned (-1): {exc}\n")
        return 1
    sys.stdout.write("memory mapped. press any key to exit...\n")
    sys.stdout.flush()
    sys.stdin.read(1)
    return 0


def consumer_main(argv: list[str] | None = None) -> int:
    """Print the text published in the shared file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else SHARED_FILE
    try:
        text = read_shared(path)
    except OSError:
        sys.stdout.write("error in open\n")
        return 1
    except ValueError:
        sys.stdout.write("mmap() returned -1\n")
        return 1
    sys.stdout.write(f"{text}\n")
    return 0