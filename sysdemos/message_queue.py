"""A bounded message stack shared between processes through a memory-mapped file."""

from __future__ import annotations

import fcntl
import mmap
import os
import struct
import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

MESSAGE_QUEUE_SIZE = 5
MAX_MESSAGE_SIZE = 20
SHARED_FILE = "shared.dat"

# Layout: the number of stored messages, then MESSAGE_QUEUE_SIZE fixed-size slots.
_HEADER = struct.Struct("<i")
LAYOUT_SIZE = _HEADER.size + MESSAGE_QUEUE_SIZE * MAX_MESSAGE_SIZE
_POLL_INTERVAL = 0.001


class MessageQueue:
    """Up to five short messages held in a shared file.

    Messages are taken back newest first. enqueue() waits while every slot is
    taken and dequeue() waits while none is; the file is locked around each
    change so several processes may share it.
    """

    def __init__(self, fd: int, mapping: mmap.mmap) -> None:
        self._fd = fd
        self._mapping: mmap.mmap | None = mapping
        self._thread_lock = threading.Lock()

    @classmethod
    def create(cls, path: str | os.PathLike[str]) -> MessageQueue:
        """Create (or truncate) path and lay out an empty queue in it."""
        fd = os.open(path, os.O_CREAT | os.O_TRUNC | os.O_RDWR, 0o666)
        try:
            os.lseek(fd, LAYOUT_SIZE, os.SEEK_SET)
            os.write(fd, b"\0")
            mapping = mmap.mmap(fd, LAYOUT_SIZE)
        except BaseException:
            os.close(fd)
            raise
        return cls(fd, mapping)

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> MessageQueue:
        """Attach to a queue that another process created at path."""
        fd = os.open(path, os.O_RDWR)
        try:
            size = os.fstat(fd).st_size
            if size < LAYOUT_SIZE:
                raise ValueError(
                    f"{os.fspath(path)!r} holds {size} bytes; a queue needs {LAYOUT_SIZE}"
                )
            mapping = mmap.mmap(fd, LAYOUT_SIZE)
        except BaseException:
            os.close(fd)
            raise
        return cls(fd, mapping)

    def _require_open(self) -> mmap.mmap:
        if self._mapping is None:
            raise ValueError("message queue is closed")
        return self._mapping

    @contextmanager
    def _locked(self) -> Iterator[mmap.mmap]:
        mapping = self._require_open()
        with self._thread_lock:
            fcntl.flock(self._fd, fcntl.LOCK_EX)
            try:
                yield mapping
            finally:
                fcntl.flock(self._fd, fcntl.LOCK_UN)

    @staticmethod
    def _stored(mapping: mmap.mmap) -> int:
        (count,) = _HEADER.unpack_from(mapping, 0)
        if not 0 <= count <= MESSAGE_QUEUE_SIZE:
            raise ValueError(f"corrupt message queue: {count} messages recorded")
        return count

    @staticmethod
    def _slot(index: int) -> slice:
        start = _HEADER.size + index * MAX_MESSAGE_SIZE
        return slice(start, start + MAX_MESSAGE_SIZE)

    def enqueue(self, text: str) -> None:
        """Store a message of at most MAX_MESSAGE_SIZE bytes, waiting for a free slot."""
        data = text.encode()
        if len(data) > MAX_MESSAGE_SIZE:
            raise ValueError(f"message of {len(data)} bytes exceeds {MAX_MESSAGE_SIZE}")
        while True:
            with self._locked() as mapping:
                count = self._stored(mapping)
                if count < MESSAGE_QUEUE_SIZE:
                    mapping[self._slot(count)] = data.ljust(MAX_MESSAGE_SIZE, b"\0")
                    _HEADER.pack_into(mapping, 0, count + 1)
                    return
            time.sleep(_POLL_INTERVAL)

    def dequeue(self) -> str:
        """Take the newest message, waiting until there is one."""
        while True:
            with self._locked() as mapping:
                count = self._stored(mapping)
                if count > 0:
                    raw = mapping[self._slot(count - 1)]
                    _HEADER.pack_into(mapping, 0, count - 1)
                    return raw.split(b"\0", 1)[0].decode(errors="replace")
            time.sleep(_POLL_INTERVAL)

    def close(self) -> None:
        """Unmap the file and close it; closing twice does nothing."""
        if self._mapping is None:
            return
        self._mapping.close()
        self._mapping = None
        os.close(self._fd)

    def __enter__(self) -> MessageQueue:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def producer_main(argv: list[str] | None = None) -> int:
    """Create the shared queue, push the numbers 0 to 99 into it, then wait for a key."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else SHARED_FILE
    try:
        queue = MessageQueue.create(path)
    except OSError:
        sys.stdout.write("open returned (-1)\n")
        return 1
    with queue:
        sys.stdout.write(f"message size = {LAYOUT_SIZE}\n")
        for i in range(100):
            queue.enqueue(f"{i}\n")
            sys.stdout.write(f"enqueued {i}\n")
            sys.stdout.flush()
        sys.stdout.write("message queue written\n")
        sys.stdout.flush()
        sys.stdin.read(1)
    return 0


def consumer_main(argv: list[str] | None = None) -> int:
    """Attach to the shared queue and print every message taken from it, forever."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else SHARED_FILE
    try:
        queue = MessageQueue.open(path)
    except OSError:
        sys.stdout.write("open returned (-1)\n")
        return 1
    with queue:
        count = 0
        try:
            while True:
                message = queue.dequeue()
                count += 1
                sys.stdout.write(f"{count}: {message}")
                sys.stdout.flush()
        except KeyboardInterrupt:
            return 0


if __name__ == "__main__":
    raise SystemExit(producer_main())