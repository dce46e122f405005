"""A first-fit heap allocator over a growing byte arena."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator

# Each block starts with a control block: (is_available, size including header).
_HEADER = struct.Struct("<ii")
_INT_MAX = (1 << 31) - 1


class Heap:
    """Hands out blocks by first fit; freed blocks are reused but never split or merged."""

    def __init__(self) -> None:
        self._memory = bytearray()

    @property
    def size(self) -> int:
        """Bytes obtained for the arena so far, headers included."""
        return len(self._memory)

    def _blocks(self) -> Iterator[tuple[int, bool, int]]:
        offset = 0
        while offset < len(self._memory):
            available, size = _HEADER.unpack_from(self._memory, offset)
            yield offset, bool(available), size
            offset += size

    def _block(self, address: int) -> tuple[int, bool, int]:
        for offset, available, size in self._blocks():
            if offset + _HEADER.size == address:
                return offset, available, size
        raise ValueError(f"{address} is not the address of an allocated block")

    def allocate(self, numbytes: int) -> int:
        """Reserve numbytes and return the address of the first usable byte."""
        if numbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        total = numbytes + _HEADER.size
        if total > _INT_MAX:
            raise OverflowError(f"block of {numbytes} bytes is too large")
        for offset, available, size in self._blocks():
            if available and size >= total:
                _HEADER.pack_into(self._memory, offset, 0, size)
                return offset + _HEADER.size
        offset = len(self._memory)
        self._memory.extend(bytes(total))
        _HEADER.pack_into(self._memory, offset, 0, total)
        return offset + _HEADER.size

    def free(self, address: int) -> None:
        """Mark the block at address as available."""
        offset, _, size = self._block(address)
        _HEADER.pack_into(self._memory, offset, 1, size)

    def _check_span(self, address: int, length: int) -> None:
        _, available, size = self._block(address)
        if available:
            raise ValueError(f"block at {address} has been freed")
        if length < 0 or length > size - _HEADER.size:
            raise ValueError(f"{length} bytes do not fit in the block at {address}")

    def write(self, address: int, data: bytes) -> None:
        """Copy data into the block at address."""
        self._check_span(address, len(data))
        self._memory[address:address + len(data)] = data

    def read(self, address: int, size: int) -> bytes:
        """Return size bytes from the block at address."""
        self._check_span(address, size)
        return bytes(self._memory[address:address + size])


def main(argv: list[str] | None = None) -> int:
    """Store a greeting in a heap block, print it and free it."""
    heap = Heap()
    message = b"hello world"
    size = len(message) + 1
    address = heap.allocate(size)
    heap.write(address, bytes(size))
    heap.write(address, message + b"\0")
    text = heap.read(address, size).split(b"\0", 1)[0].decode()
    sys.stdout.write(f"{text}\n")
    heap.free(address)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())