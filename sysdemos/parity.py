"""Striping two byte streams across files with an XOR parity file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

MESSAGE0 = b"hello world\n\0"
MESSAGE1 = b"testing 123\n\0"


def parity_write(
    out0: BinaryIO, out1: BinaryIO, out2: BinaryIO, data0: bytes, data1: bytes
) -> int:
    """Write data0 and data1 to two streams and their XOR to a third."""
    if len(data0) != len(data1):
        raise ValueError("both data blocks must have the same length")
    parity = bytes(a ^ b for a, b in zip(data0, data1, strict=True))
    out0.write(data0)
    out1.write(data1)
    out2.write(parity)
    return len(data0)


def parity_read(in0: BinaryIO, in1: BinaryIO, count: int) -> bytes:
    """Read up to count bytes from each stream and return their XOR."""
    data0 = in0.read(count)
    data1 = in1.read(count)
    return bytes(a ^ b for a, b in zip(data0, data1))


def main(argv: list[str] | None = None) -> int:
    """Lose the middle file of a parity set and rebuild it from the other two."""
    args = sys.argv[1:] if argv is None else argv
    directory = Path(args[0]) if args else Path(".")
    f0, f1, f2 = (directory / name for name in ("f0", "f1", "f2"))

    with f0.open("wb") as out0, f1.open("wb") as out1, f2.open("wb") as out2:
        parity_write(out0, out1, out2, MESSAGE0, MESSAGE1)

    f1.unlink()

    with f0.open("rb") as in0, f2.open("rb") as in2:
        recovered = parity_read(in0, in2, len(MESSAGE0))

    text = recovered.split(b"\0", 1)[0].decode(errors="replace")
    sys.stdout.write(f"f1 contents are = {text}\n")

    f0.unlink()
    f2.unlink()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())