"""Fixed-capacity word tables in which a key, once entered, keeps its slot."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TextIO

WORDS = (
    "alpha", "bravo", "charlie", "delta",
    "echo", "foxtrot", "golf", "hotel", "india", "juliet",
    "kilo", "lima", "mike", "november", "oscar", "papa",
    "quebec", "quebec", "romeo", "sierra", "tango", "uniform",
    "victor", "whisky", "whisky", "x-ray", "yankee", "zulu", "zulu",
)

_MANPAGE_WORDS = (
    "alpha", "bravo", "charlie", "delta",
    "echo", "foxtrot", "golf", "hotel", "india", "juliet",
    "kilo", "lima", "mike", "november", "oscar", "papa",
    "quebec", "romeo", "sierra", "tango", "uniform",
    "victor", "whisky", "x-ray", "yankee", "zulu",
)


class TableFullError(Exception):
    """Raised when a new key is entered into a table with no free slot."""


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def _capacity_for(size: int) -> int:
    """Smallest odd prime not below the requested size (and at least 3)."""
    n = max(size, 3) | 1
    while not _is_prime(n):
        n += 2
    return n


class _FixedTable:
    """A table of fixed capacity with no deletion: keys stay once entered."""

    def __init__(self, size: int) -> None:
        self.capacity = _capacity_for(size)
        self._slots: dict[str, object] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._slots

    def __getitem__(self, key: str) -> object:
        return self._slots[key]

    def __setitem__(self, key: str, value: object) -> None:
        if key not in self._slots:
            raise KeyError(key)
        self._slots[key] = value

    def get(self, key: str) -> object:
        return self._slots.get(key)

    def values(self) -> Iterator[object]:
        return iter(self._slots.values())

    def enter(self, key: str, value: object) -> object:
        """Store value under a new key; an existing key keeps its value."""
        if key in self._slots:
            return self._slots[key]
        if len(self._slots) >= self.capacity:
            raise TableFullError(f"no room for {key!r}: table holds {self.capacity} keys")
        self._slots[key] = value
        return value


@dataclass
class WordEntry:
    """A word and how many times it has been counted."""

    word: str
    count: int


class WordTable:
    """Counts words; a count that reaches zero stays at zero."""

    def __init__(self, size: int = 50) -> None:
        self.size = size
        self._table = _FixedTable(size)

    @property
    def capacity(self) -> int:
        return self._table.capacity

    def lookup(self, word: str) -> WordEntry | None:
        """The entry for a word, or None if it is absent or deleted."""
        return self._table.get(word)  # type: ignore[return-value]

    def upsert(self, word: str, delta: int) -> WordEntry:
        """Adjust a positive count by delta, or start a new word at 1."""
        entry = self.lookup(word)
        if entry is not None:
            if entry.count > 0:
                entry.count += delta
            return entry
        entry = WordEntry(word, 1)
        # A deleted word keeps its slot and its empty value; the new entry is not stored.
        self._table.enter(word, entry)
        return entry

    def increment(self, word: str) -> WordEntry:
        return self.upsert(word, 1)

    def decrement(self, word: str) -> WordEntry:
        return self.upsert(word, -1)

    def delete_entry(self, word: str) -> bool:
        """Drop a word's entry; True if there was one to drop."""
        if word not in self._table:
            return False
        had_entry = self._table[word] is not None
        self._table[word] = None
        return had_entry

    def __len__(self) -> int:
        return sum(1 for entry in self._table.values() if entry is not None)


class CountTable:
    """Maps words to plain counts that never go below zero."""

    def __init__(self, size: int = 30) -> None:
        self.size = size
        self._table = _FixedTable(size)

    @property
    def capacity(self) -> int:
        return self._table.capacity

    def lookup(self, word: str) -> int | None:
        """The count for a word, or None if it was never entered."""
        return self._table.get(word)  # type: ignore[return-value]

    def adjust(self, word: str, delta: int) -> int:
        """Add delta to a known word's count (clamped at 0); a new word starts at 1."""
        count = self.lookup(word)
        if count is not None:
            new_count = max(count + delta, 0)
            self._table[word] = new_count
            return new_count
        return self._table.enter(word, 1)  # type: ignore[return-value]

    def increment(self, word: str) -> int:
        return self.adjust(word, 1)

    def decrement(self, word: str) -> int:
        return self.adjust(word, -1)


def _every_fourth() -> list[tuple[int, str]]:
    return list(enumerate(WORDS))[::4]


def _wordtable_demo(out: TextIO, size: int = 50, delete: bool = True) -> None:
    table = WordTable(size)
    for i, word in enumerate(WORDS):
        entry = table.increment(word)
        out.write(f"new word i={i}, data={word}, count={entry.count}, id={id(entry):#x}\n")
    out.write("\n")

    for i, word in _every_fourth():
        entry = table.decrement(word)
        out.write(f"dec word i={i}, data={word}, count={entry.count}, id={id(entry):#x}\n")
    out.write("\n")

    for word in WORDS:
        entry = table.lookup(word)
        if entry is None or entry.count == 0:
            continue
        out.write(f"non-zero word= {word}, count={entry.count}, id={id(entry):#x}\n")
    out.write("\n")

    for word in WORDS:
        entry = table.lookup(word)
        if entry is None or entry.count > 0:
            continue
        out.write(f"zero word= {word}, count={entry.count}, id={id(entry):#x}\n")

    if delete:
        for word in WORDS:
            result = table.delete_entry(word)
            out.write(f"deleting word {word}, result={int(result)}\n")


def _wordinfo_demo(out: TextIO) -> None:
    _wordtable_demo(out, size=30, delete=False)


def _counts_demo(out: TextIO) -> None:
    table = CountTable(30)
    out.write("insertions:\n")
    for i, word in enumerate(WORDS):
        count = table.increment(word)
        out.write(f"incremented word i={i}, data={word}, count={count}\n")

    out.write("\n")
    out.write("insertions:\n")
    for i, word in _every_fourth():
        count = table.decrement(word)
        out.write(f"decrementing word i={i}, data={word}, count={count}\n")
    out.write("\n")

    out.write("non-zero words:\n")
    for word in WORDS:
        count = table.lookup(word)
        if not count:
            continue
        out.write(f"word= {word}, count={count}\n")

    out.write("\n")
    out.write("zero words:\n")
    for word in WORDS:
        count = table.lookup(word) or 0
        if count > 0:
            continue
        out.write(f"word= {word}, count={count}\n")


def _manpage_demo(out: TextIO) -> None:
    table = _FixedTable(30)
    for i, word in enumerate(_MANPAGE_WORDS[:24]):
        table.enter(word, i)
    for word in _MANPAGE_WORDS[22:26]:
        found = word in table
        key = word if found else "NULL"
        value = table[word] if found else 0
        out.write(f"{word[:9]:>9} -> {key[:9]:>9}:{value}\n")


_DEMOS: dict[str, Callable[[TextIO], None]] = {
    "wordtable": _wordtable_demo,
    "wordinfo": _wordinfo_demo,
    "counts": _counts_demo,
    "manpage": _manpage_demo,
}


def main(argv: list[str] | None = None) -> int:
    """Run one of the word-table demonstrations (default: wordtable)."""
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else "wordtable"
    demo = _DEMOS.get(name)
    if demo is None:
        sys.stderr.write(f"unknown demo {name!r}; choose from {', '.join(_DEMOS)}\n")
        return 2
    demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())