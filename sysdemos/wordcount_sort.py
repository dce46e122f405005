"""Sorting and binary searching word counts by their count."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass
class WordCount:
    word: str
    count: int


def compare_word_counts(order: SortOrder, a: WordCount, b: WordCount) -> int:
    """Compare by count: negative, zero or positive in the given order."""
    if order is SortOrder.DESCENDING:
        return -(a.count - b.count)
    return a.count - b.count


def sort_word_counts(
    items: Sequence[WordCount], order: SortOrder = SortOrder.DESCENDING
) -> list[WordCount]:
    """Return the items sorted by count in the given order."""
    return sorted(items, key=cmp_to_key(lambda a, b: compare_word_counts(order, a, b)))


def search_word_counts(
    items: Sequence[WordCount], count: int, order: SortOrder = SortOrder.DESCENDING
) -> WordCount | None:
    """Binary search items sorted in the given order for one with this count."""
    key = WordCount("any", count)
    low, high = 0, len(items)
    while low < high:
        middle = (low + high) // 2
        result = compare_word_counts(order, key, items[middle])
        if result < 0:
            high = middle
        elif result > 0:
            low = middle + 1
        else:
            return items[middle]
    return None


_SOME_WORDS = ("a", "b", "c", "d", "e", "beta", "gamma", "epsilon", "delta")
_SOME_COUNTS = (8, 6, 7, 5, 3, -5, 25, 10, 3, 13, 17)


def main(argv: list[str] | None = None) -> int:
    """Sort a fixed word list by count and search it for counts 0 to 14."""
    out = sys.stdout
    items = [WordCount(word, count) for word, count in zip(_SOME_WORDS, _SOME_COUNTS)]

    out.write("Word Array\n")
    for item in items:
        out.write(f"word {item.word}: {item.count}\n")
    out.write("\n")

    items = sort_word_counts(items, SortOrder.DESCENDING)
    out.write("Sorted Word Array by Count\n")
    for item in items:
        out.write(f"{{ word : '{item.word}',  count : {item.count} }}\n")
    out.write("\n")

    out.write("Search Results\n")
    for count in range(15):
        found = search_word_counts(items, count, SortOrder.DESCENDING)
        if found is not None:
            out.write(f"{{ word : '{found.word}' : count : {found.count} }}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())