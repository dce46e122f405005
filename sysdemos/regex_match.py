"""Finding successive regular-expression matches in a line of text."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Iterable
from dataclasses import dataclass

WORD_REGEX = r"(\w+)"
ALT_WORD_REGEX = r"([[:digit:]]+)[^[:digit:]]+([[:digit:]]+)"

_POSIX_CLASSES = {
    "[:digit:]": "0-9",
    "[:alpha:]": "a-zA-Z",
    "[:alnum:]": "a-zA-Z0-9",
    "[:upper:]": "A-Z",
    "[:lower:]": "a-z",
    "[:xdigit:]": "0-9A-Fa-f",
    "[:space:]": " \\t\\n\\r\\f\\v",
    "[:blank:]": " \\t",
    "[:punct:]": re.escape(string.punctuation),
}


class RegexError(ValueError):
    """Raised when a pattern cannot be compiled."""


@dataclass(frozen=True)
class Match:
    """One match: its start and end offsets in the text and the matched text."""

    start: int
    finish: int
    text: str


def _translate(regex_text: str) -> str:
    for name, replacement in _POSIX_CLASSES.items():
        regex_text = regex_text.replace(name, replacement)
    return regex_text


def compile_pattern(regex_text: str) -> re.Pattern[str]:
    """Compile an extended regular expression with line-anchored ^ and $."""
    try:
        return re.compile(_translate(regex_text), re.MULTILINE)
    except re.error as exc:
        raise RegexError(f"Regex error compiling '{regex_text}': {exc}") from exc


def find_matches(pattern: re.Pattern[str] | str, text: str) -> list[Match]:
    """Every successive whole match, each search resuming where the last ended."""
    if isinstance(pattern, str):
        pattern = compile_pattern(pattern)
    matches: list[Match] = []
    pos = 0
    while pos <= len(text):
        found = pattern.search(text[pos:])
        if found is None:
            break
        start, finish = pos + found.start(), pos + found.end()
        matches.append(Match(start, finish, text[start:finish]))
        # An empty match would otherwise be found again at the same place.
        pos = finish if finish > start else finish + 1
    return matches


def format_matches(matches: Iterable[Match]) -> str:
    """One "(start,finish): text" line per match."""
    return "".join(f"({m.start},{m.finish}): {m.text}\n" for m in matches)


def main(argv: list[str] | None = None) -> int:
    """List the words in the first argument, or in a line read from standard input."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        text = args[0]
    else:
        text = sys.stdin.readline().rstrip("\n")
    try:
        pattern = compile_pattern(WORD_REGEX)
    except RegexError as exc:
        sys.stdout.write(f"{exc}\n")
        return 0
    sys.stdout.write(format_matches(find_matches(pattern, text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())