"""Page range parsing utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple

from pdf_pages.utils.errors import (
    InvalidConfigurationError,
    InvalidOrderError,
    InvalidPageNumberError,
    InvalidRangeError,
    OutOfRangeError,
)

# Each separator character splits on its own; ",," yields an empty piece.
_SEPARATORS = re.compile(r"[,;:]")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class PageRangeEntry:
    """An inclusive interval of 0-based page indices."""

    first: int
    last: int

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.first <= index <= self.last

    def __len__(self) -> int:
        return self.last - self.first + 1

    def indices(self) -> range:
        """0-based page indices covered by this entry."""
        return range(self.first, self.last + 1)


class EntryShape(Enum):
    """The five accepted forms of a sub-expression."""

    SINGLE = "n"
    RIGHT_OPEN = "n-"
    LEFT_OPEN = "-m"
    CLOSED = "n-m"
    FULLY_OPEN = "-"


class RawEntry(NamedTuple):
    """A recognized sub-expression with 1-based, unvalidated bounds."""

    shape: EntryShape
    first: int
    last: int


# Keyed by (has number before hyphen, has hyphen, has number after hyphen)
_SHAPES: dict[tuple[bool, bool, bool], EntryShape] = {
    (True, False, False): EntryShape.SINGLE,
    (True, True, False): EntryShape.RIGHT_OPEN,
    (False, True, True): EntryShape.LEFT_OPEN,
    (True, True, True): EntryShape.CLOSED,
    (False, True, False): EntryShape.FULLY_OPEN,
}


def parse_page_range(text: str, page_count: int) -> list[PageRangeEntry]:
    """
    Parse a human-friendly page range string into 0-based intervals.

    Sub-expressions are separated by ``,``, ``;`` or ``:`` and each one is
    ``n``, ``n-``, ``-m``, ``n-m`` or ``-``. Whitespace around numbers and
    hyphens is ignored. Entries come back in input order; overlaps and
    repeats are kept.

    Args:
        text: String like "1, 3-5, 8-" as typed by the user
        page_count: Number of pages in the document, at least 1

    Returns:
        List of PageRangeEntry, one per sub-expression

    Raises:
        InvalidConfigurationError: If page_count is below 1
        InvalidRangeError: If a sub-expression has none of the accepted forms
        OutOfRangeError: If a page number exceeds page_count
        InvalidOrderError: If a range ends before it starts
        InvalidPageNumberError: If page 0 is referenced

    Examples:
        >>> parse_page_range("1, 2-, -3, 4-5, -", 10)  # doctest: +NORMALIZE_WHITESPACE
        [PageRangeEntry(first=0, last=0), PageRangeEntry(first=1, last=9),
         PageRangeEntry(first=0, last=2), PageRangeEntry(first=3, last=4),
         PageRangeEntry(first=0, last=9)]
    """
    if page_count < 1:
        raise InvalidConfigurationError(page_count)

    return [
        normalize_entry(expression, recognize_entry(expression, page_count), page_count)
        for expression in split_expressions(text)
    ]


def split_expressions(text: str) -> list[str]:
    """
    Split raw text on every separator character.

    Pieces keep their whitespace. Empty text gives a single empty piece.

    Examples:
        >>> split_expressions("1, 3-5;7")
        ['1', ' 3-5', '7']
    """
    return _SEPARATORS.split(text)


def recognize_entry(expression: str, page_count: int) -> RawEntry:
    """
    Classify one sub-expression and extract its 1-based bounds.

    Open ends are filled in with 1 and page_count. No bounds checking is
    done here.

    Raises:
        InvalidRangeError: If the whole expression matches none of the shapes
    """
    head, hyphen, tail = expression.partition("-")
    head = head.strip()
    tail = tail.strip()

    if (head and not _is_number(head)) or (tail and not _is_number(tail)):
        raise InvalidRangeError(expression)

    shape = _SHAPES.get((bool(head), bool(hyphen), bool(tail)))
    if shape is None:
        raise InvalidRangeError(expression)

    if shape is EntryShape.SINGLE:
        first = last = int(head)
    elif shape is EntryShape.RIGHT_OPEN:
        first, last = int(head), page_count
    elif shape is EntryShape.LEFT_OPEN:
        first, last = 1, int(tail)
    elif shape is EntryShape.CLOSED:
        first, last = int(head), int(tail)
    else:
        first, last = 1, page_count

    return RawEntry(shape, first, last)


def normalize_entry(expression: str, raw: RawEntry, page_count: int) -> PageRangeEntry:
    """
    Validate a 1-based raw entry and convert it to 0-based indices.

    Checks run in a fixed order: upper bound, ordering, then page zero.

    Raises:
        OutOfRangeError: If either bound exceeds page_count
        InvalidOrderError: If last < first
        InvalidPageNumberError: If first is 0
    """
    for bound in (raw.first, raw.last):
        if bound > page_count:
            raise OutOfRangeError(expression, bound=bound, limit=page_count)

    if raw.last < raw.first:
        raise InvalidOrderError(expression, bound=raw.last)

    # last >= first, so a zero last implies a zero first
    if raw.first == 0:
        raise InvalidPageNumberError(expression, bound=0)

    return PageRangeEntry(raw.first - 1, raw.last - 1)


def format_page_ranges(entries: Iterable[PageRangeEntry]) -> str:
    """
    Render entries back to canonical 1-based text.

    Examples:
        >>> format_page_ranges([PageRangeEntry(0, 0), PageRangeEntry(2, 4)])
        '1,3-5'
    """
    parts = []
    for entry in entries:
        if entry.first == entry.last:
            parts.append(str(entry.first + 1))
        else:
            parts.append(f"{entry.first + 1}-{entry.last + 1}")
    return ",".join(parts)


def _is_number(token: str) -> bool:
    """True if every character is an ASCII digit 0-9."""
    return all(char in _DIGITS for char in token)
