"""Selection of pages from a document, built from a page range string."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from pdf_pages.utils.page_range import (
    PageRangeEntry,
    format_page_ranges,
    parse_page_range,
)

ALL_PAGES = "all"


def is_page_selected(entries: Sequence[PageRangeEntry], index: int) -> bool:
    """Check whether any entry covers the 0-based page index."""
    return any(index in entry for entry in entries)


class PageSelection:
    """
    Ordered set of page ranges for one document.

    Wraps the parser output and answers the questions page-processing
    code asks: is page P selected, and which pages in which order.

    Example:
        >>> selection = PageSelection.parse("3-4, 1", 10)
        >>> selection.indices()
        [2, 3, 0]
        >>> 3 in selection
        True
    """

    def __init__(self, entries: Sequence[PageRangeEntry], page_count: int):
        """
        Initialize the selection.

        Args:
            entries: Parsed 0-based entries, in selection order
            page_count: Number of pages in the document
        """
        self.entries: tuple[PageRangeEntry, ...] = tuple(entries)
        self.page_count = page_count

    @classmethod
    def parse(cls, page_range: str | None, page_count: int) -> PageSelection:
        """
        Build a selection from user text.

        An empty string, None or "all" selects every page. Anything else
        goes through parse_page_range and its errors propagate.
        """
        if page_range is None or page_range.strip().lower() in ("", ALL_PAGES):
            return cls.all(page_count)
        return cls(parse_page_range(page_range, page_count), page_count)

    @classmethod
    def all(cls, page_count: int) -> PageSelection:
        """Select every page of the document."""
        return cls(parse_page_range("-", page_count), page_count)

    def contains(self, index: int) -> bool:
        """Check whether the 0-based page index is selected."""
        return is_page_selected(self.entries, index)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.contains(index)

    def __iter__(self) -> Iterator[PageRangeEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return format_page_ranges(self.entries)

    def __repr__(self) -> str:
        return f"PageSelection({str(self)!r}, page_count={self.page_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageSelection):
            return NotImplemented
        return self.entries == other.entries and self.page_count == other.page_count

    def indices(self, unique: bool = False) -> list[int]:
        """
        List 0-based page indices in selection order.

        Args:
            unique: Drop repeated pages, keeping the first occurrence

        Returns:
            Page indices, possibly with repeats when unique is False
        """
        result: list[int] = []
        seen: set[int] = set()
        for entry in self.entries:
            for index in entry.indices():
                if unique:
                    if index in seen:
                        continue
                    seen.add(index)
                result.append(index)
        return result

    def page_numbers(self, unique: bool = False) -> list[int]:
        """Same as indices() but 1-based."""
        return [index + 1 for index in self.indices(unique)]

    def runs(self, unique: bool = False) -> list[tuple[int, int]]:
        """
        Group selected indices into consecutive blocks.

        Returns:
            List of (start, stop) pairs, both inclusive and 0-based
        """
        blocks: list[tuple[int, int]] = []
        for index in self.indices(unique):
            if blocks and index == blocks[-1][1] + 1:
                blocks[-1] = (blocks[-1][0], index)
            else:
                blocks.append((index, index))
        return blocks
