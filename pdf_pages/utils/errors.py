"""Exceptions raised while parsing page range expressions."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Which validation step rejected a sub-expression."""

    INVALID_RANGE = "invalid_range"
    OUT_OF_RANGE = "out_of_range"
    INVALID_ORDER = "invalid_order"
    INVALID_PAGE_NUMBER = "invalid_page_number"


class PageRangeError(Exception):
    """Base exception for everything raised by :mod:`pdf_pages`."""


class InvalidConfigurationError(PageRangeError):
    """Raised when the parser is called with a page count below 1.

    This is a caller bug, never a consequence of what the user typed.
    """

    def __init__(self, page_count: int) -> None:
        self.page_count = page_count
        super().__init__(f"page_count must be at least 1, got {page_count}")


class PageRangeParseError(PageRangeError, ValueError):
    """
    Raised when user text cannot be turned into page ranges.

    Attributes:
        kind: Which check failed
        expression: Raw text of the offending sub-expression
        bound: Offending 1-based page number, if any
        limit: Page count the bound was checked against, if any
    """

    kind: ParseErrorKind

    def __init__(
        self,
        expression: str,
        bound: int | None = None,
        limit: int | None = None,
    ) -> None:
        self.expression = expression
        self.bound = bound
        self.limit = limit
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"invalid page range {self.expression!r}"


class InvalidRangeError(PageRangeParseError):
    """The sub-expression is none of n, n-, -m, n-m or -."""

    kind = ParseErrorKind.INVALID_RANGE


class OutOfRangeError(PageRangeParseError):
    """A page number is larger than the document's page count."""

    kind = ParseErrorKind.OUT_OF_RANGE

    def _describe(self) -> str:
        return f"page {self.bound} in {self.expression!r} exceeds page count {self.limit}"


class InvalidOrderError(PageRangeParseError):
    """The range ends before it starts."""

    kind = ParseErrorKind.INVALID_ORDER

    def _describe(self) -> str:
        return f"range bounds in {self.expression!r} must be in increasing order"


class InvalidPageNumberError(PageRangeParseError):
    """Page 0 was referenced; page numbers start with 1."""

    kind = ParseErrorKind.INVALID_PAGE_NUMBER

    def _describe(self) -> str:
        return f"page numbers start with 1, got {self.expression!r}"
