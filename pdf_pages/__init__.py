"""
PDF Pages - Select and export pages of PDF documents.

Parses human-entered page ranges such as "1, 3-5, 8-" into 0-based page
intervals and copies the selected pages into new PDFs with PyMuPDF.
"""

from pdf_pages.core.config import ExportConfig
from pdf_pages.core.exporter import PageExporter
from pdf_pages.core.page_selection import PageSelection, is_page_selected
from pdf_pages.utils.errors import (
    InvalidConfigurationError,
    InvalidOrderError,
    InvalidPageNumberError,
    InvalidRangeError,
    OutOfRangeError,
    PageRangeError,
    PageRangeParseError,
    ParseErrorKind,
)
from pdf_pages.utils.page_range import PageRangeEntry, parse_page_range

__version__ = "0.1.0"

__all__ = [
    "ExportConfig",
    "InvalidConfigurationError",
    "InvalidOrderError",
    "InvalidPageNumberError",
    "InvalidRangeError",
    "OutOfRangeError",
    "PageExporter",
    "PageRangeEntry",
    "PageRangeError",
    "PageRangeParseError",
    "PageSelection",
    "ParseErrorKind",
    "__version__",
    "is_page_selected",
    "parse_page_range",
]
