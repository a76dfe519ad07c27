"""Utility functions for PDF Pages."""

from pdf_pages.utils.messages import format_error
from pdf_pages.utils.page_range import format_page_ranges, parse_page_range

__all__ = ["format_error", "format_page_ranges", "parse_page_range"]
