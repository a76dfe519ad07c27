"""Core modules for PDF page selection and export."""

from pdf_pages.core.config import ExportConfig
from pdf_pages.core.exporter import PageExporter
from pdf_pages.core.page_selection import PageSelection
from pdf_pages.core.pdf_document import PDFDocument

__all__ = [
    "ExportConfig",
    "PageExporter",
    "PageSelection",
    "PDFDocument",
]
