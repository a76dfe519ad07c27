"""Pytest configuration and shared fixtures."""

import sys
from unittest.mock import MagicMock, PropertyMock, patch

import pytest


def make_fitz(page_count=10):
    """
    Build a fake fitz module.

    fitz.open(path) returns a source document with page_count pages and
    fitz.open() with no arguments returns an empty output document whose
    length grows as pages are inserted.
    """
    mock_fitz = MagicMock()

    source = MagicMock(name="source_doc")
    state = {"closed": False}

    def source_len():
        if state["closed"]:
            raise ValueError("document closed")
        return page_count

    def close_source():
        state["closed"] = True

    # Like fitz.Document: falsy when empty, unusable once closed
    source.__len__ = MagicMock(side_effect=source_len)
    source.__bool__ = MagicMock(side_effect=lambda: source_len() > 0)
    source.close.side_effect = close_source
    type(source).is_closed = PropertyMock(side_effect=lambda: state["closed"])

    output = MagicMock(name="output_doc")
    inserted = []

    def insert_pdf(doc, from_page, to_page):
        inserted.extend(range(from_page, to_page + 1))

    output.insert_pdf.side_effect = insert_pdf
    output.__len__ = MagicMock(side_effect=lambda: len(inserted))
    output.inserted = inserted

    def open_document(*args, **kwargs):
        return source if args else output

    mock_fitz.open.side_effect = open_document
    mock_fitz.source = source
    mock_fitz.output = output
    return mock_fitz


@pytest.fixture
def mock_fitz():
    """Install a fake fitz module for a ten-page document."""
    fake = make_fitz(10)
    with patch.dict(sys.modules, {"fitz": fake}):
        yield fake


@pytest.fixture
def temp_pdf(tmp_path):
    """Create a minimal PDF file for testing."""
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >>
endobj
xref
0 4
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
trailer
<< /Size 4 /Root 1 0 R >>
startxref
196
%%EOF"""

    pdf_file = tmp_path / "test.pdf"
    pdf_file.write_bytes(pdf_content)
    return pdf_file


@pytest.fixture
def quiet_config():
    """Create an export config that prints nothing."""
    from pdf_pages.core.config import ExportConfig

    return ExportConfig(verbose=False)


@pytest.fixture
def fitz_factory():
    """Return the fake fitz builder for tests that need a custom page count."""
    return make_fitz
