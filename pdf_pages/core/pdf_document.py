"""PDF document access using PyMuPDF."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import fitz


class PDFDocument:
    """
    Read-only view of a PDF file that can copy page blocks into a new PDF.

    Page numbers are 0-based everywhere in this class.
    """

    def __init__(self, path: str | Path):
        """
        Open a PDF file.

        Args:
            path: Path to the PDF file
        """
        import fitz

        self.path = Path(path)
        self._doc: fitz.Document = fitz.open(str(self.path))

    def __enter__(self) -> PDFDocument:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit - close the document."""
        self.close()

    def close(self) -> None:
        """Close the PDF document."""
        if self._doc is not None and not self._doc.is_closed:
            self._doc.close()

    @property
    def page_count(self) -> int:
        """Get the total number of pages."""
        return len(self._doc)

    def export_pages(
        self,
        runs: Iterable[tuple[int, int]],
        output_path: str | Path,
        **save_options: object,
    ) -> int:
        """
        Copy blocks of pages, in order, into a new PDF and save it.

        Args:
            runs: Inclusive (start, stop) page blocks
            output_path: Where to write the new PDF
            **save_options: Forwarded to fitz.Document.save

        Returns:
            Number of pages written
        """
        import fitz

        out = fitz.open()
        try:
            for start, stop in runs:
                out.insert_pdf(self._doc, from_page=start, to_page=stop)
            written = len(out)
            out.save(str(output_path), **save_options)
        finally:
            out.close()
        return written
