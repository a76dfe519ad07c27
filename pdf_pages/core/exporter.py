"""Export a page selection from a PDF into a new PDF."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from pdf_pages.core.config import ExportConfig
from pdf_pages.core.page_selection import PageSelection
from pdf_pages.core.pdf_document import PDFDocument


class PageExporter:
    """
    High-level interface for extracting pages from a PDF.

    Parses the page range against the document, then copies the selected
    pages in selection order into a new file.

    Example:
        >>> from pdf_pages import PageExporter
        >>> exporter = PageExporter()
        >>> exporter.export("document.pdf", page_range="1, 5-")
    """

    def __init__(self, config: ExportConfig | None = None):
        """
        Initialize the exporter.

        Args:
            config: Export settings. If None, uses defaults.
        """
        self.config = config or ExportConfig()
        self.last_selection: PageSelection | None = None

    def default_output_path(self, input_path: Path) -> Path:
        """input.pdf -> input_pages.pdf next to the input."""
        return input_path.with_stem(f"{input_path.stem}{self.config.output_suffix}")

    def select(self, input_path: str | Path, page_range: str = "all") -> PageSelection:
        """
        Parse a page range against a PDF's page count without exporting.

        Raises:
            FileNotFoundError: If the PDF does not exist
            ValueError: If the PDF has no pages
            PageRangeParseError: If the page range is invalid for this document
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"PDF not found: {input_path}")

        with PDFDocument(input_path) as document:
            return self._parse_selection(document, page_range)

    def export(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
        page_range: str = "all",
        progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> Path:
        """
        Write the selected pages of a PDF to a new file.

        Args:
            input_path: Path to the input PDF
            output_path: Where to save the result. Defaults to input_pages.pdf
            page_range: Which pages to keep (e.g., "1-5", "1,3,5", "-3", "all")
            progress_callback: Optional function called with (stage, current, total)

        Returns:
            Path to the exported PDF

        Raises:
            FileNotFoundError: If the input PDF does not exist
            ValueError: If the PDF has no pages
            PageRangeParseError: If the page range is invalid for this document
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"PDF not found: {input_path}")

        if output_path is None:
            output_path = self.default_output_path(input_path)
        output_path = Path(output_path)

        self._log_start(input_path, output_path, page_range)
        total_start = time.time()

        with PDFDocument(input_path) as document:
            self._report(progress_callback, "Parsing page range", 0, 2)
            selection = self._parse_selection(document, page_range)
            self.last_selection = selection

            runs = selection.runs(unique=self.config.dedupe)
            self._print(f"  PDF has {document.page_count} pages")
            self._print(f"  Selected: {selection} ({len(runs)} blocks)\n")

            self._report(progress_callback, "Copying pages", 1, 2)
            self._print("Copying pages...")
            written = document.export_pages(
                runs, output_path, **self.config.save_options()
            )

        self._report(progress_callback, "Done", 2, 2)
        self._log_complete(total_start, written, output_path)
        return output_path

    def _parse_selection(self, document: PDFDocument, page_range: str) -> PageSelection:
        """Parse page_range against the document, which must have pages."""
        if document.page_count == 0:
            raise ValueError(f"PDF has no pages: {document.path}")
        return PageSelection.parse(page_range, document.page_count)

    def _report(
        self,
        callback: Callable[[str, int, int], None] | None,
        stage: str,
        current: int,
        total: int,
    ) -> None:
        """Report progress if a callback is provided."""
        if callback:
            callback(stage, current, total)

    def _print(self, message: str = "") -> None:
        if self.config.verbose:
            print(message)

    def _log_start(self, input_path: Path, output_path: Path, page_range: str) -> None:
        """Print startup information."""
        self._print("=" * 50)
        self._print("PDF Pages")
        self._print("=" * 50)
        self._print(f"Input:  {input_path}")
        self._print(f"Output: {output_path}")
        self._print(f"Pages: {page_range}")
        if self.config.dedupe:
            self._print("Repeated pages: dropped")
        self._print("=" * 50)
        self._print()

    def _log_complete(self, start_time: float, num_pages: int, output_path: Path) -> None:
        """Print completion summary."""
        elapsed = time.time() - start_time
        self._print("=" * 50)
        self._print("Complete!")
        self._print(f"Pages written: {num_pages}")
        self._print(f"Total time: {elapsed:.2f}s")
        self._print(f"Output: {output_path}")
        self._print("=" * 50)
