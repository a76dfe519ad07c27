"""Command-line interface for PDF Pages."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from pdf_pages import __version__
from pdf_pages.core.config import ExportConfig
from pdf_pages.core.exporter import PageExporter
from pdf_pages.utils.errors import PageRangeParseError
from pdf_pages.utils.messages import format_error


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdf-pages",
        description="Select pages of a PDF and export them to a new PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdf-pages document.pdf --pages 1-5
  pdf-pages document.pdf --pages "1, 3; 8-" -o selection.pdf
  pdf-pages document.pdf --pages "-3, 10-" --list
  pdf-pages document.pdf --pages "1-4, 2-6" --dedupe --compact

Page Range Formats:
  all       All pages (default)
  5         Just page 5
  2-        Page 2 through the last page
  -3        First page through page 3
  4-7       Pages 4 through 7
  -         All pages
  Separate ranges with ',', ';' or ':'. Pages are exported in the
  order given; repeated pages are kept unless --dedupe is set.
        """,
    )

    parser.add_argument(
        "pdf_path",
        type=str,
        help="Path to the PDF file",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output PDF path (default: input_pages.pdf)",
    )

    parser.add_argument(
        "-p",
        "--pages",
        type=str,
        default="all",
        help="Page range to export (default: all)",
    )

    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Export each page at most once",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the selected pages and exit without writing a PDF",
    )

    parser.add_argument(
        "--compact",
        action="store_true",
        help="Spend more time on save to produce a smaller file",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the output path",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def build_config(args: argparse.Namespace) -> ExportConfig:
    """Build an ExportConfig from environment defaults and CLI flags."""
    config = ExportConfig.from_environment()
    if args.compact:
        config = replace(config, **ExportConfig.compact().save_options())
    if args.dedupe:
        config.dedupe = True
    if args.quiet:
        config.verbose = False
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    pdf_path = Path(args.pdf_path).resolve()

    if not pdf_path.exists():
        print(f"Error: File not found: {pdf_path}", file=sys.stderr)
        return 1

    if not pdf_path.suffix.lower() == ".pdf":
        print(f"Warning: File doesn't have .pdf extension: {pdf_path}")

    try:
        config = build_config(args)
        exporter = PageExporter(config)

        if args.list:
            selection = exporter.select(pdf_path, page_range=args.pages)
            print(f"Ranges: {selection}")
            print(f"Pages:  {' '.join(map(str, selection.page_numbers(config.dedupe)))}")
            return 0

        output = exporter.export(
            pdf_path,
            output_path=args.output,
            page_range=args.pages,
        )
        print(f"\nExported PDF saved to: {output}")
        return 0

    except PageRangeParseError as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
