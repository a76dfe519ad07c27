"""Configuration management for PDF page export."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "PDF_PAGES_"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ExportConfig:
    """
    Configuration for exporting selected pages.

    Attributes:
        dedupe: Drop pages selected more than once, keeping the first occurrence
        output_suffix: Appended to the input stem for the default output name
        garbage: PyMuPDF garbage collection level on save (0-4)
        deflate: Compress streams on save
        clean: Sanitize content streams on save
        verbose: Print progress to stdout
    """

    dedupe: bool = False
    output_suffix: str = "_pages"

    # Passed straight through to fitz.Document.save
    garbage: int = 3
    deflate: bool = True
    clean: bool = False

    verbose: bool = True

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 <= self.garbage <= 4:
            raise ValueError(f"garbage must be between 0 and 4, got {self.garbage}")

    def save_options(self) -> dict[str, int | bool]:
        """Keyword arguments for fitz.Document.save."""
        return {
            "garbage": self.garbage,
            "deflate": self.deflate,
            "clean": self.clean,
        }

    @classmethod
    def from_environment(cls) -> ExportConfig:
        """Build a config from PDF_PAGES_* environment variables."""
        kwargs: dict[str, object] = {}

        for name in ("dedupe", "deflate"):
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                kwargs[name] = value.strip().lower() in _TRUTHY

        suffix = os.environ.get(f"{ENV_PREFIX}OUTPUT_SUFFIX")
        if suffix:
            kwargs["output_suffix"] = suffix

        garbage = os.environ.get(f"{ENV_PREFIX}GARBAGE")
        if garbage is not None:
            kwargs["garbage"] = int(garbage)

        return cls(**kwargs)  # type: ignore[arg-type]

    @classmethod
    def compact(cls) -> ExportConfig:
        """Smallest output, slowest save."""
        return cls(garbage=4, deflate=True, clean=True)

    @classmethod
    def fast(cls) -> ExportConfig:
        """Quickest save, no compression or cleanup."""
        return cls(garbage=0, deflate=False, clean=False)
