"""User-facing, translatable messages for page range errors."""

from __future__ import annotations

import gettext
from pathlib import Path
from typing import Callable

from pdf_pages.utils.errors import PageRangeParseError, ParseErrorKind

DOMAIN = "pdf_pages"
LOCALE_DIR = Path(__file__).resolve().parent.parent / "locale"

# Looked up in the catalog at format time, not import time.
_TEMPLATES = {
    ParseErrorKind.INVALID_RANGE: "Invalid page range: '{expression}'.",
    ParseErrorKind.OUT_OF_RANGE: (
        "Page {bound} in '{expression}' is larger than the page count ({limit})."
    ),
    ParseErrorKind.INVALID_ORDER: (
        "Range bounds in '{expression}' must be in increasing order."
    ),
    ParseErrorKind.INVALID_PAGE_NUMBER: (
        "Page numbers start with 1, '{expression}' refers to page 0."
    ),
}


def get_translator(languages: list[str] | None = None) -> Callable[[str], str]:
    """
    Look up the gettext catalog for the given languages.

    Args:
        languages: Language codes in preference order. None uses the
            LANGUAGE/LC_ALL/LC_MESSAGES/LANG environment variables.

    Returns:
        A gettext function; untranslated messages come back in English
    """
    translation = gettext.translation(
        DOMAIN,
        localedir=str(LOCALE_DIR),
        languages=languages,
        fallback=True,
    )
    return translation.gettext


def format_error(
    error: PageRangeParseError,
    translate: Callable[[str], str] | None = None,
) -> str:
    """
    Render a parse error as a message for the end user.

    Args:
        error: Any PageRangeParseError subclass
        translate: gettext-style function; defaults to the current locale

    Returns:
        Localized message naming the offending sub-expression
    """
    translate = translate or get_translator()
    template = translate(_TEMPLATES[error.kind])
    return template.format(
        expression=error.expression.strip(),
        bound=error.bound,
        limit=error.limit,
    )
