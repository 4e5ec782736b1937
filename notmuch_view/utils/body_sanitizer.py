"""Text part sanitizer with configurable pipeline.

Usage:
    from notmuch_view.utils.body_sanitizer import sanitize_part_text

    text = sanitize_part_text(raw, content_type="text/html")
"""

import re
from typing import Callable

from bs4 import BeautifulSoup

from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.utils.body_sanitizer")

# Type alias for sanitizer functions
Sanitizer = Callable[[str, str], str]

HTML_CONTENT_TYPE = "text/html"


# -----------------------------------------------------------------------------
# Individual Sanitizers
# -----------------------------------------------------------------------------


def normalize_line_endings(text: str, content_type: str) -> str:
    """Turn CRLF and lone CR into LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def html_to_text(text: str, content_type: str) -> str:
    """Convert HTML to plain text, preserving block structure as line breaks."""
    if content_type.lower() != HTML_CONTENT_TYPE or not text.strip():
        return text

    soup = BeautifulSoup(text, "lxml")

    # Remove non-content elements
    for el in soup(["script", "style", "head", "meta", "link", "title"]):
        el.decompose()

    # Convert block elements to newlines
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(["p", "div", "tr", "li", "table", "blockquote", "pre"]):
        tag.insert_before("\n")
        tag.insert_after("\n")
    for tag in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        tag.insert_before("\n\n")
        tag.insert_after("\n")
    for cell in soup.find_all(["td", "th"]):
        cell.insert_after("\t")

    # Entities are decoded by the parser; inline tags add no separators
    return soup.get_text()


def normalize_whitespace(text: str, content_type: str) -> str:
    """Collapse runs of spaces, limit blank lines to two, strip."""
    text = re.sub(r"[^\S\n\t]+", " ", text)
    lines = [line.strip(" ") for line in text.split("\n")]

    result = []
    blanks = 0
    for line in lines:
        if not line.strip():
            blanks += 1
            if blanks <= 2:
                result.append("")
        else:
            blanks = 0
            result.append(line)

    return "\n".join(result).strip()


# -----------------------------------------------------------------------------
# Pipelines
# -----------------------------------------------------------------------------

HTML_PIPELINE: list[Sanitizer] = [
    normalize_line_endings,
    html_to_text,
    normalize_whitespace,
]


# -----------------------------------------------------------------------------
# Main Entry Point
# -----------------------------------------------------------------------------


def sanitize_part_text(
    text: str,
    content_type: str = HTML_CONTENT_TYPE,
    pipeline: list[Sanitizer] | None = None,
) -> str:
    """Run text through a sanitizer pipeline (HTML_PIPELINE by default)."""
    if not text:
        return ""

    for sanitizer in (pipeline or HTML_PIPELINE):
        text = sanitizer(text, content_type)

    return text


def strip_html(text: str) -> str:
    """Render HTML as plain text. Falls back to the raw markup when the parser fails."""
    try:
        return sanitize_part_text(text, content_type=HTML_CONTENT_TYPE)
    except Exception as e:
        logger.warning("sanitizer.strip_html_failed", error=str(e), length=len(text))
        return text
