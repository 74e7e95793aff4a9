"""
Readable-text extraction from raw HTML.

The extraction runs in two phases:
1. Structural removal: noise elements (scripts, styles, navigation, page
   chrome) are dropped with all of their descendants.
2. Allow-list traversal: headings h1-h5, paragraphs, preformatted blocks and
   tables are visited in document order and rendered as plain text, one
   block per element separated by a blank line.

The accumulated text is then normalised: horizontal whitespace runs become a
single space and blank-line runs are capped at one blank line.
"""

from __future__ import annotations

import re
import warnings

from bs4 import (
    BeautifulSoup,
    MarkupResemblesLocatorWarning,
    ParserRejectedMarkup,
    Tag,
    XMLParsedAsHTMLWarning,
)

NOISE_TAGS = [
    "script",
    "style",
    "noscript",
    "svg",
    "canvas",
    "iframe",
    "nav",
    "header",
    "footer",
]
CONTENT_TAGS = ["h1", "h2", "h3", "h4", "h5", "p", "pre", "table"]
CELL_SEPARATOR = " | "

# Elements whose text is set apart from its neighbours by a space.
BLOCK_TAGS = [
    "address",
    "article",
    "aside",
    "blockquote",
    "caption",
    "center",
    "dd",
    "details",
    "dialog",
    "dir",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hgroup",
    "hr",
    "li",
    "main",
    "menu",
    "ol",
    "p",
    "pre",
    "section",
    "summary",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    "ul",
]

# Newline is not part of the class.
_HORIZONTAL_WS_RE = re.compile(r"[ \t\x0b\f\r]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def extract_text(html: str | bytes) -> str:
    """Extract readable plain text from an HTML document.

    Never raises on malformed markup: the lxml parser recovers from broken
    HTML and fills in implied structure. Bytes are decoded as UTF-8 with
    invalid sequences replaced.

    Args:
        html: Raw HTML as text or bytes

    Returns:
        The normalised readable text, or an empty string when the document
        has no body or no content elements

    Examples:
        >>> extract_text("<h1>Title</h1><p>Hello   world</p>")
        'Title\\n\\nHello world'
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    else:
        # Lone surrogates cannot be encoded by the parser
        html = html.encode("utf-8", errors="replace").decode("utf-8")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(html, "lxml")
    except ParserRejectedMarkup:
        return ""
    for tag in soup(NOISE_TAGS):
        # Nested noise (e.g. a script inside nav) is already gone with its parent
        if not tag.decomposed:
            tag.decompose()

    body = soup.body
    if body is None:
        return ""

    for br in body.find_all("br"):
        br.replace_with("\n")
    for block in body.find_all(BLOCK_TAGS):
        block.insert_before(" ")
        block.insert_after(" ")

    parts: list[str] = []
    for element in body.find_all(CONTENT_TAGS):
        if element.name == "table":
            _append_table(parts, element)
        elif element.name == "pre":
            text = element.get_text().strip()
            if text:
                parts.append(text + "\n\n")
        else:
            text = _element_text(element)
            if text:
                parts.append(text + "\n\n")

    return normalize_whitespace("".join(parts)).strip()


def normalize_whitespace(text: str) -> str:
    """Collapse horizontal whitespace runs, then cap blank-line runs.

    The two passes are order-dependent: horizontal whitespace between
    newlines must be collapsed first so that the newline pass sees it.

    Args:
        text: Accumulated plain text

    Returns:
        Text with every run of spaces/tabs/CR/FF/VT replaced by one space
        and every run of three or more newlines replaced by two
    """
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    return _BLANK_RUN_RE.sub("\n\n", text)


def _append_table(parts: list[str], table: Tag) -> None:
    """Render a table as pipe-delimited rows followed by a blank line.

    Rows are selected anywhere below the table, so rows of nested tables
    are flattened into this one. Rows without th/td cells emit nothing.
    """
    for row in table.find_all("tr"):
        cells = row.find_all(["th", "td"])
        if not cells:
            continue
        parts.append(CELL_SEPARATOR.join(_element_text(cell) for cell in cells) + "\n")
    parts.append("\n")


def _element_text(element: Tag) -> str:
    """Return the element's text with all whitespace runs joined by one space."""
    return " ".join(element.get_text().split())
