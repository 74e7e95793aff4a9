"""
page-notes - save the readable text of web pages as Markdown notes.

This package fetches an ordered list of URLs, strips markup noise from each
page and writes the remaining headings, paragraphs, preformatted blocks and
tables into a single notes file, one section per URL.

Main entry point is the CLI via `page-notes run` command.

Example:
    $ page-notes run https://example.com -o notes.md
"""

__all__ = ["__version__", "extract_text", "fetch_url", "run_pipeline"]
__version__ = "0.1.0"

from .fetch.extractor import extract_text
from .fetch.fetcher import fetch_url
from .runner import run_pipeline
