"""
Page fetching and readable-text extraction.

This package handles HTTP fetching and the conversion of raw HTML
into plain text.
"""

from .extractor import extract_text, normalize_whitespace
from .fetcher import FetchResult, fetch_url

__all__ = [
    "fetch_url",
    "FetchResult",
    "extract_text",
    "normalize_whitespace",
]
