"""
URL list validation and loading.

URLs are kept as opaque strings: only emptiness is checked here, URI
parsing is left to the HTTP client.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..core.errors import InputError


def validate_urls(urls: Iterable[str]) -> list[str]:
    """Trim and validate an ordered list of URLs.

    Order is preserved and duplicates are kept: every input URL produces
    one record in the report.

    Args:
        urls: URLs as supplied by the user

    Returns:
        The trimmed URLs

    Raises:
        InputError: If any URL is empty or the list itself is empty
    """
    cleaned: list[str] = []
    for url in urls:
        value = url.strip()
        if not value:
            raise InputError("URL cannot be empty.")
        cleaned.append(value)
    if not cleaned:
        raise InputError("Add at least one URL.")
    return cleaned


def parse_url_lines(text: str) -> list[str]:
    """Parse one URL per line, skipping blank lines and # comments."""
    urls = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        urls.append(stripped)
    return urls


def load_url_file(path: Path) -> list[str]:
    """Load and validate URLs from a text file."""
    return validate_urls(parse_url_lines(path.read_text(encoding="utf-8")))
