"""
Core data types for page-notes.

- ExtractedRecord: one report section, the outcome of fetching and
  extracting a single source URL
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExtractedRecord:
    """Outcome of processing one source URL.

    Either text or error will be populated, but not both. An empty text
    with no error means the page was fetched but nothing readable was left.

    Attributes:
        url: The source URL exactly as supplied by the user
        text: The extracted plain text, or None if the fetch failed
        error: Failure reason if the fetch failed, None otherwise
        status_code: HTTP status code, or None if no response was received
    """
    url: str
    text: str | None
    error: str | None = None
    status_code: int | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())
