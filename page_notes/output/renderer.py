"""
Report rendering for the Markdown notes file.

Each source URL becomes one record:

    ---
    Source: <url>
    Text:

    <extracted text, or a placeholder / failure reason>

Records are written in input order and flushed one by one, so a failure
later in the run leaves every earlier record on disk.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import TextIO

from ..core.errors import InputError
from ..core.types import ExtractedRecord

RECORD_SEPARATOR = "---"
EMPTY_TEXT_PLACEHOLDER = "Couldn't extract readable text."
FETCH_FAILED_PLACEHOLDER = "Couldn't reach website or something went wrong."


def format_record(record: ExtractedRecord) -> str:
    """Format one record as a report section.

    Args:
        record: The record to render

    Returns:
        The section text, ending with a blank line

    Examples:
        >>> format_record(ExtractedRecord(url="https://a.example", text="Hi"))
        '---\\nSource: https://a.example\\nText:\\n\\nHi\\n\\n'
    """
    lines = [RECORD_SEPARATOR, f"Source: {record.url}", "Text:", ""]
    if record.failed:
        lines.append(FETCH_FAILED_PLACEHOLDER)
        lines.append(f"Reason: {record.error}")
    elif record.has_text:
        lines.append(record.text)
    else:
        lines.append(EMPTY_TEXT_PLACEHOLDER)
    lines.append("")
    return "\n".join(lines) + "\n"


def resolve_output_path(name: str | Path, extension: str = ".md") -> Path:
    """Turn a user-supplied filename into the report path.

    Args:
        name: Filename or path as typed by the user
        extension: Extension to append when the name lacks it

    Returns:
        The report path; relative paths stay relative to the working directory

    Raises:
        InputError: If the name is empty after trimming

    Examples:
        >>> resolve_output_path("notes")
        PosixPath('notes.md')
        >>> resolve_output_path("Notes.MD")
        PosixPath('Notes.MD')
    """
    cleaned = str(name).strip()
    if not cleaned:
        raise InputError("filename cannot be empty.")
    if not cleaned.lower().endswith(extension.lower()):
        cleaned += extension
    return Path(cleaned)


class ReportWriter:
    """Streams records into the report file, flushing after each one.

    Opening truncates an existing file. Errors opening or writing the
    destination are raised as OSError; there is no partial-success path
    once the file cannot be written.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.records_written = 0
        self._handle: TextIO | None = None

    def __enter__(self) -> ReportWriter:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def open(self) -> None:
        self._handle = self.path.open("w", encoding="utf-8", newline="\n")

    def write(self, record: ExtractedRecord) -> None:
        if self._handle is None:
            raise RuntimeError("ReportWriter is not open")
        self._handle.write(format_record(record))
        self._handle.flush()
        self.records_written += 1

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


def write_report(records: list[ExtractedRecord], output_path: Path) -> None:
    """Write a complete list of records to output_path."""
    with ReportWriter(output_path) as writer:
        for record in records:
            writer.write(record)
