"""
Report output.

This package formats extracted records and writes the Markdown notes file.
"""

from .renderer import ReportWriter, format_record, resolve_output_path, write_report

__all__ = [
    "ReportWriter",
    "format_record",
    "resolve_output_path",
    "write_report",
]
