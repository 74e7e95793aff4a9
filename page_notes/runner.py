"""
Main pipeline orchestration for page-notes.

This module coordinates the workflow for an ordered list of URLs:
1. Validate the URL list
2. Fetch each page
3. Extract its readable text
4. Append a record to the report and flush it

Processing is strictly sequential and in input order. A failed fetch is
written into the report as a failure record and the run continues; only
errors on the report file itself abort the run.
"""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from .config import AppConfig
from .core.types import ExtractedRecord
from .fetch.extractor import extract_text
from .fetch.fetcher import fetch_url
from .input.url_list import validate_urls
from .logging_utils import log_event, setup_logging
from .output.renderer import ReportWriter


@dataclass
class ScrapeStats:
    """Counters collected while processing the URL list.

    Attributes:
        total: Number of URLs in the run
        extracted: Pages that produced readable text
        empty: Pages fetched successfully but with nothing readable left
        failed: Pages that could not be fetched
    """
    total: int = 0
    extracted: int = 0
    empty: int = 0
    failed: int = 0


def run_pipeline(
    urls: Iterable[str],
    output_path: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> Path:
    """Fetch every URL, extract its text and write the report.

    Args:
        urls: Source URLs in the order they should appear in the report
        output_path: Report file to create (truncated if it exists)
        cfg: Application configuration
        show_progress: Whether to display a progress bar
        console: Rich console for output (creates default if None)

    Returns:
        Absolute path of the written report

    Raises:
        InputError: If the URL list is empty or contains an empty URL
        OSError: If the report file cannot be opened or written
    """
    url_list = validate_urls(urls)
    console = console or Console()
    stats = ScrapeStats(total=len(url_list))

    progress = (
        Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=console,
        )
        if show_progress
        else None
    )

    with ReportWriter(output_path) as writer:
        # The report must open before file logging touches its directory
        logger = setup_logging(cfg.logging, output_path.parent)
        log_event(
            logger,
            "Run start",
            event="run_start",
            total=stats.total,
            output=str(output_path),
        )

        with progress if progress is not None else nullcontext():
            fetch_task = progress.add_task("Fetch + Extract", total=stats.total) if progress is not None else None
            for url in url_list:
                record = scrape_url(url, cfg, stats, logger)
                writer.write(record)
                if progress is not None:
                    progress.advance(fetch_task, 1)

    _render_stats(stats, console)
    log_event(
        logger,
        "Run complete",
        event="run_complete",
        output=str(output_path),
        total=stats.total,
        extracted=stats.extracted,
        empty=stats.empty,
        failed=stats.failed,
    )
    return output_path.resolve()


def scrape_url(
    url: str,
    cfg: AppConfig,
    stats: ScrapeStats,
    logger: logging.Logger | None,
) -> ExtractedRecord:
    """Fetch and extract a single URL, updating stats.

    Args:
        url: The URL to process
        cfg: Application configuration
        stats: Statistics object to update
        logger: Logger for events

    Returns:
        The record to write for this URL
    """
    log_event(logger, "Fetch start", level=logging.DEBUG, event="fetch_start", url=url)

    result = fetch_url(
        url,
        timeout=cfg.fetch.timeout_seconds,
        connect_timeout=cfg.fetch.connect_timeout_seconds,
        user_agent=cfg.fetch.user_agent,
        trust_env=cfg.fetch.trust_env,
    )

    if result.error is not None:
        stats.failed += 1
        log_event(
            logger,
            f"Fetch failed: {url}",
            level=logging.WARNING,
            event="fetch_failed",
            url=url,
            error=result.error,
            status_code=result.status_code,
            error_category=_categorize_error(result.error, result.status_code),
        )
        return ExtractedRecord(url=url, text=None, error=result.error, status_code=result.status_code)

    text = extract_text(result.text or "")
    if text:
        stats.extracted += 1
        log_event(
            logger,
            f"Extracted: {url}",
            event="extract_ok",
            url=url,
            status_code=result.status_code,
            chars=len(text),
        )
    else:
        stats.empty += 1
        log_event(
            logger,
            f"No readable text: {url}",
            level=logging.WARNING,
            event="extract_empty",
            url=url,
            status_code=result.status_code,
            html_size=len(result.text or ""),
        )
    return ExtractedRecord(url=url, text=text, status_code=result.status_code)


def _categorize_error(error: str | None, status_code: int | None) -> str:
    """Categorize fetch errors for logging.

    Args:
        error: Error message from fetch attempt
        status_code: HTTP status code if available

    Returns:
        Error category: "http_status", "timeout", "invalid_url", "network_failed", "unknown"
    """
    if not error:
        return "unknown"
    if status_code is not None:
        return "http_status"
    error_lower = error.lower()
    if "timeout" in error_lower or "timed out" in error_lower:
        return "timeout"
    if "invalidurl" in error_lower or "unsupportedprotocol" in error_lower:
        return "invalid_url"
    if "connect" in error_lower or "connection" in error_lower:
        return "network_failed"
    return "unknown"


def _render_stats(stats: ScrapeStats, console: Console) -> None:
    """Display run statistics to the console."""
    console.print(
        "[bold]Fetch summary[/bold]: "
        f"total={stats.total}, extracted={stats.extracted}, empty={stats.empty}, "
        f"failed={stats.failed}"
    )
