"""
Command-line interface for page-notes.

Uses Typer to provide a CLI that collects URLs (arguments, a URL list file,
or an interactive prompt), fetches each page and writes the readable text
into a Markdown notes file. Supports loading .env files for configuration
overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
import typer
from rich.console import Console
from rich.markup import escape

from .config import apply_env_overrides, load_config
from .core.errors import InputError
from .input.prompt import prompt_for_filename, prompt_for_urls
from .input.url_list import load_url_file, validate_urls
from .output.renderer import resolve_output_path
from .runner import run_pipeline

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main() -> None:
    """Save the readable text of web pages into a Markdown notes file."""


@app.command()
def run(
    urls: list[str] | None = typer.Argument(None, help="URLs to fetch, in report order."),
    urls_file: Path | None = typer.Option(
        None,
        "--urls-file",
        "-i",
        exists=True,
        readable=True,
        help="Text file with one URL per line (# comments allowed).",
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Report filename; .md is appended if missing."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, help="YAML config file."),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Fetch pages and write their readable text to a notes file.

    URLs are taken from the arguments, else from --urls-file, else asked
    for interactively. The filename is taken from --output, else asked for.

    Args:
        urls: URLs to fetch, in the order they should appear
        urls_file: Optional path to a URL list file
        output: Report filename
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    load_dotenv(find_dotenv(usecwd=True))

    config_path = str(config) if config else os.getenv("PAGE_NOTES_CONFIG")
    cfg = apply_env_overrides(load_config(config_path))

    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        if urls:
            url_list = validate_urls(urls)
        elif urls_file is not None:
            url_list = load_url_file(urls_file)
        else:
            url_list = prompt_for_urls(console)
        filename = output if output is not None else prompt_for_filename(console)
        output_path = resolve_output_path(filename, cfg.output.extension)
    except InputError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    try:
        saved_path = run_pipeline(url_list, output_path, cfg, show_progress=progress, console=console)
    except Exception as exc:  # noqa: BLE001
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_FAILURE)

    console.print(f"Saved: {saved_path}", markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
