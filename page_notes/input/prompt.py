"""
Interactive console collection of URLs and the output filename.

Prompts go through rich so they share the console used for progress and
log output. An optional stream replaces stdin, which keeps the prompts
scriptable.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from ..core.errors import InputError


def prompt_for_urls(console: Console, stream: TextIO | None = None) -> list[str]:
    """Ask for URLs one at a time until the user declines to add another.

    Args:
        console: Rich console to prompt on
        stream: Optional input stream used instead of stdin

    Returns:
        The URLs in the order they were entered

    Raises:
        InputError: If an empty URL is entered
    """
    urls: list[str] = []
    while True:
        url = Prompt.ask("Enter a link (URL)", console=console, stream=stream).strip()
        if not url:
            raise InputError("URL cannot be empty.")
        urls.append(url)

        # Confirm re-prompts until it gets y or n
        if not Confirm.ask("Add another link?", console=console, stream=stream):
            return urls


def prompt_for_filename(console: Console, stream: TextIO | None = None) -> str:
    """Ask for the report filename. No default is substituted for an empty answer."""
    return Prompt.ask("Enter output filename (e.g., notes.md)", console=console, stream=stream).strip()
