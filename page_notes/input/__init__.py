"""
Input collection.

URLs come from command-line arguments, a URL list file, or an
interactive console prompt; all three produce the same ordered list.
"""

from .prompt import prompt_for_filename, prompt_for_urls
from .url_list import load_url_file, parse_url_lines, validate_urls

__all__ = [
    "prompt_for_urls",
    "prompt_for_filename",
    "load_url_file",
    "parse_url_lines",
    "validate_urls",
]
