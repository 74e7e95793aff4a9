"""
Core domain models.

This package contains data types that are independent of any
specific pipeline stage.
"""

from .errors import InputError
from .types import ExtractedRecord

__all__ = [
    "ExtractedRecord",
    "InputError",
]
