from __future__ import annotations


class InputError(ValueError):
    """Raised when user-supplied input (URL list, filename) is invalid."""
