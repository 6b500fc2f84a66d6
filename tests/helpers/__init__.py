"""Test helper utilities."""

from .corpus import NAME_CORPUS, NON_WINDOWS_CLEANED, WINDOWS_CLEANED

__all__ = [
    "NAME_CORPUS",
    "NON_WINDOWS_CLEANED",
    "WINDOWS_CLEANED",
]
