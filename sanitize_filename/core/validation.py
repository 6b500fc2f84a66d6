"""Read-only checks mirroring the sanitizer rules."""

from __future__ import annotations

from typing import Optional, Union

from .charfilter import has_offending_character
from .options import Options, OptionsForCheck
from .reserved import is_all_dots, is_windows_reserved
from .trailing import has_trailing_violation
from .truncate import exceeds_limit

ILLEGAL_CHARACTER = "illegal-character"
ALL_DOTS = "all-dots"
WINDOWS_RESERVED = "windows-reserved"
WINDOWS_TRAILING = "windows-trailing"
TOO_LONG = "too-long"

CheckOptions = Union[OptionsForCheck, Options]


def first_violation(name: str, options: Optional[CheckOptions] = None) -> Optional[str]:
    """Return the first rule ``name`` breaks, or None when it is already sanitized.

    Accepts ``Options`` as well as ``OptionsForCheck``; any replacement is ignored.
    """
    if options is None:
        options = OptionsForCheck()
    if not name:
        return None
    if has_offending_character(name):
        return ILLEGAL_CHARACTER
    if is_all_dots(name):
        return ALL_DOTS
    if options.windows:
        if is_windows_reserved(name):
            return WINDOWS_RESERVED
        if has_trailing_violation(name):
            return WINDOWS_TRAILING
    if options.truncate and exceeds_limit(name):
        return TOO_LONG
    return None


def is_sanitized(name: str, options: Optional[CheckOptions] = None) -> bool:
    """True when ``sanitize`` would return ``name`` unchanged."""
    return first_violation(name, options) is None
