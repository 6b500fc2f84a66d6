"""Windows trailing dot/space trimming."""

from __future__ import annotations

from .rules import get_rules


def has_trailing_violation(name: str) -> bool:
    return bool(name) and name[-1] in get_rules().trailing


def strip_trailing(name: str) -> str:
    trailing = get_rules().trailing
    end = len(name)
    while end and name[end - 1] in trailing:
        end -= 1
    return name[:end]


def trim_trailing(name: str, replacement: str) -> str:
    """Drop trailing dots and spaces, marking the cut with one replacement.

    A name that is nothing but dots and spaces becomes ``replacement``.
    """
    trimmed = strip_trailing(name)
    if len(trimmed) == len(name):
        return name
    if not trimmed:
        return replacement
    return trimmed + replacement
