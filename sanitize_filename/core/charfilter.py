"""Replacement of illegal and control characters."""

from __future__ import annotations

from .rules import get_rules


def has_offending_character(name: str) -> bool:
    return get_rules().offending_pattern.search(name) is not None


def filter_characters(name: str, replacement: str) -> str:
    """Replace every illegal or control character with ``replacement``.

    Each offending code point becomes one copy of the replacement; the
    replacement itself is inserted verbatim and never re-scanned. The input
    object is returned as-is when nothing matches.
    """
    pattern = get_rules().offending_pattern
    if pattern.search(name) is None:
        return name
    return pattern.sub(lambda _match: replacement, name)
