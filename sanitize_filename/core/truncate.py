"""Length capping on code point boundaries."""

from __future__ import annotations

from .rules import get_rules


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def encoded_length(name: str) -> int:
    """UTF-8 byte length of ``name``.

    Computed per code point so any ``str`` is accepted, including lone
    surrogates (counted as their 3-byte encoded form).

    Names decoded from non-UTF-8 bytes with ``surrogateescape`` carry
    ``\\udc80``-``\\udcff`` for each undecodable byte. Those count as 3 here
    but are written back as a single byte, so such names may be cut shorter
    than the filesystem would require.
    """
    return sum(_utf8_width(ch) for ch in name)


def exceeds_limit(name: str, limit: int | None = None) -> bool:
    if limit is None:
        limit = get_rules().max_encoded_length
    # Every code point is at least one byte.
    if len(name) > limit:
        return True
    return encoded_length(name) > limit


def truncate(name: str, limit: int | None = None) -> str:
    """Return the longest prefix of ``name`` that fits in ``limit`` bytes."""
    if limit is None:
        limit = get_rules().max_encoded_length
    total = 0
    for index, ch in enumerate(name):
        total += _utf8_width(ch)
        if total > limit:
            return name[:index]
    return name
