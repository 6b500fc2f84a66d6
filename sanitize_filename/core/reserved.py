"""Detection of names that are reserved as a whole."""

from __future__ import annotations

from .rules import get_rules


def is_all_dots(name: str) -> bool:
    """True for ``.``, ``..``, ``...`` and so on."""
    return bool(name) and name.strip(".") == ""


def _ascii_lower(value: str) -> str:
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in value
    )


def is_windows_reserved(name: str) -> bool:
    """True when the part before the first dot is a Windows device name.

    ``CON``, ``con.txt`` and ``Lpt9.tar.gz`` match; ``console`` does not.
    Case folding is ASCII only.
    """
    if not name:
        return False
    stem = name.split(".", 1)[0]
    return _ascii_lower(stem) in get_rules().reserved_stems
