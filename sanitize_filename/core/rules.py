"""Static rule tables shared by the sanitizer and the validator.

The tables are built on first use and published through a single handle.
Construction is guarded by a lock so concurrent first callers build them
exactly once; after that every reader sees the same immutable object.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from threading import Lock
from typing import FrozenSet, Optional

ILLEGAL_CHARACTERS = '/?<>\\:*|"'
CONTROL_RANGES = ((0x00, 0x1F), (0x80, 0x9F))
WINDOWS_RESERVED_STEMS = (
    ("con", "prn", "aux", "nul")
    + tuple(f"com{i}" for i in range(10))
    + tuple(f"lpt{i}" for i in range(10))
)
WINDOWS_TRAILING_CHARACTERS = ". "
MAX_ENCODED_LENGTH = 255


@dataclass(frozen=True)
class RuleTables:
    illegal: FrozenSet[str]
    reserved_stems: FrozenSet[str]
    trailing: FrozenSet[str]
    # Matches a single illegal or control code point.
    offending_pattern: re.Pattern[str]
    max_encoded_length: int


_TABLES: Optional[RuleTables] = None
_TABLES_LOCK = Lock()


def _build_tables() -> RuleTables:
    control_class = "".join(
        f"\\x{low:02x}-\\x{high:02x}" for low, high in CONTROL_RANGES
    )
    pattern = re.compile(f"[{re.escape(ILLEGAL_CHARACTERS)}{control_class}]")
    return RuleTables(
        illegal=frozenset(ILLEGAL_CHARACTERS),
        reserved_stems=frozenset(WINDOWS_RESERVED_STEMS),
        trailing=frozenset(WINDOWS_TRAILING_CHARACTERS),
        offending_pattern=pattern,
        max_encoded_length=MAX_ENCODED_LENGTH,
    )


def get_rules() -> RuleTables:
    """Return the process-wide rule tables, building them on first use."""
    global _TABLES
    tables = _TABLES
    if tables is not None:
        return tables
    with _TABLES_LOCK:
        if _TABLES is None:
            _TABLES = _build_tables()
        return _TABLES
