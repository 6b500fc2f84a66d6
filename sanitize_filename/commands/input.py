"""Input acquisition shared by the commands."""

from __future__ import annotations

from argparse import Namespace
import sys
from typing import Optional, TextIO

from sanitize_filename.errors import InputReadError

STDIN_MARKER = "-"


def read_name(args: Namespace, *, stdin: Optional[TextIO] = None) -> str:
    """Return the positional name, or all of stdin when absent or ``-``."""
    name = getattr(args, "name", None)
    if name is not None and name != STDIN_MARKER:
        return name
    stream = stdin if stdin is not None else sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError("standard input", exc) from exc
