"""Sanitize command - print the safe form of a name."""

from __future__ import annotations

from argparse import Namespace
import logging
from typing import Optional, TextIO

from sanitize_filename.commands.input import read_name
from sanitize_filename.commands.output import NameReport, emit_report
from sanitize_filename.core.options import Options
from sanitize_filename.core.sanitizer import sanitize_with_options

logger = logging.getLogger(__name__)


def run_sanitize(
    args: Namespace,
    *,
    options: Options,
    stdin: Optional[TextIO] = None,
    output_sink=print,
) -> int:
    """Sanitize the input name and emit the result."""
    name = read_name(args, stdin=stdin)
    result = sanitize_with_options(name, options)
    logger.debug(
        "sanitize windows=%s truncate=%s changed=%s",
        options.windows,
        options.truncate,
        result != name,
    )
    report = NameReport(command="sanitize", name=name, options=options, output=result)
    emit_report(report, json_output=getattr(args, "json", False), output_sink=output_sink)
    return 0
