"""Check command - report whether a name is already sanitized."""

from __future__ import annotations

from argparse import Namespace
from typing import Optional, TextIO

from sanitize_filename.commands.input import read_name
from sanitize_filename.commands.output import NameReport, emit_report
from sanitize_filename.core.options import OptionsForCheck
from sanitize_filename.core.validation import first_violation

NOT_SANITIZED_EXIT_CODE = 1


def run_check(
    args: Namespace,
    *,
    options: OptionsForCheck,
    stdin: Optional[TextIO] = None,
    output_sink=print,
) -> int:
    """Exit 0 when the input is already sanitized, 1 otherwise."""
    name = read_name(args, stdin=stdin)
    violation = first_violation(name, options)
    report = NameReport(command="check", name=name, options=options, violation=violation)
    emit_report(report, json_output=getattr(args, "json", False), output_sink=output_sink)
    return 0 if violation is None else NOT_SANITIZED_EXIT_CODE
