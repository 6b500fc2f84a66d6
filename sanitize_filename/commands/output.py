"""Rendering of sanitize and check results for the terminal or as JSON."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Optional, Union

from sanitize_filename.core.options import Options, OptionsForCheck

SCHEMA_VERSION = "v1"


@dataclass(frozen=True)
class NameReport:
    """Outcome of one CLI run over a single name.

    ``output`` is set for ``sanitize``; ``violation`` (None when clean) for
    ``check``.
    """

    command: str
    name: str
    options: Union[Options, OptionsForCheck]
    output: Optional[str] = None
    violation: Optional[str] = None

    @property
    def text(self) -> str:
        if self.command == "check":
            return "ok" if self.violation is None else f"not-sanitized: {self.violation}"
        return self.output or ""

    def payload(self) -> dict:
        data = {
            "input": self.name,
            "windows": self.options.windows,
            "truncate": self.options.truncate,
        }
        if self.command == "check":
            data["sanitized"] = self.violation is None
            data["violation"] = self.violation
        else:
            data["output"] = self.output
            data["changed"] = self.output != self.name
        return data


def emit_report(report: NameReport, *, json_output: bool, output_sink=print) -> None:
    """Write ``report`` as one plain line, or as a versioned JSON envelope."""
    if not json_output:
        output_sink(report.text)
        return
    envelope = {
        "schema_version": SCHEMA_VERSION,
        "command": report.command,
        "data": report.payload(),
    }
    output_sink(json.dumps(envelope, sort_keys=True, separators=(",", ":"), ensure_ascii=True))
