"""Failures the CLI reports, each mapped to its own exit status.

The sanitizing core never raises; everything here comes from reading input
or resolving settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

UNEXPECTED_EXIT_CODE = 1


class SanitizeFilenameError(Exception):
    """Base error for deterministic CLI exit codes."""

    exit_code: int = UNEXPECTED_EXIT_CODE


class SettingsError(SanitizeFilenameError):
    """A setting value, env override, or settings file could not be used.

    ``source`` names where the bad value came from: an environment variable,
    a settings key, or the settings file path.
    """

    exit_code = 2

    def __init__(self, source: str, problem: str) -> None:
        super().__init__(f"{source}: {problem}")
        self.source = source
        self.problem = problem


class InputReadError(SanitizeFilenameError):
    """The name to sanitize or the settings file could not be read."""

    exit_code = 3

    def __init__(
        self,
        what: str,
        cause: Optional[BaseException] = None,
        *,
        path: Optional[Path] = None,
    ) -> None:
        detail = f"Failed to read {what}"
        if path is not None:
            detail += f" {path}"
        if cause is not None:
            detail += f": {cause}"
        super().__init__(detail)
        self.path = path


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, SanitizeFilenameError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return InputReadError.exit_code
    return UNEXPECTED_EXIT_CODE
