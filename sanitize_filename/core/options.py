"""Option value types for sanitizing and checking names."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def platform_is_windows() -> bool:
    return os.name == "nt"


@dataclass(frozen=True)
class OptionsForCheck:
    """Settings that decide which rules a name must satisfy."""

    windows: bool = field(default_factory=platform_is_windows)
    truncate: bool = True


@dataclass(frozen=True)
class Options:
    """Settings for sanitize.

    Attributes:
        windows: Enforce reserved device names and the trailing dot/space rule
        truncate: Cap the UTF-8 encoded length at 255 bytes
        replacement: Text substituted for each offending character, and for
            names that are reserved as a whole (may be empty)
    """

    windows: bool = field(default_factory=platform_is_windows)
    truncate: bool = True
    replacement: str = ""

    def for_check(self) -> OptionsForCheck:
        return OptionsForCheck(windows=self.windows, truncate=self.truncate)
