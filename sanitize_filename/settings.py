"""CLI settings: JSON config file with environment variable overrides."""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any, Optional

from sanitize_filename.core.options import Options, platform_is_windows
from sanitize_filename.errors import InputReadError, SettingsError

ENV_WINDOWS = "SANITIZE_FILENAME_WINDOWS"
ENV_TRUNCATE = "SANITIZE_FILENAME_TRUNCATE"
ENV_REPLACEMENT = "SANITIZE_FILENAME_REPLACEMENT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    # None means "follow the platform".
    windows: Optional[bool] = None
    truncate: bool = True
    replacement: str = ""


def parse_bool(value: Any, *, source: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise SettingsError(source, f"not a boolean: {value!r}")


def _read_json_settings(path: Optional[Path]) -> dict:
    if not path or not path.exists():
        return {}
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputReadError("settings file", exc, path=path) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SettingsError(str(path), f"malformed JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(str(path), "expected a JSON object")
    return data


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from JSON config file, with environment variable overrides.

    Priority order:
    1. Environment variables
    2. JSON config file
    3. Defaults

    Args:
        path: Path to JSON config file, or None to use defaults only

    Returns:
        Settings object with resolved values
    """
    json_settings = _read_json_settings(path)

    windows: Optional[bool] = None
    env_windows = os.getenv(ENV_WINDOWS)
    if env_windows:
        windows = parse_bool(env_windows, source=ENV_WINDOWS)
    elif json_settings.get("windows") is not None:
        windows = parse_bool(json_settings["windows"], source="windows")

    env_truncate = os.getenv(ENV_TRUNCATE)
    if env_truncate:
        truncate = parse_bool(env_truncate, source=ENV_TRUNCATE)
    else:
        truncate = parse_bool(json_settings.get("truncate", True), source="truncate")

    # An empty replacement is meaningful, so only an unset variable falls through.
    replacement = os.getenv(ENV_REPLACEMENT)
    if replacement is None:
        replacement = json_settings.get("replacement", "")
    if not isinstance(replacement, str):
        raise SettingsError("replacement", f"not a string: {replacement!r}")

    return Settings(windows=windows, truncate=truncate, replacement=replacement)


def default_config_path() -> Path:
    return Path.home() / ".config" / "sanitize-filename" / "settings.json"


def resolve_options(
    settings: Settings,
    *,
    cli_windows: Optional[bool] = None,
    cli_truncate: Optional[bool] = None,
    cli_replacement: Optional[str] = None,
) -> Options:
    """Combine settings with CLI flags; flags win when given."""
    if cli_windows is not None:
        windows = cli_windows
    elif settings.windows is not None:
        windows = settings.windows
    else:
        windows = platform_is_windows()
    truncate = cli_truncate if cli_truncate is not None else settings.truncate
    replacement = cli_replacement if cli_replacement is not None else settings.replacement
    return Options(windows=windows, truncate=truncate, replacement=replacement)
