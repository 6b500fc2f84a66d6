"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from sanitize_filename.core.options import Options, OptionsForCheck
from sanitize_filename.settings import ENV_REPLACEMENT, ENV_TRUNCATE, ENV_WINDOWS


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep user settings and env overrides out of every test."""
    for var in (ENV_WINDOWS, ENV_TRUNCATE, ENV_REPLACEMENT):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def windows_options() -> Options:
    return Options(windows=True, truncate=True, replacement="")


@pytest.fixture
def posix_options() -> Options:
    return Options(windows=False, truncate=True, replacement="")


@pytest.fixture
def windows_check() -> OptionsForCheck:
    return OptionsForCheck(windows=True, truncate=True)
