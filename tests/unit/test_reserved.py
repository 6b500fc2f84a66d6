"""Unit tests for reserved-name detection."""

from __future__ import annotations

import pytest

from sanitize_filename.core.reserved import is_all_dots, is_windows_reserved


@pytest.mark.parametrize("name", [".", "..", "...", "." * 40])
def test_all_dots(name: str) -> None:
    assert is_all_dots(name)


@pytest.mark.parametrize("name", ["", ".a", "a.", ". ", "…"])
def test_not_all_dots(name: str) -> None:
    assert not is_all_dots(name)


@pytest.mark.parametrize(
    "name",
    ["con", "CON", "Con.txt", "prn", "AUX", "nul.tar.gz", "com0", "COM9", "lpt1", "LPT9.asdf", "aux."],
)
def test_windows_reserved(name: str) -> None:
    assert is_windows_reserved(name)


@pytest.mark.parametrize(
    "name",
    ["", "console", "com10", "lpt", "xcon", "con txt", ".con", "ϲon", "nul_"],
)
def test_not_windows_reserved(name: str) -> None:
    assert not is_windows_reserved(name)


def test_fullwidth_lookalikes_are_not_reserved() -> None:
    assert not is_windows_reserved("\uff23\uff2f\uff2e")
    assert not is_windows_reserved("\uff43\uff4f\uff4e.txt")
