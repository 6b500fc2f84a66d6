"""Unit tests for the character filter."""

from __future__ import annotations

import pytest

from sanitize_filename.core.charfilter import filter_characters, has_offending_character


@pytest.mark.parametrize(
    "raw, replacement, expected",
    [
        ("hello\x00world", "", "helloworld"),
        ("col:on.js", "", "colon.js"),
        ("a//b", "_", "a__b"),
        ("tab\there", "-", "tab-here"),
        ("c1\x85ctrl", "", "c1ctrl"),
        ("résumé", "", "résumé"),
        ("日本/語", "_", "日本_語"),
        ("emoji😀?", "", "emoji😀"),
    ],
)
def test_filter_characters(raw: str, replacement: str, expected: str) -> None:
    assert filter_characters(raw, replacement) == expected


def test_replacement_is_not_filtered() -> None:
    assert filter_characters("a?b", "<>") == "a<>b"


def test_clean_input_returned_as_is() -> None:
    raw = "already-clean.txt"
    assert filter_characters(raw, "_") is raw


def test_delete_character_not_in_classes() -> None:
    # DEL sits between the two control ranges and is kept.
    assert filter_characters("a\x7fb", "") == "a\x7fb"


def test_has_offending_character() -> None:
    assert has_offending_character("h?w")
    assert has_offending_character("\x9f")
    assert not has_offending_character("hw")
    assert not has_offending_character("")
