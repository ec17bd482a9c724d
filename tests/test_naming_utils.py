"""Unit tests for naming helpers."""

from __future__ import annotations

from blocklabel.utils.naming import build_prefix, compose_label


def test_build_prefix_basic():
    assert build_prefix("Staff Directory") == "SD"


def test_build_prefix_strips_special_characters():
    assert build_prefix("Events & News!") == "EN"


def test_build_prefix_empty_inputs():
    assert build_prefix("") == ""
    assert build_prefix("   ") == ""
    assert build_prefix("&!?") == ""


def test_build_prefix_skips_empty_words_and_uppercases():
    assert build_prefix("  quick   links ") == "QL"
    assert build_prefix("top 10 lists") == "T1L"


def test_build_prefix_drops_non_ascii_letters():
    assert build_prefix("Café Menu") == "CM"
    assert build_prefix("Über uns") == "BU"


def test_compose_label():
    assert compose_label("SD", "Team") == "SD: Team"
    assert compose_label("SD", "Team", separator=" - ") == "SD - Team"
