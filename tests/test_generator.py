"""Tests for the block description service."""

from __future__ import annotations

import pytest

from blocklabel.config import GeneratorConfig
from blocklabel.core import BlockDescriptionGenerator, ExhaustedError, UnknownBundleError
from blocklabel.oracles import membership_oracle

BUNDLES = {"staff_directory": "Staff Directory", "events_news": "Events & News!"}


def test_create_description_without_collision():
    generator = BlockDescriptionGenerator(membership_oracle([]))
    assert generator.create_description("Staff Directory", "Team") == "SD: Team"


def test_create_description_with_collision():
    generator = BlockDescriptionGenerator(membership_oracle(["SD: Team", "SD: Team 1"]))
    assert generator.create_description("Staff Directory", "Team") == "SD: Team 2"


def test_describe_bundle_uses_bundle_label():
    generator = BlockDescriptionGenerator(membership_oracle([]), bundles=BUNDLES)
    assert generator.describe_bundle("events_news", "Spring Gala") == "EN: Spring Gala"


def test_unknown_bundle():
    generator = BlockDescriptionGenerator(membership_oracle([]), bundles=BUNDLES)
    with pytest.raises(UnknownBundleError) as excinfo:
        generator.describe_bundle("marquee", "Hello")
    assert "marquee" in str(excinfo.value)
    assert "staff_directory" in str(excinfo.value)


def test_resolve_disabled_returns_none():
    generator = BlockDescriptionGenerator(membership_oracle([]), bundles=BUNDLES, enabled=False)
    assert generator.resolve("staff_directory", "Team") is None


def test_resolve_keeps_existing_description():
    generator = BlockDescriptionGenerator(membership_oracle(["Custom"]), bundles=BUNDLES)
    assert generator.resolve("staff_directory", "Team", current="Custom") == "Custom"


def test_resolve_generates_when_empty():
    generator = BlockDescriptionGenerator(membership_oracle(["SD: Team"]), bundles=BUNDLES)
    assert generator.resolve("staff_directory", "Team", current="") == "SD: Team 1"
    assert generator.resolve("staff_directory", None) == "SD: "


def test_from_config():
    config = GeneratorConfig(
        generate_custom_block_title=True,
        separator=" - ",
        max_attempts=2,
        bundles=BUNDLES,
    )
    generator = BlockDescriptionGenerator.from_config(
        config, membership_oracle(["SD - Team", "SD - Team 1"])
    )
    assert generator.enabled is True
    with pytest.raises(ExhaustedError):
        generator.describe_bundle("staff_directory", "Team")
