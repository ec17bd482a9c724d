"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path
import textwrap

import pytest
from pydantic import ValidationError

from blocklabel.config import GeneratorConfig


def test_defaults():
    config = GeneratorConfig()
    assert config.generate_custom_block_title is False
    assert config.separator == ": "
    assert config.max_attempts == 1000
    assert config.oracle.type == "memory"


def test_from_yaml(tmp_path: Path):
    path = tmp_path / "blocklabel.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            generate_custom_block_title: true
            max_attempts: 50
            bundles:
              staff_directory: Staff Directory
            oracle:
              type: file
              params:
                path: labels.txt
            """
        ),
        encoding="utf-8",
    )

    config = GeneratorConfig.from_yaml(path)
    assert config.generate_custom_block_title is True
    assert config.max_attempts == 50
    assert config.bundles == {"staff_directory": "Staff Directory"}
    assert config.oracle.type == "file"
    assert config.oracle.params["path"] == str(tmp_path / "labels.txt")


def test_empty_yaml_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert GeneratorConfig.from_yaml(path) == GeneratorConfig()


def test_max_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        GeneratorConfig(max_attempts=0)


def test_absolute_oracle_path_is_kept(tmp_path: Path):
    labels = tmp_path / "elsewhere" / "labels.txt"
    path = tmp_path / "blocklabel.yaml"
    path.write_text(
        f"oracle:\n  type: file\n  params:\n    path: {labels.as_posix()}\n",
        encoding="utf-8",
    )
    assert GeneratorConfig.from_yaml(path).oracle.params["path"] == labels.as_posix()
