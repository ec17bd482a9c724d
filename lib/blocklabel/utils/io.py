"""Serialization helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml


def load_yaml_file(path: Path) -> Any:
    """Load a YAML file and return the parsed object."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_label_file(path: Path) -> List[str]:
    """Read one label per line, ignoring blank lines."""
    with path.open("r", encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle if line.strip()]
