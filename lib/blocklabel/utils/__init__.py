"""Utility helpers."""

from __future__ import annotations

from .io import load_yaml_file, read_label_file
from .naming import build_prefix, compose_label

__all__ = [
    "load_yaml_file",
    "read_label_file",
    "build_prefix",
    "compose_label",
]
