"""Configuration models for blocklabel."""

from __future__ import annotations

from .base import ModuleConfig
from .generator import GeneratorConfig
from .oracle import OracleConfig

__all__ = [
    "GeneratorConfig",
    "ModuleConfig",
    "OracleConfig",
]
