"""Existence oracle configuration."""

from __future__ import annotations

from .base import ModuleConfig


class OracleConfig(ModuleConfig):
    """Configuration for the source of existing labels."""
