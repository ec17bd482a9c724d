"""Core generation primitives for blocklabel."""

from __future__ import annotations

from .errors import ExhaustedError, LabelError, OracleError, UnknownBundleError
from .generator import BlockDescriptionGenerator
from .registry import ORACLES, Registry, register_oracle
from .unique import DEFAULT_MAX_ATTEMPTS, generate_unique, next_candidate

__all__ = [
    "BlockDescriptionGenerator",
    "DEFAULT_MAX_ATTEMPTS",
    "ExhaustedError",
    "LabelError",
    "ORACLES",
    "OracleError",
    "Registry",
    "UnknownBundleError",
    "generate_unique",
    "next_candidate",
    "register_oracle",
]
