"""Existence oracles answering whether a label is already taken."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from blocklabel.config import OracleConfig
from blocklabel.core.registry import ORACLES

from .file import build_file_oracle
from .memory import build_memory_oracle, count_oracle, membership_oracle


def build_oracle(config: OracleConfig, *, extra_labels: Iterable[str] = ()) -> Callable[[str], bool]:
    """Instantiate the configured oracle, also treating ``extra_labels`` as taken."""

    base = ORACLES.get(config.type)(config)
    logging.debug("Using %s oracle '%s'", config.type, config.name or config.type)
    extra = membership_oracle(extra_labels)

    def exists(label: str) -> bool:
        return extra(label) or base(label)

    return exists


__all__ = [
    "build_oracle",
    "build_file_oracle",
    "build_memory_oracle",
    "count_oracle",
    "membership_oracle",
]
