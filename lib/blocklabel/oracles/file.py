"""Oracle backed by a plain-text file of existing labels."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from blocklabel.config import OracleConfig
from blocklabel.core.registry import register_oracle
from blocklabel.utils import read_label_file

from .memory import membership_oracle


@register_oracle("file")
def build_file_oracle(config: OracleConfig) -> Callable[[str], bool]:
    raw_path = config.params.get("path")
    if not raw_path:
        raise ValueError("file oracle requires a 'path' parameter.")
    path = Path(raw_path)
    if not path.is_file():
        raise FileNotFoundError(f"Label file not found: {path}")
    labels = read_label_file(path)
    logging.info("Loaded %d existing label(s) from %s", len(labels), path)
    return membership_oracle(labels)


__all__ = ["build_file_oracle"]
