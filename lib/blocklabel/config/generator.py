"""Top-level generator configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field

from blocklabel.core.unique import DEFAULT_MAX_ATTEMPTS
from blocklabel.utils.io import load_yaml_file

from .oracle import OracleConfig


class GeneratorConfig(BaseModel):
    """Settings controlling automatic block description generation."""

    generate_custom_block_title: bool = Field(
        default=False,
        description="Generate block descriptions from the title instead of asking for one.",
    )
    separator: str = Field(default=": ", description="Text placed between prefix and title.")
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        ge=1,
        description="Maximum number of existence checks before giving up.",
    )
    bundles: Dict[str, str] = Field(
        default_factory=dict,
        description="Block content type machine names mapped to their human labels.",
    )
    oracle: OracleConfig = Field(default_factory=lambda: OracleConfig(type="memory"))

    @classmethod
    def from_yaml(cls, path: Path) -> "GeneratorConfig":
        """Load a YAML config; a relative oracle ``path`` is taken from the config's directory."""
        raw_config = load_yaml_file(path) or {}
        config = cls.model_validate(raw_config)
        oracle_path = config.oracle.params.get("path")
        if isinstance(oracle_path, str) and oracle_path and not Path(oracle_path).is_absolute():
            config.oracle.params["path"] = str(path.parent / oracle_path)
        return config
