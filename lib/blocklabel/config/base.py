"""Base configuration models."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ModuleConfig(BaseModel):
    """Registry-backed component selected by ``type``."""

    type: str = Field(..., description="Registry name of the backend, e.g. 'memory' or 'file'.")
    name: Optional[str] = Field(default=None, description="Optional label used in log messages.")
    params: Dict[str, Any] = Field(
        default_factory=dict, description="Backend-specific settings such as 'labels' or 'path'."
    )
