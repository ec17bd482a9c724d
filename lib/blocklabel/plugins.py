"""Import side effects to populate registries."""

from __future__ import annotations

# Existence oracles
from .oracles import file  # noqa: F401
from .oracles import memory  # noqa: F401
