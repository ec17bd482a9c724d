"""Naming utilities for block descriptions."""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^0-9a-zA-Z\s]+", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)


def build_prefix(text: str) -> str:
    """Build an acronym from the first letter of each word in ``text``."""

    clean_text = _DISALLOWED.sub("", text)
    words = _WHITESPACE.split(clean_text)
    return "".join(word[0].upper() for word in words if word)


def compose_label(prefix: str, title: str, *, separator: str = ": ") -> str:
    return f"{prefix}{separator}{title}"


__all__ = ["build_prefix", "compose_label"]
