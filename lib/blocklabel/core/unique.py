"""Collision resolution for generated labels."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .errors import ExhaustedError, OracleError

DEFAULT_MAX_ATTEMPTS = 1000

# Only ASCII digits count as a suffix; "Team 007" becomes "Team 8".
_NUMERIC_SUFFIX = re.compile(r" ([0-9]+)\Z")

ExistsFn = Callable[[str], bool]


def next_candidate(label: str) -> str:
    """Increment a trailing `` N`` suffix, or append `` 1`` when there is none."""

    match = _NUMERIC_SUFFIX.search(label)
    if match is None:
        return f"{label} 1"
    return f"{label[: match.start(1)]}{int(match.group(1)) + 1}"


def generate_unique(
    candidate: str,
    exists: ExistsFn,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """Return the first label derived from ``candidate`` that ``exists`` reports as free.

    Each candidate is checked exactly once. Failures raised by ``exists`` abort the
    search as :class:`OracleError`; running out of attempts raises
    :class:`ExhaustedError`.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1.")

    label = candidate
    for _ in range(max_attempts):
        try:
            taken = exists(label)
        except Exception as exc:
            raise OracleError(label) from exc
        if not taken:
            return label
        logging.debug("Label '%s' already exists.", label)
        label = next_candidate(label)

    raise ExhaustedError(candidate, max_attempts)


__all__ = ["DEFAULT_MAX_ATTEMPTS", "generate_unique", "next_candidate"]
