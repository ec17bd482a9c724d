"""In-memory existence oracles."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from blocklabel.config import OracleConfig
from blocklabel.core.registry import register_oracle


def membership_oracle(labels: Iterable[str]) -> Callable[[str], bool]:
    """Exact-match membership over a snapshot of ``labels``."""

    taken = frozenset(labels)

    def exists(label: str) -> bool:
        return label in taken

    return exists


def count_oracle(count: Callable[[str], int]) -> Callable[[str], bool]:
    """Adapt a row-count lookup (``SELECT COUNT(*) ... WHERE info = ?``) to a predicate."""

    def exists(label: str) -> bool:
        return int(count(label)) > 0

    return exists


@register_oracle("memory")
def build_memory_oracle(config: OracleConfig) -> Callable[[str], bool]:
    labels = config.params.get("labels", [])
    if isinstance(labels, str) or not isinstance(labels, Iterable):
        raise ValueError("memory oracle 'labels' must be a list of strings.")
    return membership_oracle(str(label) for label in labels)


__all__ = ["membership_oracle", "count_oracle", "build_memory_oracle"]
