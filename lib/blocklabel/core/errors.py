"""Exceptions raised while generating block descriptions."""

from __future__ import annotations


class LabelError(Exception):
    """Base class for blocklabel failures."""


class ExhaustedError(LabelError):
    """No free label was found within the allowed number of checks."""

    def __init__(self, candidate: str, attempts: int) -> None:
        super().__init__(
            f"No unique label found for '{candidate}' after {attempts} existence checks."
        )
        self.candidate = candidate
        self.attempts = attempts


class OracleError(LabelError):
    """The existence check itself failed."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Existence check failed for label '{label}'.")
        self.label = label


class UnknownBundleError(LabelError, KeyError):
    """A bundle machine name has no configured label."""

    def __init__(self, bundle: str, available: list[str]) -> None:
        listed = ", ".join(sorted(available)) or "<none>"
        super().__init__(f"Unknown bundle '{bundle}'. Available: {listed}")
        self.bundle = bundle

    def __str__(self) -> str:
        return str(self.args[0])
