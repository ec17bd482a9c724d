"""Block description generation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Dict, Optional

from blocklabel.utils.naming import build_prefix, compose_label

from .errors import UnknownBundleError
from .unique import DEFAULT_MAX_ATTEMPTS, ExistsFn, generate_unique

if TYPE_CHECKING:
    from blocklabel.config import GeneratorConfig


class BlockDescriptionGenerator:
    """Build unique ``"PREFIX: Title"`` descriptions for block content.

    ``exists`` answers whether a description is already in use. ``bundles`` maps
    block content type machine names to their human labels, and ``enabled``
    switches generation on or off for :meth:`resolve`.
    """

    def __init__(
        self,
        exists: ExistsFn,
        *,
        bundles: Optional[Mapping[str, str]] = None,
        enabled: bool = True,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        separator: str = ": ",
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self._exists = exists
        self.bundles: Dict[str, str] = dict(bundles or {})
        self.enabled = enabled
        self.max_attempts = max_attempts
        self.separator = separator

    @classmethod
    def from_config(cls, config: "GeneratorConfig", exists: ExistsFn) -> "BlockDescriptionGenerator":
        return cls(
            exists,
            bundles=config.bundles,
            enabled=config.generate_custom_block_title,
            max_attempts=config.max_attempts,
            separator=config.separator,
        )

    def bundle_label(self, bundle: str) -> str:
        try:
            return self.bundles[bundle]
        except KeyError:
            raise UnknownBundleError(bundle, list(self.bundles)) from None

    def create_description(self, bundle_label: str, title: str) -> str:
        candidate = compose_label(build_prefix(bundle_label), title, separator=self.separator)
        description = generate_unique(candidate, self._exists, max_attempts=self.max_attempts)
        logging.info("Generated block description '%s'", description)
        return description

    def describe_bundle(self, bundle: str, title: str) -> str:
        return self.create_description(self.bundle_label(bundle), title)

    def resolve(self, bundle: str, title: Optional[str], *, current: Optional[str] = None) -> Optional[str]:
        """Return the description a block should be saved with.

        ``None`` means generation is disabled and the caller keeps its own input.
        An already filled-in description is left untouched.
        """
        if not self.enabled:
            return None
        if current:
            return current
        return self.describe_bundle(bundle, title or "")


__all__ = ["BlockDescriptionGenerator"]
