# src/extraction/algorithm_factory.py — v1
"""Factory: instantiate the main-content algorithm from its name."""

from __future__ import annotations

from pagecontext.config.settings import Settings
from pagecontext.extraction.base_content_algorithm import BaseContentAlgorithm
from pagecontext.extraction.readability import ReadabilityAlgorithm


class UnsupportedAlgorithmError(ValueError):
    """Raised when no content algorithm is registered under a name."""


def create_content_algorithm(
    name: str | None = None,
    settings: Settings | None = None,
) -> BaseContentAlgorithm | None:
    """Create the configured content algorithm.

    Args:
        name: Algorithm name; defaults to ``settings.content_algorithm``.
        settings: Application settings. Defaults apply if None.

    Returns:
        Algorithm instance, or None when the algorithm is disabled ("none").

    Raises:
        UnsupportedAlgorithmError: If the name is unknown.
    """
    if name is None:
        name = "readability" if settings is None else settings.content_algorithm

    if name == "readability":
        min_text_length = 140 if settings is None else settings.readability_min_text_length
        return ReadabilityAlgorithm(min_text_length=min_text_length)

    if name == "none":
        return None

    raise UnsupportedAlgorithmError(
        f"No content algorithm {name!r}. Supported: none, readability"
    )
