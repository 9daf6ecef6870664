# src/locate/selection_locator.py — v1
"""Find which extracted paragraph contains a selected string."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pagecontext.core.models import LocatorResult, Paragraph

logger = logging.getLogger(__name__)


def locate(paragraphs: Sequence[Paragraph] | None, selected_text: str | None) -> LocatorResult:
    """Return the first paragraph, in document order, containing *selected_text*.

    Matching is a case-insensitive substring test on trimmed text. A blank
    selection or missing paragraphs is never found.
    """
    needle = (selected_text or "").strip().lower()
    if not paragraphs or not needle:
        return LocatorResult.not_found()

    for paragraph in paragraphs:
        if needle in paragraph.text.strip().lower():
            logger.debug("Selection found in paragraph %d", paragraph.index)
            return LocatorResult(found=True, paragraph_index=paragraph.index)

    logger.info("Selection not found in %d extracted paragraphs", len(paragraphs))
    return LocatorResult.not_found()
