# src/extraction/strategies/boilerplate_fallback.py — v1
"""Fallback path: strip boilerplate from a copy and keep what remains."""

from __future__ import annotations

import logging

from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.record_builder import build_record
from pagecontext.extraction.strategies.base_strategy import BaseExtractionStrategy

logger = logging.getLogger(__name__)

BOILERPLATE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "nav",
    "footer",
    "header",
    "aside",
    ".sidebar",
    ".advertisement",
    ".ads",
    ".navigation",
    ".menu",
    ".cookie-banner",
)


class BoilerplateFallbackStrategy(BaseExtractionStrategy):
    """Always yields a record for a document that has a root."""

    def __init__(self, selectors: tuple[str, ...] = BOILERPLATE_SELECTORS) -> None:
        self._selectors = selectors

    @property
    def name(self) -> str:
        return "fallback"

    async def attempt(self, document: BaseDocument) -> ContentRecord | None:
        if document.root is None:
            return None

        logger.info("Using fallback extraction for %s", document.url)
        clone = document.clone()
        for selector in self._selectors:
            for element in clone.select(selector):
                if not element.decomposed:
                    element.decompose()

        return build_record(
            clone,
            clone.body or clone,
            title=document.title,
            is_fallback=True,
        )
