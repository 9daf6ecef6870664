# src/extraction/content_extractor.py — v1
"""Layered content extraction: PDF text layer, main content, fallback.

Strategies run in order and the first record wins. A strategy returning
None, or raising, hands over to the next one; only when the whole chain is
exhausted does an error reach the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pagecontext.config.settings import Settings
from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.algorithm_factory import create_content_algorithm
from pagecontext.extraction.errors import (
    ExtractionUnavailableError,
    PdfContentUnavailableError,
)
from pagecontext.extraction.strategies.base_strategy import BaseExtractionStrategy
from pagecontext.extraction.strategies.boilerplate_fallback import (
    BoilerplateFallbackStrategy,
)
from pagecontext.extraction.strategies.main_content import MainContentStrategy
from pagecontext.extraction.strategies.pdf_text_layer import (
    PdfTextLayerStrategy,
    is_pdf_document,
)

logger = logging.getLogger(__name__)


def default_strategies(settings: Settings | None = None) -> list[BaseExtractionStrategy]:
    """Build the standard PDF → main content → fallback chain."""
    settings = settings or Settings()
    return [
        PdfTextLayerStrategy(),
        MainContentStrategy(create_content_algorithm(settings=settings), settings),
        BoilerplateFallbackStrategy(),
    ]


class ContentExtractor:
    """Runs extraction strategies in priority order."""

    def __init__(
        self,
        strategies: Sequence[BaseExtractionStrategy] | None = None,
        settings: Settings | None = None,
    ) -> None:
        if strategies is None:
            strategies = default_strategies(settings)
        self._strategies = list(strategies)

    @property
    def strategies(self) -> list[BaseExtractionStrategy]:
        return list(self._strategies)

    async def extract(self, document: BaseDocument) -> ContentRecord:
        """Extract the main content of *document*.

        Raises:
            PdfContentUnavailableError: PDF document without usable text.
            ExtractionUnavailableError: No strategy produced a record.
        """
        is_pdf = is_pdf_document(document)

        for strategy in self._strategies:
            try:
                record = await strategy.attempt(document)
            except Exception:
                logger.warning(
                    "Strategy %r failed on %s, trying next",
                    strategy.name, document.url, exc_info=True,
                )
                continue
            if record is None:
                logger.debug("Strategy %r declined %s", strategy.name, document.url)
                continue
            if is_pdf and not record.paragraphs:
                logger.debug("Strategy %r found no PDF text", strategy.name)
                continue

            logger.info(
                "Extracted %s via %r: %d paragraphs, ~%d tokens",
                document.url, strategy.name,
                len(record.paragraphs), record.estimated_tokens,
            )
            return record

        if is_pdf:
            raise PdfContentUnavailableError(
                f"No text layer found in PDF document {document.url!r}"
            )
        raise ExtractionUnavailableError(
            f"No extraction strategy produced content for {document.url!r}"
        )
