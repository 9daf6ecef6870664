# src/extraction/strategies/main_content.py — v1
"""Primary path: run a main-content algorithm against a copy of the page."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from pagecontext.config.settings import Settings
from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.base_content_algorithm import BaseContentAlgorithm
from pagecontext.extraction.content_waiter import wait_for_content
from pagecontext.extraction.record_builder import build_record, normalize_text
from pagecontext.extraction.strategies.base_strategy import BaseExtractionStrategy
from pagecontext.extraction.strategies.pdf_text_layer import is_pdf_document

logger = logging.getLogger(__name__)


class MainContentStrategy(BaseExtractionStrategy):
    """Waits for the page to settle, then extracts its main article."""

    def __init__(
        self,
        algorithm: BaseContentAlgorithm | None,
        settings: Settings | None = None,
    ) -> None:
        self._algorithm = algorithm
        self._settings = settings or Settings()

    @property
    def name(self) -> str:
        return "main_content"

    async def attempt(self, document: BaseDocument) -> ContentRecord | None:
        if is_pdf_document(document):
            return None
        if self._algorithm is None:
            logger.info("No content algorithm configured, skipping main-content path")
            return None

        s = self._settings
        await wait_for_content(
            document,
            timeout=s.content_wait_timeout,
            interval=s.content_wait_interval,
            min_text_length=s.content_min_text_length,
            min_paragraphs=s.content_min_paragraphs,
        )

        clone = document.clone()
        try:
            article = self._algorithm.parse(clone)
        except Exception:
            logger.warning(
                "Content algorithm %r failed on %s",
                self._algorithm.name, document.url, exc_info=True,
            )
            return None

        if article is None or not article.content.strip():
            logger.info("Content algorithm %r found no article", self._algorithm.name)
            return None

        # The article root may be detached from the clone, so it is what
        # the record has to keep alive.
        root = article.root
        if root is None:
            root = BeautifulSoup(article.content, "html.parser")

        record = build_record(
            root,
            root,
            title=article.title or document.title,
            plain_text=normalize_text(article.text_content) or None,
            excerpt=article.excerpt,
            byline=article.byline,
            direction=article.direction,
        )
        logger.info(
            "Main-content extraction succeeded: %d paragraphs", len(record.paragraphs)
        )
        return record
