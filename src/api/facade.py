# src/api/facade.py — v1
"""Public API facade — extraction, selection lookup and budgeted excerpts.

Usage:
    from pagecontext.api.facade import ContextEngine
    engine = ContextEngine()
    payload = await engine.build_context(document, "selected words", mode="standard")
"""

from __future__ import annotations

import logging
import uuid

from pagecontext.api.models import ContextMetadata, ContextPayload
from pagecontext.cache.extraction_cache import ExtractionCache
from pagecontext.config.settings import Settings
from pagecontext.core.models import ContentRecord, LocatorResult, TruncationResult
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.content_extractor import ContentExtractor
from pagecontext.extraction.errors import ExtractionUnavailableError
from pagecontext.llm.token_budget import resolve_context_budget
from pagecontext.locate.selection_locator import locate
from pagecontext.logging.context import set_request_context, set_stage
from pagecontext.truncation.budgeted_truncator import truncate

logger = logging.getLogger(__name__)


class ContextEngine:
    """Extracts, caches and trims page content around a selection."""

    def __init__(
        self,
        settings: Settings | None = None,
        extractor: ContentExtractor | None = None,
        cache: ExtractionCache | None = None,
    ) -> None:
        self._settings = settings or Settings()
        if cache is None:
            cache = ExtractionCache(
                extractor or ContentExtractor(settings=self._settings),
                ttl_seconds=self._settings.cache_ttl_seconds,
            )
        self._cache = cache
        self._last_identity: str | None = None

    @property
    def cache(self) -> ExtractionCache:
        return self._cache

    async def extract(self, document: BaseDocument) -> ContentRecord:
        """Extract *document*, served from cache while the entry is valid.

        Raises:
            ExtractionUnavailableError: No strategy produced content.
        """
        self._last_identity = document.url
        return await self._cache.get_or_extract(document)

    def locate_selection(self, selected_text: str) -> LocatorResult:
        """Locate *selected_text* in the most recently extracted document."""
        record = self._cache.current_record(self._last_identity)
        if record is None:
            logger.debug("No extracted content to search")
            return LocatorResult.not_found()
        return locate(record.paragraphs, selected_text)

    def truncate(
        self,
        record: ContentRecord,
        locator_result: LocatorResult | None,
        max_tokens: int,
    ) -> TruncationResult:
        """Budgeted excerpt of *record* around the located paragraph."""
        return truncate(record.paragraphs, locator_result, max_tokens)

    def has_sufficient_content(self, record: ContentRecord | None) -> bool:
        """Whether *record* is substantial enough to be worth sending."""
        if record is None:
            return False
        return (
            record.length > self._settings.sufficient_min_length
            and len(record.paragraphs) >= self._settings.sufficient_min_paragraphs
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    async def build_context(
        self,
        document: BaseDocument,
        selected_text: str,
        mode: str | None = None,
        max_tokens: int | None = None,
    ) -> ContextPayload | None:
        """Extract, locate and truncate in one call.

        Returns None when the page yields no usable content, in which case
        the caller should proceed without context.
        """
        set_request_context(document.url, uuid.uuid4().hex[:8])
        mode = mode or self._settings.context_mode
        budget = max_tokens if max_tokens is not None else resolve_context_budget(mode)

        try:
            set_stage("extract")
            record = await self.extract(document)
        except ExtractionUnavailableError as exc:
            logger.warning("Context extraction failed, continuing without context: %s", exc)
            return None
        finally:
            set_stage(None)

        set_stage("locate")
        position = self.locate_selection(selected_text)

        if not self.has_sufficient_content(record):
            logger.info("Insufficient content, using no-context mode")
            set_stage(None)
            return None

        set_stage("truncate")
        result = self.truncate(record, position, budget)
        set_stage(None)

        return ContextPayload(
            content=result.assembled_text,
            metadata=ContextMetadata(
                paragraphs=result.included_paragraphs,
                total_tokens=result.used_tokens,
                page_title=record.title,
                page_url=document.url,
                is_fallback=record.is_fallback_extraction,
                mode=mode if max_tokens is None else None,
                selection_found=position.found,
            ),
        )
