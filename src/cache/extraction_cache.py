# src/cache/extraction_cache.py — v1
"""Single-slot extraction cache with TTL and in-flight deduplication.

The cache holds at most one CacheEntry. States:

    EMPTY      -- no entry, nothing loading
    LOADING    -- an extraction is in flight (a previous entry may remain)
    POPULATED  -- a stored entry, nothing loading

Concurrent requests for the same document identity share one in-flight
extraction. A failed extraction leaves the stored entry untouched so the
next request starts over.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from enum import Enum

from pagecontext.core.models import CacheEntry, ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.content_extractor import ContentExtractor

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


class CacheState(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    POPULATED = "populated"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExtractionCache:
    """Caches the latest extraction for one document identity."""

    def __init__(
        self,
        extractor: ContentExtractor,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._extractor = extractor
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._state = CacheState.EMPTY
        self._entry: CacheEntry | None = None
        self._inflight: dict[str, asyncio.Task[ContentRecord]] = {}

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def is_valid(self, entry: CacheEntry, identity: str | None = None) -> bool:
        """True if *entry* is within its TTL and matches *identity* (if given)."""
        if identity is not None and entry.source_identity != identity:
            return False
        return self._clock() - entry.created_at <= self._ttl

    def current_record(self, identity: str | None = None) -> ContentRecord | None:
        """Return the cached record if valid for *identity*.

        An expired entry is evicted; an entry for another identity is only
        ignored, and is replaced once a new extraction succeeds.
        """
        entry = self._entry
        if entry is None:
            return None
        if self.is_valid(entry, identity):
            return entry.record
        if identity is not None and entry.source_identity != identity:
            return None

        logger.debug("Cache entry for %s expired, evicting", entry.source_identity)
        self._entry = None
        self._settle()
        return None

    async def get_or_extract(self, document: BaseDocument) -> ContentRecord:
        """Return the cached record for *document*, extracting it if needed.

        Raises whatever the extractor raises; the cache is left as it was.
        """
        identity = document.url
        record = self.current_record(identity)
        if record is not None:
            logger.debug("Cache hit for %s", identity)
            return record

        task = self._inflight.get(identity)
        if task is None:
            logger.debug("Cache miss for %s, starting extraction", identity)
            task = asyncio.ensure_future(self._load(document, identity))
            self._inflight[identity] = task
            self._transition(CacheState.LOADING)
        else:
            logger.debug("Extraction already in flight for %s, waiting", identity)

        # Waiters may be cancelled; the shared extraction keeps running.
        return await asyncio.shield(task)

    def clear(self) -> None:
        """Evict the cached entry regardless of TTL."""
        logger.info("Clearing extraction cache")
        self._entry = None
        self._settle()

    async def _load(self, document: BaseDocument, identity: str) -> ContentRecord:
        try:
            record = await self._extractor.extract(document)
            self._entry = CacheEntry(
                record=record,
                source_identity=identity,
                created_at=self._clock(),
            )
            return record
        except Exception:
            logger.warning("Extraction failed for %s, cache unchanged", identity)
            raise
        finally:
            self._inflight.pop(identity, None)
            self._settle()

    def _settle(self) -> None:
        if self._inflight:
            self._transition(CacheState.LOADING)
        elif self._entry is not None:
            self._transition(CacheState.POPULATED)
        else:
            self._transition(CacheState.EMPTY)

    def _transition(self, state: CacheState) -> None:
        if state is not self._state:
            logger.debug("Cache state %s -> %s", self._state.value, state.value)
            self._state = state
