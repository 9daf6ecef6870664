# src/extraction/content_waiter.py — v1
"""Bounded wait for dynamically loaded content to settle."""

from __future__ import annotations

import asyncio
import logging

from pagecontext.document.base_document import BaseDocument

logger = logging.getLogger(__name__)


async def wait_for_content(
    document: BaseDocument,
    timeout: float = 5.0,
    interval: float = 0.1,
    min_text_length: int = 500,
    min_paragraphs: int = 3,
) -> bool:
    """Poll *document* until it looks loaded or *timeout* elapses.

    Returns True as soon as the visible text is longer than
    ``min_text_length`` and at least ``min_paragraphs`` <p> elements exist,
    False once the ceiling is reached. Never blocks past the ceiling.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout

    while loop.time() < deadline:
        if (
            document.text_length() > min_text_length
            and document.count("p") >= min_paragraphs
        ):
            logger.debug("Content settled for %s", document.url)
            return True
        await asyncio.sleep(interval)

    logger.warning(
        "Timed out after %.1fs waiting for content on %s", timeout, document.url
    )
    return False
