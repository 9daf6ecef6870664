# src/truncation/budgeted_truncator.py — v1
"""Distance-prioritized truncation of paragraphs under a token budget.

Paragraphs are pulled in three tiers around an anchor paragraph:

    tier 1  anchor ± 3
    tier 2  anchor ± 5
    tier 3  the whole document

Within a tier candidates are taken in ascending index order. The first
candidate that would overflow the budget ends the truncation; a tier that
merely runs out of candidates hands over to the next one. The excerpt is
always emitted in document order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pagecontext.core.models import (
    HighlightLevel,
    IncludedParagraph,
    LocatorResult,
    Paragraph,
    TruncationResult,
)
from pagecontext.llm.token_budget import estimate_tokens

logger = logging.getLogger(__name__)

# Tier radii around the anchor; None means the whole document.
TIER_RADII: tuple[int | None, ...] = (3, 5, None)
PARAGRAPH_SEPARATOR = "\n\n"


def anchor_index(paragraphs: Sequence[Paragraph], locator: LocatorResult | None) -> int:
    """Anchor on the located paragraph, else on the middle of the document."""
    if locator is not None and locator.found and 0 <= locator.paragraph_index < len(paragraphs):
        return locator.paragraph_index
    return len(paragraphs) // 2


def highlight_level(index: int, anchor: int) -> HighlightLevel:
    """Proximity class of a paragraph: 1 within ±3, 2 within ±5, else 3."""
    distance = abs(index - anchor)
    if distance <= TIER_RADII[0]:
        return 1
    if distance <= TIER_RADII[1]:
        return 2
    return 3


def truncate(
    paragraphs: Sequence[Paragraph],
    locator: LocatorResult | None,
    max_tokens: int,
) -> TruncationResult:
    """Select paragraphs around the anchor without exceeding *max_tokens*."""
    total = len(paragraphs)
    anchor = anchor_index(paragraphs, locator)
    if total == 0:
        return TruncationResult(anchor_index=anchor)

    included: set[int] = set()
    used_tokens = 0
    exhausted = False

    for radius in TIER_RADII:
        if radius is None:
            start, end = 0, total - 1
        else:
            start, end = max(0, anchor - radius), min(total - 1, anchor + radius)

        for i in range(start, end + 1):
            if i in included:
                continue
            cost = estimate_tokens(paragraphs[i].text)
            if used_tokens + cost > max_tokens:
                exhausted = True
                break
            included.add(i)
            used_tokens += cost

        if exhausted or len(included) == total:
            break

    ordered = sorted(included)
    result = TruncationResult(
        assembled_text=PARAGRAPH_SEPARATOR.join(paragraphs[i].text for i in ordered),
        included_paragraphs=[
            IncludedParagraph(
                index=i,
                text=paragraphs[i].text,
                highlight_level=highlight_level(i, anchor),
            )
            for i in ordered
        ],
        used_tokens=used_tokens,
        included_count=len(ordered),
        total_count=total,
        anchor_index=anchor,
        budget_exhausted=exhausted,
    )
    logger.info(
        "Truncated to %d/%d paragraphs, %d/%d tokens (anchor %d)",
        result.included_count, total, used_tokens, max_tokens, anchor,
    )
    return result
