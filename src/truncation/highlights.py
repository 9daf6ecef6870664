# src/truncation/highlights.py — v1
"""Mark included paragraphs' elements with their proximity level.

Only the ``class`` attribute is touched; text and structure are not.
"""

from __future__ import annotations

import logging

from pagecontext.core.models import ContentRecord, TruncationResult

logger = logging.getLogger(__name__)

HIGHLIGHT_CLASS_PREFIX = "ai-context-level-"
HIGHLIGHT_CLASSES = tuple(f"{HIGHLIGHT_CLASS_PREFIX}{level}" for level in (1, 2, 3))


def apply_highlights(record: ContentRecord, result: TruncationResult) -> int:
    """Add ``ai-context-level-N`` to each included paragraph's element.

    Returns the number of elements marked; paragraphs whose element is
    gone are skipped.
    """
    marked = 0
    for included in result.included_paragraphs:
        if not 0 <= included.index < len(record.paragraphs):
            continue
        node = record.paragraphs[included.index].node
        if node is None:
            continue
        css_class = f"{HIGHLIGHT_CLASS_PREFIX}{included.highlight_level}"
        classes = list(node.get("class") or [])
        if css_class not in classes:
            node["class"] = [*classes, css_class]
        marked += 1

    logger.debug("Applied highlights to %d elements", marked)
    return marked


def clear_highlights(record: ContentRecord) -> int:
    """Remove every highlight class from the record's elements."""
    cleared = 0
    for paragraph in record.paragraphs:
        node = paragraph.node
        if node is None:
            continue
        classes = list(node.get("class") or [])
        kept = [c for c in classes if c not in HIGHLIGHT_CLASSES]
        if len(kept) == len(classes):
            continue
        if kept:
            node["class"] = kept
        else:
            del node["class"]
        cleared += 1

    logger.debug("Cleared highlights from %d elements", cleared)
    return cleared
