# src/extraction/record_builder.py — v1
"""Assemble a ContentRecord from a segmented content tree."""

from __future__ import annotations

from typing import Any

from pagecontext.chunking.segmenter import segment
from pagecontext.core.models import ContentRecord
from pagecontext.llm.token_budget import estimate_tokens


def normalize_text(text: str) -> str:
    """Collapse whitespace inside lines and drop blank lines."""
    lines = (" ".join(line.split()) for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def build_record(
    tree: Any,
    root: Any,
    title: str,
    *,
    is_fallback: bool = False,
    is_pdf: bool = False,
    plain_text: str | None = None,
    excerpt: str = "",
    byline: str = "",
    direction: str = "",
) -> ContentRecord:
    """Segment *root* and wrap the result in a ContentRecord.

    Args:
        tree: Parsed tree that owns *root*; retained by the record so the
            paragraphs' node references stay valid.
        root: Content node to segment (None yields an empty record).
        title: Record title.
        plain_text: Precomputed text; derived from *root* when omitted.
    """
    paragraphs = segment(root)
    if plain_text is None:
        plain_text = normalize_text(root.get_text()) if root is not None else ""
    rich_content = root.decode_contents() if root is not None else ""

    record = ContentRecord(
        title=title,
        plain_text=plain_text,
        rich_content=rich_content,
        paragraphs=paragraphs,
        is_fallback_extraction=is_fallback,
        is_pdf=is_pdf,
        excerpt=excerpt,
        byline=byline,
        text_direction=direction,
        estimated_tokens=estimate_tokens(plain_text),
    )
    return record.retain_tree(tree)
