# src/api/models.py — v1
"""API-level models: ContextMetadata, ContextPayload."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pagecontext.core.models import IncludedParagraph


class ContextMetadata(BaseModel):
    """Describes where a context excerpt came from."""

    paragraphs: list[IncludedParagraph] = Field(default_factory=list)
    total_tokens: int = 0
    page_title: str = ""
    page_url: str = ""
    is_fallback: bool = False
    mode: str | None = None
    selection_found: bool = False


class ContextPayload(BaseModel):
    """Excerpt ready to accompany a selection sent to a language model."""

    content: str
    metadata: ContextMetadata
