# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

import weakref
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


BlockKind = Literal[
    "paragraph",
    "heading-1",
    "heading-2",
    "heading-3",
    "heading-4",
    "heading-5",
    "heading-6",
    "list-item",
    "quote",
    "code",
]

HighlightLevel = Literal[1, 2, 3]


# === CONTENT MODELS ===


class Paragraph(BaseModel):
    """One block-level text unit with a stable document-order index."""

    model_config = ConfigDict(frozen=True)

    index: int
    text: str
    tag_kind: BlockKind = "paragraph"
    length: int
    # weakref.ref to the originating node; only used for highlighting.
    node_ref: Any = Field(default=None, exclude=True, repr=False)

    @property
    def node(self) -> Any:
        """Originating node, or None if it is gone or was never captured."""
        if self.node_ref is None:
            return None
        return self.node_ref()

    @classmethod
    def from_node(cls, index: int, text: str, tag_kind: BlockKind, node: Any) -> Paragraph:
        return cls(
            index=index,
            text=text,
            tag_kind=tag_kind,
            length=len(text),
            node_ref=weakref.ref(node) if node is not None else None,
        )


class ContentRecord(BaseModel):
    """Normalized result of one extraction. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    plain_text: str = ""
    rich_content: str = ""
    paragraphs: list[Paragraph] = Field(default_factory=list)
    is_fallback_extraction: bool = False
    is_pdf: bool = False
    excerpt: str = ""
    byline: str = ""
    text_direction: str = ""
    estimated_tokens: int = 0

    # Tree the paragraph node refs point into; kept alive with the record.
    _tree: Any = PrivateAttr(default=None)

    @property
    def length(self) -> int:
        return len(self.plain_text)

    @property
    def tree(self) -> Any:
        return self._tree

    def retain_tree(self, tree: Any) -> ContentRecord:
        """Attach the parsed tree backing this record's paragraphs."""
        self._tree = tree
        return self


class Article(BaseModel):
    """Main-content article produced by a content algorithm."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = ""
    content: str = ""
    text_content: str = ""
    excerpt: str = ""
    byline: str = ""
    direction: str = ""
    root: Any = Field(default=None, exclude=True, repr=False)


# === CACHE MODELS ===


class CacheEntry(BaseModel):
    """The single cached extraction, tied to the document it came from."""

    model_config = ConfigDict(frozen=True)

    record: ContentRecord
    source_identity: str
    created_at: datetime


# === LOCATE / TRUNCATE MODELS ===


class LocatorResult(BaseModel):
    """Where a selected string was found among extracted paragraphs."""

    found: bool = False
    paragraph_index: int = -1

    @classmethod
    def not_found(cls) -> LocatorResult:
        return cls(found=False, paragraph_index=-1)


class IncludedParagraph(BaseModel):
    """Paragraph kept by truncation, with its proximity class."""

    index: int
    text: str
    highlight_level: HighlightLevel


class TruncationResult(BaseModel):
    """Token-budgeted excerpt assembled around an anchor paragraph."""

    assembled_text: str = ""
    included_paragraphs: list[IncludedParagraph] = Field(default_factory=list)
    used_tokens: int = 0
    included_count: int = 0
    total_count: int = 0
    anchor_index: int = 0
    budget_exhausted: bool = False
