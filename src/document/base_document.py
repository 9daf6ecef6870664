# src/document/base_document.py — v1
"""Abstract document interface consumed by the extraction engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseDocument(ABC):
    """A parsed, possibly still-changing document.

    Extraction only ever reads the live tree; anything that needs to
    modify nodes works on a ``clone()``.
    """

    @property
    @abstractmethod
    def root(self) -> Any:
        """Root content node (the body), or None if the document has none."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Document title, empty string if absent."""

    @property
    @abstractmethod
    def url(self) -> str:
        """Location identity, used as the cache key."""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """MIME type or classification hint (e.g. 'application/pdf')."""

    @abstractmethod
    def clone(self) -> Any:
        """Deep structural copy of the whole tree, sharing no nodes."""

    @abstractmethod
    def text_length(self) -> int:
        """Length of the visible text under the root."""

    @abstractmethod
    def count(self, tag: str) -> int:
        """Number of elements named *tag* in the live tree."""
