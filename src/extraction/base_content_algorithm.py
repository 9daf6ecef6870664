# src/extraction/base_content_algorithm.py — v1
"""Abstract main-content algorithm interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from pagecontext.core.models import Article


class BaseContentAlgorithm(ABC):
    """Finds the main article in a parsed page."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier (e.g. 'readability')."""

    @abstractmethod
    def parse(self, soup: BeautifulSoup) -> Article | None:
        """Return the main article, or None if nothing qualifies.

        Implementations may modify *soup* freely; callers always pass a copy.
        """
