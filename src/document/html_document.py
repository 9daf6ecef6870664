# src/document/html_document.py — v1
"""HTML document backed by BeautifulSoup."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from pagecontext.document.base_document import BaseDocument

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "html.parser"


class HtmlDocument(BaseDocument):
    """Document over a BeautifulSoup tree.

    The tree may be mutated by its owner while an extraction is waiting
    for content to settle; ``text_length`` and ``count`` always read the
    current state.
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        url: str = "",
        content_type: str = "text/html",
    ) -> None:
        self._soup = soup
        self._url = url
        self._content_type = content_type

    @classmethod
    def from_html(
        cls,
        html: str | bytes,
        url: str = "",
        content_type: str = "text/html",
        parser: str = DEFAULT_PARSER,
    ) -> HtmlDocument:
        return cls(BeautifulSoup(html, parser), url=url, content_type=content_type)

    @classmethod
    def from_file(
        cls,
        path: Path,
        url: str | None = None,
        content_type: str = "text/html",
    ) -> HtmlDocument:
        """Load an HTML file; the URL defaults to the file URI."""
        path = Path(path)
        html = path.read_bytes()
        logger.debug("Loaded %s (%d bytes)", path, len(html))
        return cls.from_html(
            html,
            url=url if url is not None else path.resolve().as_uri(),
            content_type=content_type,
        )

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    @property
    def root(self) -> Any:
        return self._soup.body or self._soup

    @property
    def title(self) -> str:
        if self._soup.title and self._soup.title.string:
            return self._soup.title.string.strip()
        return ""

    @property
    def url(self) -> str:
        return self._url

    @property
    def content_type(self) -> str:
        return self._content_type

    def clone(self) -> BeautifulSoup:
        return copy.copy(self._soup)

    def text_length(self) -> int:
        root = self.root
        return len(root.get_text()) if root is not None else 0

    def count(self, tag: str) -> int:
        return len(self._soup.find_all(tag))
