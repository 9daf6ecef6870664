# tests/unit/extraction/test_content_extractor.py — v1
"""Tests for extraction/content_extractor.py — layered strategy chain."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from pagecontext.config.settings import Settings
from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.document.html_document import HtmlDocument
from pagecontext.extraction.content_extractor import ContentExtractor, default_strategies
from pagecontext.extraction.errors import (
    ExtractionUnavailableError,
    PdfContentUnavailableError,
)
from pagecontext.extraction.strategies.base_strategy import BaseExtractionStrategy
from pagecontext.extraction.strategies.boilerplate_fallback import (
    BoilerplateFallbackStrategy,
)
from pagecontext.extraction.strategies.main_content import MainContentStrategy
from pagecontext.extraction.strategies.pdf_text_layer import PdfTextLayerStrategy


class RootlessDocument(BaseDocument):
    """Document with no content root at all."""

    @property
    def root(self):
        return None

    @property
    def title(self) -> str:
        return ""

    @property
    def url(self) -> str:
        return "about:blank"

    @property
    def content_type(self) -> str:
        return "text/html"

    def clone(self):
        return BeautifulSoup("", "html.parser")

    def text_length(self) -> int:
        return 0

    def count(self, tag: str) -> int:
        return 0


class RecordingStrategy(BaseExtractionStrategy):
    def __init__(self, name: str, result: ContentRecord | None) -> None:
        self._name = name
        self._result = result
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    async def attempt(self, document):
        self.calls += 1
        return self._result


class FailingStrategy(BaseExtractionStrategy):
    @property
    def name(self) -> str:
        return "failing"

    async def attempt(self, document):
        raise RuntimeError("viewer crashed")


class TestDefaultStrategies:
    def test_order(self, fast_settings):
        strategies = default_strategies(fast_settings)
        assert [type(s) for s in strategies] == [
            PdfTextLayerStrategy,
            MainContentStrategy,
            BoilerplateFallbackStrategy,
        ]
        assert [s.name for s in strategies] == ["pdf", "main_content", "fallback"]


class TestContentExtractor:
    @pytest.mark.asyncio
    async def test_first_record_wins(self, article_document):
        first = RecordingStrategy("first", ContentRecord(title="one"))
        second = RecordingStrategy("second", ContentRecord(title="two"))
        record = await ContentExtractor([first, second]).extract(article_document)
        assert record.title == "one"
        assert second.calls == 0

    @pytest.mark.asyncio
    async def test_declined_strategy_falls_through(self, article_document):
        declining = RecordingStrategy("declining", None)
        fallback = RecordingStrategy("fallback", ContentRecord(title="fallback"))
        record = await ContentExtractor([declining, fallback]).extract(article_document)
        assert record.title == "fallback"
        assert declining.calls == 1

    @pytest.mark.asyncio
    async def test_failing_strategy_falls_through(self, article_document):
        fallback = RecordingStrategy("fallback", ContentRecord(title="fallback"))
        record = await ContentExtractor([FailingStrategy(), fallback]).extract(article_document)
        assert record.title == "fallback"
        assert fallback.calls == 1

    @pytest.mark.asyncio
    async def test_only_failing_strategies_raise_unavailable(self, article_document):
        with pytest.raises(ExtractionUnavailableError):
            await ContentExtractor([FailingStrategy()]).extract(article_document)

    @pytest.mark.asyncio
    async def test_primary_path(self, article_document, fast_settings):
        record = await ContentExtractor(settings=fast_settings).extract(article_document)
        assert record.is_fallback_extraction is False
        assert record.is_pdf is False
        assert record.estimated_tokens > 0

    @pytest.mark.asyncio
    async def test_fallback_when_algorithm_disabled(self, article_document):
        settings = Settings(
            content_algorithm="none", content_wait_timeout=0.2, content_wait_interval=0.02
        )
        record = await ContentExtractor(settings=settings).extract(article_document)
        assert record.is_fallback_extraction is True
        assert len(record.paragraphs) == 7

    @pytest.mark.asyncio
    async def test_fallback_when_nothing_qualifies(self, short_document, fast_settings):
        record = await ContentExtractor(settings=fast_settings).extract(short_document)
        assert record.is_fallback_extraction is True
        assert [p.text for p in record.paragraphs] == ["Short note."]

    @pytest.mark.asyncio
    async def test_pdf_path(self, pdf_document, fast_settings):
        record = await ContentExtractor(settings=fast_settings).extract(pdf_document)
        assert record.is_pdf is True
        assert len(record.paragraphs) == 2

    @pytest.mark.asyncio
    async def test_pdf_without_text_layer_raises(self, pdf_without_text_document, fast_settings):
        with pytest.raises(PdfContentUnavailableError):
            await ContentExtractor(settings=fast_settings).extract(pdf_without_text_document)

    @pytest.mark.asyncio
    async def test_pdf_without_text_layer_uses_page_text(self, fast_settings):
        document = HtmlDocument.from_html(
            "<html><body><p>Rendered page text.</p></body></html>",
            url="https://files.example.com/paper.pdf",
        )
        record = await ContentExtractor(settings=fast_settings).extract(document)
        assert record.is_fallback_extraction is True
        assert record.paragraphs[0].text == "Rendered page text."

    @pytest.mark.asyncio
    async def test_all_declined_raises(self, fast_settings):
        with pytest.raises(ExtractionUnavailableError) as exc_info:
            await ContentExtractor(settings=fast_settings).extract(RootlessDocument())
        assert not isinstance(exc_info.value, PdfContentUnavailableError)

    @pytest.mark.asyncio
    async def test_empty_chain_raises(self, article_document):
        with pytest.raises(ExtractionUnavailableError):
            await ContentExtractor([]).extract(article_document)

    def test_pdf_error_is_extraction_error(self):
        assert issubclass(PdfContentUnavailableError, ExtractionUnavailableError)
