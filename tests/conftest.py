# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides sample pages, parsed documents, paragraph builders and fast
settings. No network, no browser — documents are parsed from strings.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from pagecontext.config.settings import Settings
from pagecontext.core.models import ContentRecord, Paragraph
from pagecontext.document.html_document import HtmlDocument

ARTICLE_URL = "https://news.example.com/energy/tidal-primer"

ARTICLE_HTML = """<html>
<head>
  <title>Tidal Energy Primer</title>
  <meta name="author" content="Dana Reyes">
  <meta name="description" content="How tidal turbines work.">
  <script>window.analytics = {};</script>
</head>
<body>
<header class="site-header"><nav class="menu"><a href="/">Home</a> <a href="/about">About</a></nav></header>
<div id="main" class="content">
<article>
<h1>Tidal Energy Primer</h1>
<p>Tidal energy converts the rise and fall of the sea into electricity, using turbines placed in narrow channels where water moves fastest.</p>
<p>Unlike wind or solar, tides are predictable years in advance, which makes tidal output easy to schedule, plan, and sell to grid operators.</p>
<p>The largest installations sit in estuaries, straits, and fjords, where the tidal range or current speed is high enough to justify construction.</p>
<p>Barrages trap water behind a dam at high tide, then release it through turbines, much like a conventional hydroelectric plant would.</p>
<p>Stream turbines, by contrast, sit directly in the current and look like underwater wind turbines, with two or three slowly turning blades.</p>
<blockquote>Predictability is the main selling point of tidal power.</blockquote>
</article>
</div>
<div class="sidebar"><ul><li><a href="/a">Related story one</a></li><li><a href="/b">Related story two</a></li></ul></div>
<footer class="site-footer"><p>Copyright 2024 Ocean Weekly. All rights reserved.</p></footer>
</body>
</html>"""

SHORT_HTML = "<html><head><title>Note</title></head><body><p>Short note.</p></body></html>"

PDF_VIEWER_HTML = """<html><head><title>annual-report.pdf</title></head>
<body class="pdf-viewer">
<div id="viewer"><div class="page"><div class="textLayer">
<p>Revenue grew twelve percent over the previous fiscal year.</p>
<p>Operating costs were flat despite higher energy prices.</p>
</div></div></div>
</body></html>"""

PDF_WITHOUT_TEXT_HTML = """<html><head><title>scan.pdf</title></head>
<body class="pdf-viewer"><embed src="scan.pdf" type="application/pdf"></body></html>"""


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def make_paragraphs(texts: list[str]) -> list[Paragraph]:
    """Paragraphs without node references, indexed in order."""
    return [
        Paragraph(index=i, text=text, tag_kind="paragraph", length=len(text))
        for i, text in enumerate(texts)
    ]


# === FIXTURES: Settings ===


@pytest.fixture(autouse=True)
def _reset_pagecontext_logger():
    """Drop handlers and level installed by setup_logging during a test."""
    yield
    root = logging.getLogger("pagecontext")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def fast_settings() -> Settings:
    """Settings with a short content wait so tests never idle for 5s."""
    return Settings(
        content_wait_timeout=0.2,
        content_wait_interval=0.02,
        log_format="text",
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# === FIXTURES: Documents ===


@pytest.fixture
def article_document() -> HtmlDocument:
    return HtmlDocument.from_html(ARTICLE_HTML, url=ARTICLE_URL)


@pytest.fixture
def short_document() -> HtmlDocument:
    return HtmlDocument.from_html(SHORT_HTML, url="https://example.com/note")


@pytest.fixture
def pdf_document() -> HtmlDocument:
    return HtmlDocument.from_html(
        PDF_VIEWER_HTML, url="https://files.example.com/annual-report.pdf"
    )


@pytest.fixture
def pdf_without_text_document() -> HtmlDocument:
    return HtmlDocument.from_html(
        PDF_WITHOUT_TEXT_HTML,
        url="https://files.example.com/scan.pdf",
        content_type="application/pdf",
    )


# === FIXTURES: Records ===


@pytest.fixture
def seven_paragraphs() -> list[Paragraph]:
    """Paragraphs A-G, each costing 2 estimated tokens."""
    return make_paragraphs(["A", "B", "C", "D", "E", "F", "G"])


@pytest.fixture
def sample_record() -> ContentRecord:
    texts = [
        "Glaciers store about seventy percent of the world's fresh water.",
        "As they retreat, meltwater raises sea levels and reshapes valleys.",
        "Some glaciers surge forward suddenly after decades of stability.",
    ]
    return ContentRecord(
        title="Glaciers",
        plain_text="\n".join(texts),
        paragraphs=make_paragraphs(texts),
    )


@pytest.fixture
def paragraphs_from():
    """Factory fixture: build indexed paragraphs from a list of texts."""
    return make_paragraphs


@pytest.fixture
def article_file(tmp_path):
    """The sample article written to disk, for CLI tests."""
    path = tmp_path / "tidal.html"
    path.write_text(ARTICLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def article_url() -> str:
    return ARTICLE_URL
