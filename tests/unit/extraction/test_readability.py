# tests/unit/extraction/test_readability.py — v1
"""Tests for extraction/readability.py — main-content scoring."""

from __future__ import annotations

from bs4 import BeautifulSoup

from pagecontext.extraction.readability import ReadabilityAlgorithm

ARTICLE = """<html dir="ltr"><head><title>Tidal Energy Primer</title>
<meta name="author" content="Dana Reyes">
<meta name="description" content="How tidal turbines work."></head>
<body>
<header class="site-header"><a href="/">Home</a></header>
<div id="main" class="content"><article>
<h1>Tidal Energy Primer</h1>
<p>Tidal energy converts the rise and fall of the sea into electricity, using turbines placed in narrow channels.</p>
<p>Unlike wind or solar, tides are predictable years in advance, which makes output easy to schedule, plan, and sell.</p>
<p>The largest installations sit in estuaries, straits, and fjords, where the tidal range is high enough to pay off.</p>
</article></div>
<div class="sidebar"><p>Sponsored: buy a kayak, paddle, and life vest today from our friends.</p></div>
<footer class="site-footer"><p>Copyright 2024 Ocean Weekly, all rights reserved, everywhere.</p></footer>
</body></html>"""


def _parse(html: str, **kwargs):
    return ReadabilityAlgorithm(**kwargs).parse(BeautifulSoup(html, "html.parser"))


class TestReadabilityAlgorithm:
    def test_name(self):
        assert ReadabilityAlgorithm().name == "readability"

    def test_finds_article_body(self):
        article = _parse(ARTICLE)
        assert article is not None
        assert "predictable years in advance" in article.text_content
        assert "estuaries" in article.text_content

    def test_drops_boilerplate(self):
        article = _parse(ARTICLE)
        assert "kayak" not in article.text_content
        assert "Copyright" not in article.text_content
        assert "Home" not in article.text_content

    def test_metadata(self):
        article = _parse(ARTICLE)
        assert article.title == "Tidal Energy Primer"
        assert article.byline == "Dana Reyes"
        assert article.excerpt == "How tidal turbines work."
        assert article.direction == "ltr"

    def test_root_matches_content(self):
        article = _parse(ARTICLE)
        assert article.root is not None
        assert article.content == str(article.root)
        assert len(article.root.find_all("p")) == 3

    def test_og_title_preferred(self):
        html = ARTICLE.replace(
            "<title>", '<meta property="og:title" content="Open Graph Title"><title>'
        )
        assert _parse(html).title == "Open Graph Title"

    def test_excerpt_defaults_to_first_paragraph(self):
        html = ARTICLE.replace('<meta name="description" content="How tidal turbines work.">', "")
        article = _parse(html)
        assert article.excerpt.startswith("Tidal energy converts")

    def test_too_little_text_returns_none(self):
        html = "<html><body><div><p>Just a short line of text here.</p></div></body></html>"
        assert _parse(html) is None

    def test_min_text_length_is_configurable(self):
        html = "<html><body><div><p>Just a short line of text here.</p></div></body></html>"
        article = _parse(html, min_text_length=10)
        assert article is not None
        assert article.text_content == "Just a short line of text here."

    def test_no_scorable_content_returns_none(self):
        assert _parse("<html><body><span>nothing</span></body></html>") is None

    def test_scripts_never_in_output(self):
        html = ARTICLE.replace("<article>", "<article><script>var leaked = 1;</script>")
        assert "leaked" not in _parse(html).content
