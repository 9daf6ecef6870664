# src/extraction/readability.py — v1
"""Readability-style main-content detection over BeautifulSoup.

Scores paragraph-like elements by text length and comma count, pushes the
score up to parent and grandparent containers, penalizes link-heavy and
boilerplate-looking containers, then keeps the best container together
with its qualifying siblings.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from pagecontext.core.models import Article
from pagecontext.extraction.base_content_algorithm import BaseContentAlgorithm

logger = logging.getLogger(__name__)

_UNLIKELY_CANDIDATES = re.compile(
    r"-ad-|ai2html|banner|breadcrumbs|combx|comment|community|cover-wrap|disqus"
    r"|extra|footer|gdpr|header|legends|menu|related|remark|replies|rss|shoutbox"
    r"|sidebar|skyscraper|social|sponsor|supplemental|ad-break|agegate|pagination"
    r"|pager|popup|yom-remote",
    re.IGNORECASE,
)
_MAYBE_CANDIDATE = re.compile(r"and|article|body|column|content|main|shadow", re.IGNORECASE)
_POSITIVE = re.compile(
    r"article|body|content|entry|hentry|h-entry|main|page|pagination|post|text|blog|story",
    re.IGNORECASE,
)
_NEGATIVE = re.compile(
    r"-ad-|hidden|^hid$| hid$| hid |^hid |banner|combx|comment|com-|contact|foot"
    r"|footer|footnote|gdpr|masthead|media|meta|outbrain|promo|related|scroll|share"
    r"|shoutbox|sidebar|skyscraper|sponsor|shopping|tags|tool|widget",
    re.IGNORECASE,
)
_BYLINE = re.compile(r"byline|author|dateline|writtenby|p-author", re.IGNORECASE)
_SENTENCE_END = re.compile(r"\.( |$)")

_NOISE_TAGS = ["script", "style", "noscript", "template", "iframe", "svg"]
_TAGS_TO_SCORE = ["section", "h2", "h3", "h4", "h5", "h6", "p", "td", "pre"]
# Containers that must never be dropped as unlikely candidates
_PROTECTED_TAGS = {"html", "body", "article", "main", "a"}

_TAG_BASE_SCORES = {
    "div": 5,
    "pre": 3,
    "td": 3,
    "blockquote": 3,
    "address": -3,
    "ol": -3,
    "ul": -3,
    "dl": -3,
    "dd": -3,
    "dt": -3,
    "li": -3,
    "form": -3,
    "h1": -5,
    "h2": -5,
    "h3": -5,
    "h4": -5,
    "h5": -5,
    "h6": -5,
    "th": -5,
}

_MIN_SCORED_TEXT = 25
_CLASS_WEIGHT = 25


def _normalize(text: str) -> str:
    return " ".join(text.split())


class ReadabilityAlgorithm(BaseContentAlgorithm):
    """Score-based main-content finder."""

    def __init__(self, min_text_length: int = 140) -> None:
        self._min_text_length = min_text_length

    @property
    def name(self) -> str:
        return "readability"

    def parse(self, soup: BeautifulSoup) -> Article | None:
        """Extract the main article from *soup* (modified in place)."""
        title = self._get_title(soup)
        byline = self._get_byline(soup)
        description = self._get_meta(soup, "description", "og:description")
        direction = self._get_direction(soup)

        for tag in soup.find_all(_NOISE_TAGS):
            tag.decompose()

        body = soup.body or soup
        self._remove_unlikely_candidates(body)

        candidates = self._score_candidates(body)
        if not candidates:
            logger.debug("No scorable content found")
            return None

        top, top_score = max(candidates.values(), key=lambda item: item[1])
        root = self._assemble(soup, top, top_score, candidates)

        text = _normalize(root.get_text())
        if len(text) < self._min_text_length:
            logger.debug(
                "Best candidate too short (%d < %d chars)", len(text), self._min_text_length
            )
            return None

        first_paragraph = root.find("p")
        excerpt = description or (
            _normalize(first_paragraph.get_text()) if first_paragraph else ""
        )

        return Article(
            title=title,
            content=str(root),
            text_content=text,
            excerpt=excerpt,
            byline=byline,
            direction=direction,
            root=root,
        )

    # --- Scoring ---

    def _remove_unlikely_candidates(self, body: Tag) -> None:
        doomed: list[Tag] = []
        for element in body.find_all(True):
            if element.name in _PROTECTED_TAGS:
                continue
            match_string = self._match_string(element)
            if not match_string:
                continue
            if _UNLIKELY_CANDIDATES.search(match_string) and not _MAYBE_CANDIDATE.search(
                match_string
            ):
                if element.find_parent(["table", "code"]) is None:
                    doomed.append(element)
        for element in doomed:
            if not element.decomposed:
                element.decompose()

    def _score_candidates(self, body: Tag) -> dict[int, tuple[Tag, float]]:
        candidates: dict[int, tuple[Tag, float]] = {}

        for element in body.find_all(_TAGS_TO_SCORE):
            text = _normalize(element.get_text())
            if len(text) < _MIN_SCORED_TEXT:
                continue

            score = 1.0 + text.count(",") + text.count("，") + min(len(text) // 100, 3)

            for level, ancestor in enumerate(self._ancestors(element, depth=2)):
                key = id(ancestor)
                if key not in candidates:
                    candidates[key] = (ancestor, self._initial_score(ancestor))
                divider = 1 if level == 0 else 2
                tag, current = candidates[key]
                candidates[key] = (tag, current + score / divider)

        # Scale by how much of each candidate is not link text.
        return {
            key: (tag, score * (1 - self._link_density(tag)))
            for key, (tag, score) in candidates.items()
        }

    @staticmethod
    def _ancestors(element: Tag, depth: int) -> list[Tag]:
        ancestors: list[Tag] = []
        parent = element.parent
        while parent is not None and len(ancestors) < depth:
            if isinstance(parent, BeautifulSoup):
                break
            ancestors.append(parent)
            parent = parent.parent
        return ancestors

    def _initial_score(self, element: Tag) -> float:
        return _TAG_BASE_SCORES.get(element.name, 0) + self._class_weight(element)

    @staticmethod
    def _match_string(element: Tag) -> str:
        classes = element.get("class") or []
        if isinstance(classes, str):
            classes = [classes]
        return " ".join([*classes, element.get("id") or ""]).strip()

    def _class_weight(self, element: Tag) -> int:
        weight = 0
        classes = element.get("class") or []
        if isinstance(classes, str):
            classes = [classes]
        for value in (" ".join(classes), element.get("id") or ""):
            if not value:
                continue
            if _NEGATIVE.search(value):
                weight -= _CLASS_WEIGHT
            if _POSITIVE.search(value):
                weight += _CLASS_WEIGHT
        return weight

    @staticmethod
    def _link_density(element: Tag) -> float:
        text_length = len(_normalize(element.get_text()))
        if text_length == 0:
            return 0.0
        link_length = sum(len(_normalize(a.get_text())) for a in element.find_all("a"))
        return link_length / text_length

    # --- Assembly ---

    def _assemble(
        self,
        soup: BeautifulSoup,
        top: Tag,
        top_score: float,
        candidates: dict[int, tuple[Tag, float]],
    ) -> Tag:
        parent = top.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return top

        threshold = max(10.0, top_score * 0.2)
        siblings = [child for child in parent.children if isinstance(child, Tag)]

        wrapper = soup.new_tag("div")
        wrapper["id"] = "readability-page-1"
        for sibling in siblings:
            if sibling is top or self._keep_sibling(sibling, threshold, candidates):
                wrapper.append(sibling.extract())
        return wrapper

    def _keep_sibling(
        self,
        sibling: Tag,
        threshold: float,
        candidates: dict[int, tuple[Tag, float]],
    ) -> bool:
        scored = candidates.get(id(sibling))
        if scored is not None and scored[1] >= threshold:
            return True
        if sibling.name != "p":
            return False

        text = _normalize(sibling.get_text())
        density = self._link_density(sibling)
        if len(text) > 80 and density < 0.25:
            return True
        return 0 < len(text) <= 80 and density == 0 and bool(_SENTENCE_END.search(text))

    # --- Metadata ---

    @staticmethod
    def _get_meta(soup: BeautifulSoup, *names: str) -> str:
        for name in names:
            meta = soup.find("meta", attrs={"name": name}) or soup.find(
                "meta", attrs={"property": name}
            )
            if meta is not None and meta.get("content"):
                return _normalize(meta["content"])
        return ""

    def _get_title(self, soup: BeautifulSoup) -> str:
        title = self._get_meta(soup, "og:title", "twitter:title")
        if title:
            return title
        if soup.title and soup.title.string:
            return _normalize(soup.title.string)
        heading = soup.find("h1")
        return _normalize(heading.get_text()) if heading else ""

    def _get_byline(self, soup: BeautifulSoup) -> str:
        author = self._get_meta(soup, "author")
        if author:
            return author
        for element in soup.find_all(True):
            rel = " ".join(element.get("rel") or [])
            if rel == "author" or _BYLINE.search(self._match_string(element)):
                text = _normalize(element.get_text())
                if 0 < len(text) < 100:
                    return text
        return ""

    @staticmethod
    def _get_direction(soup: BeautifulSoup) -> str:
        for element in (soup.find("html"), soup.body):
            if element is not None and element.get("dir"):
                return str(element["dir"])
        return ""
