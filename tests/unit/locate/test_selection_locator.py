# tests/unit/locate/test_selection_locator.py — v1
"""Tests for locate/selection_locator.py."""

from __future__ import annotations

import pytest

from pagecontext.locate.selection_locator import locate


@pytest.fixture
def paragraphs(paragraphs_from):
    return paragraphs_from([
        "Tides rise twice a day.",
        "Spring tides are the strongest tides.",
        "Neap tides are weaker; spring tides return a week later.",
    ])


class TestLocate:
    def test_finds_containing_paragraph(self, paragraphs):
        result = locate(paragraphs, "neap tides")
        assert result.found is True
        assert result.paragraph_index == 2

    def test_case_insensitive_and_trimmed(self, paragraphs):
        result = locate(paragraphs, "   TWICE A DAY  ")
        assert result.found is True
        assert result.paragraph_index == 0

    def test_first_match_wins(self, paragraphs):
        assert locate(paragraphs, "spring tides").paragraph_index == 1

    def test_not_found(self, paragraphs):
        result = locate(paragraphs, "volcanic eruptions")
        assert result.found is False
        assert result.paragraph_index == -1

    @pytest.mark.parametrize("selection", ["", "   ", None])
    def test_blank_selection_not_found(self, paragraphs, selection):
        assert locate(paragraphs, selection).found is False

    @pytest.mark.parametrize("empty", [[], None])
    def test_no_paragraphs(self, empty):
        result = locate(empty, "tides")
        assert (result.found, result.paragraph_index) == (False, -1)

    def test_selection_spanning_paragraphs_not_found(self, paragraphs):
        assert locate(paragraphs, "a day. Spring tides").found is False
