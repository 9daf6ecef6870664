# src/llm/token_budget.py — v1
"""Token estimation and context budget presets.

The estimate is a heuristic, not a tokenizer: it only needs to be close
enough to keep an excerpt under a model's context allowance.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# Weights per counted unit
_CJK_WEIGHT = 1.5
_WORD_WEIGHT = 1.3
_OTHER_WEIGHT = 0.5
# Characters assumed consumed by each counted Latin word
_CHARS_PER_WORD = 5

_CJK_PATTERN = re.compile(r"[\u4e00-\u9fa5]")
_WORD_PATTERN = re.compile(r"[A-Za-z]+")

# Context token budgets per mode
CONTEXT_BUDGETS: dict[str, int] = {
    "economic": 2000,
    "standard": 6000,
    "precise": 12000,
}
DEFAULT_CONTEXT_MODE = "standard"


def estimate_tokens(text: str | None) -> int:
    """Approximate the number of model tokens *text* will consume.

    CJK ideographs count 1.5 each, Latin words 1.3 each, and every other
    character 0.5 once the characters already covered by words are
    subtracted. Never negative.
    """
    if not text:
        return 0

    cjk_chars = len(_CJK_PATTERN.findall(text))
    words = len(_WORD_PATTERN.findall(text))
    other_chars = max(0, len(text) - cjk_chars - words * _CHARS_PER_WORD)

    total = cjk_chars * _CJK_WEIGHT + words * _WORD_WEIGHT + other_chars * _OTHER_WEIGHT
    return max(0, math.ceil(total))


def resolve_context_budget(mode: str | None) -> int:
    """Return the token budget for a context mode name.

    Unknown or empty modes resolve to the standard budget.
    """
    if mode and mode in CONTEXT_BUDGETS:
        return CONTEXT_BUDGETS[mode]
    if mode:
        logger.warning("Unknown context mode %r, using %r", mode, DEFAULT_CONTEXT_MODE)
    return CONTEXT_BUDGETS[DEFAULT_CONTEXT_MODE]
