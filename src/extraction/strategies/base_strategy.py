# src/extraction/strategies/base_strategy.py — v1
"""Abstract extraction strategy interface.

Strategies are tried in order; each either returns a ContentRecord or
None to say "not applicable here", so the fallback order stays explicit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument


class BaseExtractionStrategy(ABC):
    """One tier of the layered extraction chain."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier used in logs."""

    @abstractmethod
    async def attempt(self, document: BaseDocument) -> ContentRecord | None:
        """Extract *document*, or return None if this strategy does not apply."""
