# src/extraction/errors.py — v1
"""Errors surfaced when no extraction strategy produced content."""

from __future__ import annotations


class ExtractionUnavailableError(RuntimeError):
    """Raised when every extraction strategy declined the document.

    Callers are expected to continue without page context rather than
    abort the request.
    """


class PdfContentUnavailableError(ExtractionUnavailableError):
    """Raised when a PDF document exposes no extractable text layer."""
