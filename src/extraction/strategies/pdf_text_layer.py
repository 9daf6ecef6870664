# src/extraction/strategies/pdf_text_layer.py — v1
"""PDF path: read the text layer rendered by an in-page PDF viewer."""

from __future__ import annotations

import logging

from pagecontext.core.models import ContentRecord
from pagecontext.document.base_document import BaseDocument
from pagecontext.extraction.record_builder import build_record
from pagecontext.extraction.strategies.base_strategy import BaseExtractionStrategy

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
PDF_VIEWER_CLASS = "pdf-viewer"
TEXT_LAYER_SELECTOR = ".textLayer"
DEFAULT_PDF_TITLE = "PDF document"


def is_pdf_document(document: BaseDocument) -> bool:
    """Classify *document* as a PDF by content type, viewer marker or URL."""
    if (document.content_type or "").lower() == PDF_CONTENT_TYPE:
        return True

    root = document.root
    classes = (root.get("class") or []) if root is not None and root.name == "body" else []
    if PDF_VIEWER_CLASS in classes:
        return True

    url = (document.url or "").lower()
    return url.endswith(".pdf") or ".pdf?" in url


class PdfTextLayerStrategy(BaseExtractionStrategy):
    """Segments the viewer's text layer of a PDF document."""

    @property
    def name(self) -> str:
        return "pdf"

    async def attempt(self, document: BaseDocument) -> ContentRecord | None:
        if not is_pdf_document(document):
            return None

        clone = document.clone()
        text_layer = clone.select_one(TEXT_LAYER_SELECTOR)
        if text_layer is None:
            logger.info("PDF document %s has no text layer", document.url)
            return None

        record = build_record(
            clone,
            text_layer,
            title=document.title or DEFAULT_PDF_TITLE,
            is_pdf=True,
        )
        logger.info(
            "Extracted PDF text layer: %d paragraphs", len(record.paragraphs)
        )
        return record
