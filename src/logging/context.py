# src/logging/context.py — v1
"""Contextual logging support — attach document URL, request id and stage to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging — set per context request.
_document_url: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document_url", default=None
)
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass
class LogContext:
    """Snapshot of current logging context."""

    document_url: str | None = None
    request_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        document_url=_document_url.get(),
        request_id=_request_id.get(),
        stage=_stage.get(),
    )


def set_request_context(document_url: str, request_id: str) -> None:
    """Set request-level context (called once per context request)."""
    _document_url.set(document_url)
    _request_id.set(request_id)


def set_stage(stage: str | None) -> None:
    """Set the current processing stage (extract, locate, truncate)."""
    _stage.set(stage)


def clear_context() -> None:
    """Reset all context variables."""
    _document_url.set(None)
    _request_id.set(None)
    _stage.set(None)
