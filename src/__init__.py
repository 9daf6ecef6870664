# src/__init__.py — v1
"""pagecontext — main-content extraction and budgeted context excerpts."""

from pagecontext.version import __version__

__all__ = ["__version__"]
