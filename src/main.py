# src/main.py — v1
"""CLI entry point — context and extract commands.

Usage:
    pagecontext context <file> --select TEXT [options]
    pagecontext extract <file> [options]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from pagecontext.config.settings import ConfigurationError, Settings, load_settings
from pagecontext.llm.token_budget import CONTEXT_BUDGETS
from pagecontext.logging.logger import setup_logging_from_settings
from pagecontext.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = load_settings()
    except (ConfigurationError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging_from_settings(
        settings, level="DEBUG" if args.verbose else None, log_format="text",
    )

    try:
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagecontext",
        description=f"pagecontext v{__version__} — page context extraction",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- context ---
    p_context = subparsers.add_parser(
        "context", help="Build a token-budgeted excerpt around a selection",
    )
    _add_document_args(p_context)
    p_context.add_argument(
        "-s", "--select", required=True,
        help="Selected text to center the excerpt on",
    )
    p_context.add_argument(
        "-m", "--mode", choices=sorted(CONTEXT_BUDGETS), default=None,
        help="Context budget preset (default: from settings)",
    )
    p_context.add_argument(
        "--max-tokens", type=int, default=None,
        help="Explicit token budget (overrides --mode)",
    )
    p_context.add_argument(
        "--json", action="store_true",
        help="Print the full payload as JSON",
    )
    p_context.set_defaults(func=_cmd_context)

    # --- extract ---
    p_extract = subparsers.add_parser(
        "extract", help="Extract and summarize a document's main content",
    )
    _add_document_args(p_extract)
    p_extract.set_defaults(func=_cmd_extract)

    return parser


def _add_document_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", type=Path, help="Path to an HTML document")
    parser.add_argument(
        "--url", default=None,
        help="Document URL (default: file URI)",
    )
    parser.add_argument(
        "--content-type", default="text/html",
        help="Content type hint (default: text/html)",
    )


def _load_document(args: argparse.Namespace):
    from pagecontext.document.html_document import HtmlDocument

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return None
    return HtmlDocument.from_file(file_path, url=args.url, content_type=args.content_type)


async def _cmd_context(args: argparse.Namespace, settings: Settings) -> int:
    """Print the excerpt built around the selection."""
    from pagecontext.api.facade import ContextEngine

    document = _load_document(args)
    if document is None:
        return 1

    engine = ContextEngine(settings=settings)
    payload = await engine.build_context(
        document, args.select, mode=args.mode, max_tokens=args.max_tokens,
    )
    if payload is None:
        logger.error("No usable context in %s", args.file)
        return 1

    if args.json:
        print(payload.model_dump_json(indent=2))
        return 0

    meta = payload.metadata
    print(f"# {meta.page_title or args.file.name}")
    print(
        f"# {len(meta.paragraphs)} paragraphs, ~{meta.total_tokens} tokens, "
        f"selection {'found' if meta.selection_found else 'not found'}"
    )
    print()
    print(payload.content)
    return 0


async def _cmd_extract(args: argparse.Namespace, settings: Settings) -> int:
    """Print a summary of the extracted record."""
    from pagecontext.api.facade import ContextEngine

    document = _load_document(args)
    if document is None:
        return 1

    engine = ContextEngine(settings=settings)
    record = await engine.extract(document)

    print(f"\nExtraction complete:")
    print(f"  Title:       {record.title}")
    print(f"  Paragraphs:  {len(record.paragraphs)}")
    print(f"  Characters:  {record.length}")
    print(f"  Tokens (~):  {record.estimated_tokens}")
    print(f"  Fallback:    {record.is_fallback_extraction}")
    print(f"  PDF:         {record.is_pdf}")
    print(f"  Sufficient:  {engine.has_sufficient_content(record)}")
    if record.excerpt:
        preview = record.excerpt[:200]
        if len(record.excerpt) > 200:
            preview += "..."
        print(f"  Excerpt:     {preview}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
