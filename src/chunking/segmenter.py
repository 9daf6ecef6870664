# src/chunking/segmenter.py — v1
"""Split a content tree into ordered, indexed paragraphs.

Only block-level text-bearing elements become paragraphs. The traversal
never modifies the tree; each paragraph keeps a weak reference to its
element for later highlighting.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from bs4 import Tag

from pagecontext.core.models import BlockKind, Paragraph

BLOCK_KINDS: dict[str, BlockKind] = {
    "p": "paragraph",
    "h1": "heading-1",
    "h2": "heading-2",
    "h3": "heading-3",
    "h4": "heading-4",
    "h5": "heading-5",
    "h6": "heading-6",
    "li": "list-item",
    "blockquote": "quote",
    "pre": "code",
    "code": "code",
}


def segment(node: Any) -> list[Paragraph]:
    """Return the paragraphs under *node* in document order.

    Indices count emitted paragraphs only, so ``paragraphs[i].index == i``.
    """
    if node is None:
        return []

    paragraphs: list[Paragraph] = []
    for element in _iter_blocks(node):
        text = _element_text(element)
        if not text:
            continue
        paragraphs.append(
            Paragraph.from_node(len(paragraphs), text, BLOCK_KINDS[element.name], element)
        )
    return paragraphs


def _iter_blocks(node: Tag) -> Iterator[Tag]:
    if node.name in BLOCK_KINDS:
        yield node
        return
    for element in node.find_all(list(BLOCK_KINDS)):
        # Nested blocks (<pre><code>, <blockquote><p>) belong to the outer one.
        if not _inside_block(element, node):
            yield element


def _inside_block(element: Tag, container: Tag) -> bool:
    parent = element.parent
    while parent is not None and parent is not container:
        if parent.name in BLOCK_KINDS:
            return True
        parent = parent.parent
    return False


def _element_text(element: Tag) -> str:
    text = element.get_text()
    if BLOCK_KINDS[element.name] == "code":
        return text.strip()
    return " ".join(text.split())
