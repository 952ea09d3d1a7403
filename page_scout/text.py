"""page_scout.text: text normalization helpers shared by both pipelines."""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence

from page_scout.config import FLATTEN_SKIP_TAGS
from page_scout.dom.tree import DocumentTree

__all__: Sequence[str] = ("direct_text", "flatten_text", "collapse_newlines")

_NEWLINE_RUN = re.compile(r"\n{3,}")


def direct_text(tree: DocumentTree, node_id: int) -> str:
    """Text of the immediate text children only, each trimmed, joined by single spaces."""
    pieces = (n.text.strip() for n in tree.child_nodes(node_id) if n.is_text)
    return " ".join(p for p in pieces if p)


def flatten_text(
    tree: DocumentTree, node_id: int, skip_tags: Collection[str] = FLATTEN_SKIP_TAGS
) -> str:
    """Plain text of a whole subtree, markup discarded.

    Every descendant text node is trimmed and the non-empty pieces are joined
    with a single space. Subtrees rooted at *skip_tags* contribute nothing.
    """
    node = tree.node(node_id)
    if node.is_text:
        return node.text.strip()

    pieces: list[str] = []
    stack = list(reversed(node.children))
    while stack:
        current = tree.node(stack.pop())
        if current.is_text:
            piece = current.text.strip()
            if piece:
                pieces.append(piece)
        elif current.is_element and current.tag not in skip_tags:
            stack.extend(reversed(current.children))
    return " ".join(pieces)


def collapse_newlines(text: str) -> str:
    """Collapse runs of three or more newlines to two and trim the ends."""
    return _NEWLINE_RUN.sub("\n\n", text).strip()
