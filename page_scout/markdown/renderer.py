"""page_scout.markdown.renderer: Markdown rendering of a page's main content.

Every node is classified first (:mod:`page_scout.markdown.classify`), then
rendered by the rule registered for its variant. Rules that need plain text
(headings, paragraphs, emphasis, links, list items, quotes, table cells)
flatten their subtree; nested inline tags inside them are not re-rendered.
"""
from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Dict, Optional, Union

from page_scout.config import FLATTEN_SKIP_TAGS, MARKDOWN_EXCLUDED_TAGS
from page_scout.dom.page import PageCapture
from page_scout.dom.tree import DocumentTree, Node
from page_scout.logger import logger
from page_scout.markdown import classify as v
from page_scout.markdown.models import ContentExtractionResult
from page_scout.text import collapse_newlines, flatten_text

__all__ = [
    "MarkdownRenderer",
    "select_content_root",
    "render_node",
    "normalize_markdown",
    "convert_to_markdown",
]


def select_content_root(tree: DocumentTree) -> Optional[Node]:
    """First ``<article>``, else ``<main>``, else ``[role="main"]``, else ``<body>``."""
    return (
        tree.query("article")
        or tree.query("main")
        or tree.find(lambda n: n.attributes.get("role") == "main")
        or tree.body
    )


class MarkdownRenderer:
    """Tag-driven Markdown transform over one :class:`DocumentTree`."""

    def __init__(
        self,
        tree: DocumentTree,
        excluded_tags: Collection[str] = MARKDOWN_EXCLUDED_TAGS,
        flatten_skip_tags: Collection[str] = FLATTEN_SKIP_TAGS,
    ) -> None:
        self.tree = tree
        self.excluded_tags = excluded_tags
        self.flatten_skip_tags = flatten_skip_tags
        self._rules: Dict[type, Callable[[int, v.Variant], str]] = {
            v.Text: self._text,
            v.Ignored: self._nothing,
            v.Excluded: self._nothing,
            v.ListItem: self._nothing,
            v.Heading: self._heading,
            v.Paragraph: self._paragraph,
            v.LineBreak: lambda node_id, variant: "\n",
            v.Rule: lambda node_id, variant: "\n---\n\n",
            v.Strong: self._strong,
            v.Emphasis: self._emphasis,
            v.InlineCode: self._inline_code,
            v.CodeBlock: self._code_block,
            v.Link: self._link,
            v.Image: self._image,
            v.ListBlock: self._list,
            v.Blockquote: self._blockquote,
            v.Table: self._table,
        }

    # Entry point -----------------------------------------------------------
    def render(self, node_id: int) -> str:
        # Containers only concatenate their children, so they are expanded on
        # an explicit stack; every other rule produces its output directly.
        parts = []
        stack = [node_id]
        while stack:
            current = stack.pop()
            variant = v.classify(self.tree, current, self.excluded_tags)
            if isinstance(variant, v.Container):
                stack.extend(reversed(self.tree.node(current).children))
            else:
                parts.append(self._rules[type(variant)](current, variant))
        return "".join(parts)

    # Helpers ---------------------------------------------------------------
    def _flat(self, node_id: int) -> str:
        return flatten_text(self.tree, node_id, self.flatten_skip_tags)

    def _attr(self, node_id: int, name: str) -> str:
        return self.tree.node(node_id).attributes.get(name, "")

    # Rules -----------------------------------------------------------------
    def _nothing(self, node_id: int, variant: v.Variant) -> str:
        return ""

    def _text(self, node_id: int, variant: v.Variant) -> str:
        text = self.tree.node(node_id).text.strip()
        return f"{text} " if text else ""

    def _heading(self, node_id: int, variant: v.Heading) -> str:
        return f"\n{'#' * variant.level} {self._flat(node_id)}\n\n"

    def _paragraph(self, node_id: int, variant: v.Variant) -> str:
        return f"{self._flat(node_id)}\n\n"

    def _strong(self, node_id: int, variant: v.Variant) -> str:
        return f"**{self._flat(node_id)}**"

    def _emphasis(self, node_id: int, variant: v.Variant) -> str:
        return f"*{self._flat(node_id)}*"

    def _inline_code(self, node_id: int, variant: v.InlineCode) -> str:
        if variant.in_block:
            return ""
        return f"`{self._flat(node_id)}`"

    def _code_block(self, node_id: int, variant: v.Variant) -> str:
        code = self.tree.query("code", within=node_id)
        source = self.tree.text_content(code.id if code is not None else node_id)
        return f"\n```\n{source}\n```\n\n"

    def _link(self, node_id: int, variant: v.Variant) -> str:
        return f"[{self._flat(node_id)}]({self._attr(node_id, 'href')})"

    def _image(self, node_id: int, variant: v.Variant) -> str:
        return f"![{self._attr(node_id, 'alt')}]({self._attr(node_id, 'src')})"

    def _list(self, node_id: int, variant: v.ListBlock) -> str:
        items = [n for n in self.tree.element_children(node_id) if n.tag == "li"]
        lines = []
        for number, item in enumerate(items, start=1):
            prefix = f"{number}. " if variant.ordered else "- "
            lines.append(f"{prefix}{self._flat(item.id)}\n")
        return "".join(lines) + "\n"

    def _blockquote(self, node_id: int, variant: v.Variant) -> str:
        lines = self._flat(node_id).split("\n")
        return "\n".join(f"> {line}" for line in lines) + "\n\n"

    def _table(self, node_id: int, variant: v.Variant) -> str:
        rows = self.tree.query_all("tr", within=node_id)
        if not rows:
            return ""
        has_header = self.tree.query("th", within=node_id) is not None
        out = []
        for index, row in enumerate(rows):
            cells = self.tree.query_all(("th", "td"), within=row.id)
            out.append("| " + " | ".join(self._flat(cell.id) for cell in cells) + " |\n")
            if index == 0 and has_header:
                out.append("| " + " | ".join("---" for _ in cells) + " |\n")
        return "".join(out) + "\n\n"


def render_node(
    tree: DocumentTree,
    node_id: int,
    excluded_tags: Collection[str] = MARKDOWN_EXCLUDED_TAGS,
    flatten_skip_tags: Collection[str] = FLATTEN_SKIP_TAGS,
) -> str:
    """Raw (not yet normalized) Markdown for *node_id*."""
    return MarkdownRenderer(tree, excluded_tags, flatten_skip_tags).render(node_id)


def normalize_markdown(text: str) -> str:
    return collapse_newlines(text)


def convert_to_markdown(
    source: Union[PageCapture, DocumentTree],
    excluded_tags: Collection[str] = MARKDOWN_EXCLUDED_TAGS,
    flatten_skip_tags: Collection[str] = FLATTEN_SKIP_TAGS,
) -> ContentExtractionResult:
    """Render the content root of *source* and package it with title and URL."""
    tree = source.tree if isinstance(source, PageCapture) else source
    root = select_content_root(tree)
    if root is None:
        logger.debug("No content root in %s, rendering empty content", tree.url or "<document>")
        content = ""
    else:
        content = normalize_markdown(render_node(tree, root.id, excluded_tags, flatten_skip_tags))
        logger.debug(
            "Rendered <%s> of %s into %d characters", root.tag, tree.url or "<document>", len(content)
        )
    return ContentExtractionResult(title=tree.title, content=content, url=tree.url)
