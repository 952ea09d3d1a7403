"""page_scout.markdown.classify: map every node onto a closed set of rendering variants.

The renderer dispatches on the variant type only, so each row of the tag
table is a separate class and unknown tags land explicitly on
:class:`Container`.
"""
from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Union

from page_scout.config import MARKDOWN_EXCLUDED_TAGS
from page_scout.dom.tree import DocumentTree, NodeKind


@dataclass(frozen=True, slots=True)
class Text:
    pass


@dataclass(frozen=True, slots=True)
class Ignored:
    """Comments and the document node itself."""


@dataclass(frozen=True, slots=True)
class Excluded:
    pass


@dataclass(frozen=True, slots=True)
class Heading:
    level: int


@dataclass(frozen=True, slots=True)
class Paragraph:
    pass


@dataclass(frozen=True, slots=True)
class LineBreak:
    pass


@dataclass(frozen=True, slots=True)
class Rule:
    pass


@dataclass(frozen=True, slots=True)
class Strong:
    pass


@dataclass(frozen=True, slots=True)
class Emphasis:
    pass


@dataclass(frozen=True, slots=True)
class InlineCode:
    in_block: bool


@dataclass(frozen=True, slots=True)
class CodeBlock:
    pass


@dataclass(frozen=True, slots=True)
class Link:
    pass


@dataclass(frozen=True, slots=True)
class Image:
    pass


@dataclass(frozen=True, slots=True)
class ListBlock:
    ordered: bool


@dataclass(frozen=True, slots=True)
class ListItem:
    pass


@dataclass(frozen=True, slots=True)
class Blockquote:
    pass


@dataclass(frozen=True, slots=True)
class Table:
    pass


@dataclass(frozen=True, slots=True)
class Container:
    """div/article/section/main/body and every tag without a rule of its own."""


Variant = Union[
    Text,
    Ignored,
    Excluded,
    Heading,
    Paragraph,
    LineBreak,
    Rule,
    Strong,
    Emphasis,
    InlineCode,
    CodeBlock,
    Link,
    Image,
    ListBlock,
    ListItem,
    Blockquote,
    Table,
    Container,
]

_HEADINGS = {f"h{level}": Heading(level) for level in range(1, 7)}

_SIMPLE: dict[str, Variant] = {
    "p": Paragraph(),
    "br": LineBreak(),
    "hr": Rule(),
    "strong": Strong(),
    "b": Strong(),
    "em": Emphasis(),
    "i": Emphasis(),
    "pre": CodeBlock(),
    "a": Link(),
    "img": Image(),
    "ul": ListBlock(ordered=False),
    "ol": ListBlock(ordered=True),
    "li": ListItem(),
    "blockquote": Blockquote(),
    "table": Table(),
    **_HEADINGS,
}


def classify(
    tree: DocumentTree, node_id: int, excluded_tags: Collection[str] = MARKDOWN_EXCLUDED_TAGS
) -> Variant:
    """Return the rendering variant of *node_id*."""
    node = tree.node(node_id)
    if node.kind is NodeKind.TEXT:
        return Text()
    if node.kind is not NodeKind.ELEMENT:
        return Ignored()
    if node.tag in excluded_tags:
        return Excluded()
    if node.tag == "code":
        parent = tree.parent_element(node_id)
        return InlineCode(in_block=parent is not None and parent.tag == "pre")
    return _SIMPLE.get(node.tag, Container())


__all__ = [
    "Variant",
    "classify",
    "Text",
    "Ignored",
    "Excluded",
    "Heading",
    "Paragraph",
    "LineBreak",
    "Rule",
    "Strong",
    "Emphasis",
    "InlineCode",
    "CodeBlock",
    "Link",
    "Image",
    "ListBlock",
    "ListItem",
    "Blockquote",
    "Table",
    "Container",
]
