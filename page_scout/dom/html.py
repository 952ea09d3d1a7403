"""HTML adapter for PageScout.

Turns raw markup into a :class:`~page_scout.dom.page.PageCapture` so both
pipelines can run on saved pages and fixtures instead of a live browser.

* tree    : element, text and comment nodes in document order
  (doctype, declarations and processing instructions are dropped).
* title   : text of the first ``<title>``, whitespace-collapsed, ``""`` if absent.
* style   : :class:`~page_scout.dom.oracles.InlineStyleOracle`.
* geometry: whatever the caller passes; static markup has no layout, so by
  default every element reports the zero box and is therefore not visible.

The ``lxml`` tree builder is the default because, like a browser, it always
produces an ``html/head/body`` skeleton around fragments.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from page_scout.dom.oracles import GeometryOracle, InlineStyleOracle, StaticGeometryOracle
from page_scout.dom.page import PageCapture
from page_scout.dom.tree import DocumentTree, TreeBuilder
from page_scout.logger import logger

__all__: Sequence[str] = ("parse_html", "build_tree")

_DROPPED_STRINGS = (Doctype, Declaration, ProcessingInstruction, CData)


def _attributes(tag: Tag) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attrs[str(name)] = "" if value is None else str(value)
    return attrs


def _title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if not isinstance(title_tag, Tag):
        return ""
    return " ".join(title_tag.get_text().split())


def build_tree(soup: BeautifulSoup, url: str = "") -> DocumentTree:
    """Copy a parsed soup into an immutable :class:`DocumentTree`."""
    builder = TreeBuilder()
    stack: list[tuple[object, int]] = [(child, builder.document) for child in reversed(soup.contents)]
    while stack:
        item, parent = stack.pop()
        if isinstance(item, Tag):
            node_id = builder.add_element(parent, item.name, _attributes(item))
            stack.extend((child, node_id) for child in reversed(item.contents))
        elif isinstance(item, Comment):
            builder.add_comment(parent, str(item))
        elif isinstance(item, _DROPPED_STRINGS):
            continue
        elif isinstance(item, NavigableString):
            builder.add_text(parent, str(item))
    return builder.build(title=_title(soup), url=url)


def parse_html(
    markup: str | bytes,
    url: str = "",
    parser: str = "lxml",
    geometry: Optional[GeometryOracle] = None,
) -> PageCapture:
    """Parse *markup* and wrap it into a :class:`PageCapture`.

    Parameters
    ----------
    markup
        HTML document or fragment.
    url
        Address reported as the page URL.
    parser
        BeautifulSoup tree builder (``"lxml"`` or ``"html.parser"``).
    geometry
        Optional geometry oracle keyed by the ids of the built tree.
    """
    soup = BeautifulSoup(markup, parser, multi_valued_attributes=None)
    tree = build_tree(soup, url=url)
    logger.debug("Parsed HTML (%s) into %d nodes", parser, len(tree))
    return PageCapture(
        tree=tree,
        style=InlineStyleOracle(tree),
        geometry=geometry if geometry is not None else StaticGeometryOracle(),
    )
