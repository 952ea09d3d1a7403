"""page_scout.dom.snapshot: depth-bounded element snapshot with visibility and geometry."""

from __future__ import annotations

from collections.abc import Collection
from typing import Optional

from page_scout.config import DEFAULT_MAX_DEPTH, SNAPSHOT_EXCLUDED_TAGS
from page_scout.dom.models import ElementNode, fallback_body
from page_scout.dom.page import PageCapture
from page_scout.logger import logger
from page_scout.text import direct_text

__all__ = ["extract_snapshot", "extract_element"]


def extract_element(
    capture: PageCapture,
    node_id: int,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    excluded_tags: Collection[str] = SNAPSHOT_EXCLUDED_TAGS,
) -> Optional[ElementNode]:
    """Snapshot one element and its element descendants.

    Returns ``None`` when *depth* exceeds *max_depth* or the tag is excluded;
    the caller then leaves the node (and its whole subtree) out.
    """
    if depth > max_depth:
        return None
    tree = capture.tree
    node = tree.node(node_id)
    if node.tag in excluded_tags:
        return None

    element = ElementNode(tag=node.tag, attributes=dict(node.attributes))

    if capture.style.computed_style(node_id).is_rendered:
        box = capture.geometry.bounding_box(node_id)
        if box.is_visible:
            element.visible = True
            element.box = box

    element.text = direct_text(tree, node_id) or None

    for child in tree.element_children(node_id):
        child_element = extract_element(capture, child.id, depth + 1, max_depth, excluded_tags)
        if child_element is not None:
            element.children.append(child_element)

    return element


def extract_snapshot(
    capture: PageCapture,
    max_depth: int = DEFAULT_MAX_DEPTH,
    excluded_tags: Collection[str] = SNAPSHOT_EXCLUDED_TAGS,
) -> ElementNode:
    """Snapshot the page starting at ``<body>``.

    A document without a body yields :func:`~page_scout.dom.models.fallback_body`.
    """
    body = capture.tree.body
    if body is None:
        logger.debug("No <body> in %s, returning fallback snapshot", capture.url or "<document>")
        return fallback_body()

    snapshot = extract_element(capture, body.id, 0, max_depth, excluded_tags)
    if snapshot is None:
        # only reachable when "body" itself is configured as excluded
        return fallback_body()
    logger.debug(
        "Snapshot of %s: %d elements (max depth %d)",
        capture.url or "<document>",
        snapshot.count_elements(),
        max_depth,
    )
    return snapshot
