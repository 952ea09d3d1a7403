"""page_scout.dom.oracles: style and geometry lookups the snapshot extractor calls through.

A live browser answers these questions with ``getComputedStyle`` and
``getBoundingClientRect``. Here they are explicit objects so the extractor
works on any :class:`~page_scout.dom.tree.DocumentTree`:

* :class:`InlineStyleOracle` – derives styles from ``style="…"`` / ``hidden``.
* :class:`StaticStyleOracle` / :class:`StaticGeometryOracle` – plain mapping
  lookups, filled from a page capture or by tests.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from page_scout.dom.models import BoundingBox
from page_scout.dom.tree import DocumentTree

__all__: Sequence[str] = (
    "ComputedStyle",
    "StyleOracle",
    "GeometryOracle",
    "InlineStyleOracle",
    "StaticStyleOracle",
    "StaticGeometryOracle",
    "parse_declarations",
)

ZERO_BOX = BoundingBox()


@dataclass(frozen=True, slots=True)
class ComputedStyle:
    """The three computed properties that decide whether an element is rendered."""

    display: str = "block"
    visibility: str = "visible"
    opacity: str = "1"

    @property
    def is_rendered(self) -> bool:
        if self.display == "none" or self.visibility == "hidden":
            return False
        try:
            return float(self.opacity) != 0.0
        except ValueError:
            return self.opacity != "0"


DEFAULT_STYLE = ComputedStyle()


class StyleOracle(Protocol):
    def computed_style(self, node_id: int) -> ComputedStyle: ...


class GeometryOracle(Protocol):
    def bounding_box(self, node_id: int) -> BoundingBox: ...


def parse_declarations(style: str) -> Dict[str, str]:
    """Parse an inline ``style`` attribute into ``{property: value}`` (lower-cased)."""
    result: Dict[str, str] = {}
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        value = value.replace("!important", "").strip().lower()
        name = name.strip().lower()
        if name and value:
            result[name] = value
    return result


class InlineStyleOracle:
    """Computed style approximated from inline declarations.

    ``visibility`` inherits from the nearest ancestor that declares it.
    ``display: none`` (or the ``hidden`` attribute) removes the whole subtree
    from layout, so descendants report ``display: none`` as well. ``opacity``
    applies to the element alone.
    """

    def __init__(self, tree: DocumentTree) -> None:
        self._tree = tree
        self._cache: Dict[int, ComputedStyle] = {}

    def _declared(self, node_id: int) -> Dict[str, str]:
        node = self._tree.node(node_id)
        declared = parse_declarations(node.attributes.get("style", ""))
        if "hidden" in node.attributes and "display" not in declared:
            declared["display"] = "none"
        return declared

    def _resolve(self, node_id: int, parent: Optional[ComputedStyle]) -> ComputedStyle:
        declared = self._declared(node_id)
        visibility = declared.get("visibility", "inherit")
        if visibility == "inherit":
            visibility = parent.visibility if parent is not None else "visible"
        display = declared.get("display", DEFAULT_STYLE.display)
        if parent is not None and parent.display == "none":
            display = "none"
        return ComputedStyle(
            display=display,
            visibility=visibility,
            opacity=declared.get("opacity", DEFAULT_STYLE.opacity),
        )

    def computed_style(self, node_id: int) -> ComputedStyle:
        # Climb to the nearest cached ancestor, then resolve downwards.
        chain = []
        current: Optional[int] = node_id
        while current is not None and current not in self._cache:
            chain.append(current)
            parent = self._tree.parent_element(current)
            current = parent.id if parent is not None else None
        style = self._cache[current] if current is not None else None
        for pending in reversed(chain):
            style = self._resolve(pending, style)
            self._cache[pending] = style
        return self._cache[node_id]


class StaticStyleOracle:
    def __init__(self, styles: Optional[Mapping[int, ComputedStyle]] = None) -> None:
        self._styles = dict(styles or {})

    def computed_style(self, node_id: int) -> ComputedStyle:
        return self._styles.get(node_id, DEFAULT_STYLE)


class StaticGeometryOracle:
    """Boxes by node id; unknown nodes have no layout and report the zero box."""

    def __init__(self, boxes: Optional[Mapping[int, BoundingBox]] = None) -> None:
        self._boxes = dict(boxes or {})

    def bounding_box(self, node_id: int) -> BoundingBox:
        return self._boxes.get(node_id, ZERO_BOX)
