"""
Data models produced by the DOM snapshot extractor.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Element geometry in viewport coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_visible(self) -> bool:
        """True when the box occupies a non-zero rendered area."""
        return self.width > 0 and self.height > 0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(slots=True)
class ElementNode:
    """One element of a bounded snapshot tree.

    ``text`` holds only the element's own text nodes; ``box`` is set only for
    visible elements. ``interactive`` is carried for downstream classifiers and
    is never computed here.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: List["ElementNode"] = field(default_factory=list)
    visible: bool = False
    interactive: bool = False
    box: Optional[BoundingBox] = None

    @property
    def element_id(self) -> Optional[str]:
        return self.attributes.get("id")

    def has_class(self, class_name: str) -> bool:
        return class_name in self.attributes.get("class", "").split()

    def iter(self) -> Iterator[ElementNode]:
        """Walk the subtree in pre-order, starting with *self*."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def count_elements(self) -> int:
        return sum(1 for _ in self.iter())

    def depth(self) -> int:
        """Number of levels below this node (a leaf has depth 0)."""
        if not self.children:
            return 0
        return 1 + max(child.depth() for child in self.children)

    def to_simple_string(self) -> str:
        parts = [f"<{self.tag}"]
        if self.element_id is not None:
            parts.append(f' id="{self.element_id}"')
        if "class" in self.attributes:
            parts.append(f' class="{self.attributes["class"]}"')
        parts.append(">")
        if self.text:
            parts.append(self.text)
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready representation; absent ``text`` / ``box`` keys are omitted."""
        data: Dict[str, Any] = {"tag": self.tag, "attributes": dict(self.attributes)}
        if self.text is not None:
            data["text"] = self.text
        data["children"] = [child.to_dict() for child in self.children]
        data["visible"] = self.visible
        data["interactive"] = self.interactive
        if self.box is not None:
            data["box"] = self.box.to_dict()
        return data


def fallback_body() -> ElementNode:
    """Snapshot returned when the document has no ``<body>``."""
    return ElementNode(tag="body", visible=False)


__all__ = ["BoundingBox", "ElementNode", "fallback_body"]
