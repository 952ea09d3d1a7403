"""page_scout.dom.tree: immutable document tree used by both pipelines.

Nodes live in a flat arena and reference each other by integer id, so a tree
can be built once by an adapter (HTML markup, page capture, test fixture) and
then walked by the extractors without touching any live environment.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

__all__: Sequence[str] = ("NodeKind", "Node", "DocumentTree", "TreeBuilder")


class NodeKind(str, Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class Node:
    """One node of the arena. ``children`` holds every child node id in order."""

    id: int
    kind: NodeKind
    tag: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    parent: Optional[int] = None
    children: tuple[int, ...] = ()

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT


class DocumentTree:
    """Read-only view over an arena of :class:`Node` objects rooted at a document node."""

    __slots__ = ("_nodes", "title", "url")

    def __init__(self, nodes: Sequence[Node], *, title: str = "", url: str = "") -> None:
        if not nodes or nodes[0].kind is not NodeKind.DOCUMENT:
            raise ValueError("node 0 of a DocumentTree must be the document node")
        self._nodes: tuple[Node, ...] = tuple(nodes)
        self.title = title
        self.url = url

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> int:
        return 0

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def child_nodes(self, node_id: int) -> list[Node]:
        return [self._nodes[c] for c in self._nodes[node_id].children]

    def element_children(self, node_id: int) -> list[Node]:
        return [n for n in self.child_nodes(node_id) if n.is_element]

    def parent_element(self, node_id: int) -> Optional[Node]:
        parent = self._nodes[node_id].parent
        if parent is None:
            return None
        candidate = self._nodes[parent]
        return candidate if candidate.is_element else None

    def descendants(self, node_id: int) -> Iterator[Node]:
        """Yield all descendants of *node_id* in document (pre-)order."""
        stack = list(reversed(self._nodes[node_id].children))
        while stack:
            current = self._nodes[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def find(self, predicate: Callable[[Node], bool], within: Optional[int] = None) -> Optional[Node]:
        """First descendant element (document order) satisfying *predicate*."""
        for n in self.descendants(self.root if within is None else within):
            if n.is_element and predicate(n):
                return n
        return None

    def query(self, tag: str, within: Optional[int] = None) -> Optional[Node]:
        tag = tag.lower()
        return self.find(lambda n: n.tag == tag, within)

    def query_all(self, tags: str | Sequence[str], within: Optional[int] = None) -> list[Node]:
        wanted = {tags.lower()} if isinstance(tags, str) else {t.lower() for t in tags}
        start = self.root if within is None else within
        return [n for n in self.descendants(start) if n.is_element and n.tag in wanted]

    @property
    def body(self) -> Optional[Node]:
        return self.query("body")

    def text_content(self, node_id: int) -> str:
        """Raw concatenation of all descendant text, like DOM ``textContent``."""
        node = self._nodes[node_id]
        if node.is_text:
            return node.text
        return "".join(n.text for n in self.descendants(node_id) if n.is_text)


class TreeBuilder:
    """Incrementally assemble a :class:`DocumentTree`.

    ``add_*`` methods return the id of the new node; pass it as *parent* to
    nest further nodes. The document node always has id ``0``.
    """

    def __init__(self) -> None:
        self._kinds: list[NodeKind] = [NodeKind.DOCUMENT]
        self._tags: list[str] = [""]
        self._attrs: list[dict[str, str]] = [{}]
        self._texts: list[str] = [""]
        self._parents: list[Optional[int]] = [None]
        self._children: list[list[int]] = [[]]

    @property
    def document(self) -> int:
        return 0

    def _add(
        self, parent: int, kind: NodeKind, tag: str = "", attributes: Mapping[str, str] | None = None, text: str = ""
    ) -> int:
        if self._kinds[parent] not in (NodeKind.DOCUMENT, NodeKind.ELEMENT):
            raise ValueError(f"node {parent} ({self._kinds[parent].value}) cannot have children")
        node_id = len(self._kinds)
        self._kinds.append(kind)
        self._tags.append(tag.lower())
        self._attrs.append(dict(attributes or {}))
        self._texts.append(text)
        self._parents.append(parent)
        self._children.append([])
        self._children[parent].append(node_id)
        return node_id

    def add_element(self, parent: int, tag: str, attributes: Mapping[str, str] | None = None) -> int:
        return self._add(parent, NodeKind.ELEMENT, tag=tag, attributes=attributes)

    def add_text(self, parent: int, text: str) -> int:
        return self._add(parent, NodeKind.TEXT, text=text)

    def add_comment(self, parent: int, text: str) -> int:
        return self._add(parent, NodeKind.COMMENT, text=text)

    def build(self, *, title: str = "", url: str = "") -> DocumentTree:
        nodes = [
            Node(
                id=i,
                kind=self._kinds[i],
                tag=self._tags[i],
                attributes=MappingProxyType(dict(self._attrs[i])),
                text=self._texts[i],
                parent=self._parents[i],
                children=tuple(self._children[i]),
            )
            for i in range(len(self._kinds))
        ]
        return DocumentTree(nodes, title=title, url=url)
