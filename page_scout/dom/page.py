"""
Page container handed to the extraction pipelines.
"""
from __future__ import annotations

from dataclasses import dataclass

from page_scout.dom.oracles import GeometryOracle, StyleOracle
from page_scout.dom.tree import DocumentTree


@dataclass(slots=True)
class PageCapture:
    """A document tree together with the style and geometry answers for its elements."""

    tree: DocumentTree
    style: StyleOracle
    geometry: GeometryOracle

    @property
    def title(self) -> str:
        return self.tree.title

    @property
    def url(self) -> str:
        return self.tree.url


__all__ = ["PageCapture"]
