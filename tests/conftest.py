# File: tests/conftest.py
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import pytest

from page_scout.dom.models import BoundingBox
from page_scout.dom.oracles import ComputedStyle, StaticGeometryOracle, StaticStyleOracle
from page_scout.dom.page import PageCapture
from page_scout.dom.tree import TreeBuilder

ARTICLE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>  Sample   Page </title>
  <meta charset="utf-8">
  <style>body { color: red; }</style>
</head>
<body>
  <nav><a href="/home">Home</a></nav>
  <article>
    <h1>Main Title</h1>
    <p>Intro with <b>bold</b> words.</p>
    <ul><li>first</li><li>second</li></ul>
    <script>var hidden = 1;</script>
  </article>
</body>
</html>
"""


def make_capture(
    builder: TreeBuilder,
    styles: Optional[Mapping[int, ComputedStyle]] = None,
    boxes: Optional[Mapping[int, BoundingBox]] = None,
    *,
    title: str = "",
    url: str = "",
) -> PageCapture:
    """Wrap a hand-built tree with static style and geometry answers."""
    tree = builder.build(title=title, url=url)
    return PageCapture(tree=tree, style=StaticStyleOracle(styles), geometry=StaticGeometryOracle(boxes))


@pytest.fixture()
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture()
def capture_data() -> Dict[str, Any]:
    """
    A small page capture: a visible heading and a hidden panel with a child.
    """
    return {
        "title": "Captured",
        "url": "https://example.com/page",
        "document": {
            "type": "element",
            "tag": "HTML",
            "rect": {"x": 0, "y": 0, "width": 800, "height": 600},
            "children": [
                {
                    "type": "element",
                    "tag": "body",
                    "attributes": {"class": "page"},
                    "rect": {"x": 0, "y": 0, "width": 800, "height": 600},
                    "children": [
                        {
                            "type": "element",
                            "tag": "h1",
                            "rect": {"x": 8, "y": 8, "width": 784, "height": 37},
                            "children": [{"type": "text", "text": " Welcome "}],
                        },
                        {
                            "type": "element",
                            "tag": "div",
                            "attributes": {"id": "panel"},
                            "style": {"display": "none", "visibility": "visible", "opacity": 1},
                            "children": [
                                {
                                    "type": "element",
                                    "tag": "span",
                                    "children": [{"type": "text", "text": "hi"}],
                                },
                                {"type": "comment", "text": "note"},
                            ],
                        },
                    ],
                }
            ],
        },
    }


@pytest.fixture()
def html_file(tmp_path, article_html) -> Path:
    path = tmp_path / "page.html"
    path.write_text(article_html, encoding="utf-8")
    return path


@pytest.fixture()
def capture_file(tmp_path, capture_data) -> Path:
    path = tmp_path / "capture.json"
    path.write_text(json.dumps(capture_data), encoding="utf-8")
    return path


@pytest.fixture()
def capture_factory():
    """Return :func:`make_capture` for tests that build trees by hand."""
    return make_capture
