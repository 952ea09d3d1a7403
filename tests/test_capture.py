# File: tests/test_capture.py
import json

import pytest

from page_scout.dom.capture import load_capture
from page_scout.errors import CaptureFormatError, NoDocumentError


def test_load_capture_builds_tree_and_oracles(capture_data):
    capture = load_capture(capture_data)
    tree = capture.tree
    assert capture.title == "Captured"
    assert capture.url == "https://example.com/page"
    assert tree.query("html") is not None  # tag lowercased

    h1 = tree.query("h1")
    assert capture.geometry.bounding_box(h1.id).width == 784
    panel = tree.find(lambda n: n.attributes.get("id") == "panel")
    style = capture.style.computed_style(panel.id)
    assert style.display == "none"
    assert style.opacity == "1"
    assert not style.is_rendered
    span = tree.query("span")
    assert capture.geometry.bounding_box(span.id).area == 0


def test_load_capture_accepts_json_text_and_url_override(capture_data):
    capture = load_capture(json.dumps(capture_data), url="https://override.test/")
    assert capture.url == "https://override.test/"
    assert dict(capture.tree.body.attributes) == {"class": "page"}


def test_missing_document_raises_no_document():
    with pytest.raises(NoDocumentError):
        load_capture({"title": "empty", "document": None})


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "[1, 2, 3]",
        {"document": {"type": "widget", "tag": "div"}},
        {"document": {"type": "element", "tag": ""}},
        {"document": {"type": "element", "tag": "div", "rect": {"width": "wide"}}},
    ],
)
def test_malformed_captures_raise_format_error(payload):
    with pytest.raises(CaptureFormatError):
        load_capture(payload)


def test_capture_format_error_is_value_error():
    assert issubclass(CaptureFormatError, ValueError)
