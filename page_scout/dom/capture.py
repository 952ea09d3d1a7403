"""page_scout.dom.capture: loading serialized page captures.

A capture is what a browser-side dump script (or a DevTools snapshot) hands
back across the automation boundary: the document as nested JSON nodes with
the computed style and the bounding rect already resolved per element.

    {"title": "...", "url": "...",
     "document": {"type": "element", "tag": "html", "attributes": {...},
                  "style": {"display": "block", "visibility": "visible", "opacity": "1"},
                  "rect": {"x": 0, "y": 0, "width": 800, "height": 600},
                  "children": [{"type": "text", "text": "..."}, ...]}}
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from page_scout.dom.models import BoundingBox
from page_scout.dom.oracles import ComputedStyle, StaticGeometryOracle, StaticStyleOracle
from page_scout.dom.page import PageCapture
from page_scout.dom.tree import TreeBuilder
from page_scout.errors import CaptureFormatError, NoDocumentError
from page_scout.logger import logger


class CaptureStyle(BaseModel):
    display: str = "block"
    visibility: str = "visible"
    opacity: str = "1"

    @field_validator("display", "visibility", "opacity", mode="before")
    def _as_text(cls, v: Any) -> Any:
        # opacity frequently arrives as a number
        if isinstance(v, (int, float)):
            return format(v, "g")
        return v


class CaptureRect(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class CaptureNode(BaseModel):
    """One serialized node; ``tag``/``attributes``/``style``/``rect`` only matter for elements."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["element", "text", "comment"] = "element"
    tag: str = ""
    attributes: Dict[str, str] = Field(default_factory=dict)
    text: str = ""
    style: Optional[CaptureStyle] = None
    rect: Optional[CaptureRect] = None
    children: List["CaptureNode"] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    def _stringify_attributes(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(k): "" if val is None else str(val) for k, val in v.items()}
        return v


CaptureNode.model_rebuild()


class PageCaptureModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    url: str = ""
    document: Optional[CaptureNode] = None


def _decode(data: Union[Mapping[str, Any], str, bytes]) -> Any:
    if isinstance(data, (str, bytes)):
        try:
            return json.loads(data)
        except json.JSONDecodeError as exc:
            raise CaptureFormatError(f"Capture is not valid JSON: {exc}") from exc
    return data


def load_capture(
    data: Union[Mapping[str, Any], str, bytes], url: Optional[str] = None
) -> PageCapture:
    """Validate a capture and build the tree plus its style / geometry oracles.

    *url* overrides the address recorded in the capture.

    Raises :class:`NoDocumentError` when the capture carries no document and
    :class:`CaptureFormatError` when it does not match the schema.
    """
    raw = _decode(data)
    if not isinstance(raw, Mapping):
        raise CaptureFormatError(f"Capture must be a JSON object, got {type(raw).__name__}")
    try:
        model = PageCaptureModel.model_validate(raw)
    except ValidationError as exc:
        raise CaptureFormatError(f"Invalid page capture: {exc}") from exc

    if model.document is None:
        logger.error("Capture for %r carries no document", model.url)
        raise NoDocumentError(f"No document in capture for {model.url or '<unknown url>'}")

    builder = TreeBuilder()
    styles: Dict[int, ComputedStyle] = {}
    boxes: Dict[int, BoundingBox] = {}

    stack: List[tuple[CaptureNode, int]] = [(model.document, builder.document)]
    while stack:
        item, parent = stack.pop()
        if item.type == "text":
            builder.add_text(parent, item.text)
            continue
        if item.type == "comment":
            builder.add_comment(parent, item.text)
            continue
        if not item.tag:
            raise CaptureFormatError("Element node without a tag in capture")
        node_id = builder.add_element(parent, item.tag, item.attributes)
        if item.style is not None:
            styles[node_id] = ComputedStyle(**item.style.model_dump())
        if item.rect is not None:
            boxes[node_id] = BoundingBox(**item.rect.model_dump())
        stack.extend((child, node_id) for child in reversed(item.children))

    tree = builder.build(title=model.title, url=model.url if url is None else url)
    logger.debug("Loaded capture of %s with %d nodes", model.url or "<unknown url>", len(tree))
    return PageCapture(tree=tree, style=StaticStyleOracle(styles), geometry=StaticGeometryOracle(boxes))


__all__ = ["CaptureNode", "PageCaptureModel", "load_capture"]
