# File: page_scout/engine.py
"""page_scout.engine: orchestration layer that loads a page source and runs either pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from page_scout.config import ExtractorConfig
from page_scout.dom.capture import load_capture
from page_scout.dom.html import parse_html
from page_scout.dom.models import ElementNode
from page_scout.dom.page import PageCapture
from page_scout.dom.snapshot import extract_snapshot
from page_scout.errors import NoDocumentError
from page_scout.logger import logger
from page_scout.markdown.models import ContentExtractionResult
from page_scout.markdown.renderer import convert_to_markdown
from page_scout.serialize import serialize

__all__ = ["Engine"]

_HTML_SUFFIXES = (".html", ".htm", ".xhtml")


class Engine:
    """Facade for the CLI and tests: load a source, extract, serialize."""

    def __init__(self, config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()

    # Sources ---------------------------------------------------------------
    def from_html(self, markup: str | bytes, url: str = "") -> PageCapture:
        return parse_html(markup, url=url, parser=self.config.html_parser)

    def load_source(self, path: Union[str, Path], url: Optional[str] = None) -> PageCapture:
        """Read an HTML file or a JSON page capture.

        *url* overrides the address recorded in the source (HTML files default
        to their ``file://`` URI).
        """
        p = Path(path).expanduser()
        if not p.is_file():
            logger.error("Source not found: %s", p)
            raise FileNotFoundError(f"Source file not found: {p}")

        raw = p.read_bytes()
        if not raw.strip():
            raise NoDocumentError(f"Source {p} is empty")

        if p.suffix.lower() in _HTML_SUFFIXES:
            capture = self.from_html(raw, url=url if url is not None else p.resolve().as_uri())
        elif p.suffix.lower() == ".json":
            capture = load_capture(raw, url=url)
        else:
            raise ValueError(f"Unsupported source format: {p.suffix or '<none>'}")
        logger.info("Loaded %s (%d nodes)", p, len(capture.tree))
        return capture

    # Pipelines -------------------------------------------------------------
    def snapshot(self, capture: Optional[PageCapture], max_depth: Optional[int] = None) -> ElementNode:
        if capture is None:
            raise NoDocumentError("No document to snapshot")
        depth = self.config.max_depth if max_depth is None else max_depth
        return extract_snapshot(capture, max_depth=depth, excluded_tags=self.config.snapshot_excluded_tags)

    def markdown(self, capture: Optional[PageCapture]) -> ContentExtractionResult:
        if capture is None:
            raise NoDocumentError("No document to render")
        return convert_to_markdown(
            capture,
            excluded_tags=self.config.markdown_excluded_tags,
            flatten_skip_tags=self.config.flatten_skip_tags,
        )

    def snapshot_json(self, capture: Optional[PageCapture], max_depth: Optional[int] = None) -> str:
        return serialize(self.snapshot(capture, max_depth), pretty=self.config.pretty)

    def markdown_json(self, capture: Optional[PageCapture]) -> str:
        return serialize(self.markdown(capture), pretty=self.config.pretty)
