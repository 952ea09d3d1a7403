# File: page_scout/report/__init__.py
"""page_scout.report: writing extraction results to files, used by the CLI and tests."""

from .json_report import render_json

__all__ = ["render_json"]
