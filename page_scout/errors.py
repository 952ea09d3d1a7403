"""page_scout.errors: exception types raised at the edges of the extraction engine.

The extraction pipelines themselves degrade instead of failing (missing
attributes become empty strings, a missing ``<body>`` becomes a fallback node).
Only the conditions below surface as errors.
"""
from __future__ import annotations

__all__ = [
    "PageScoutError",
    "NoDocumentError",
    "NonSerializableResultError",
    "CaptureFormatError",
]


class PageScoutError(Exception):
    """Base class for all PageScout errors."""


class NoDocumentError(PageScoutError):
    """The invocation context has no accessible document."""


class NonSerializableResultError(PageScoutError):
    """A produced result could not be serialized to JSON."""


class CaptureFormatError(PageScoutError, ValueError):
    """A page capture does not match the expected schema."""
