"""page_scout.serialize: JSON encoding of extraction results."""

from __future__ import annotations

import json
from typing import Any

from page_scout.errors import NonSerializableResultError
from page_scout.logger import logger

__all__ = ["to_plain", "serialize"]


def to_plain(value: Any) -> Any:
    """Convert result objects (anything with ``to_dict``) into plain data."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def serialize(value: Any, *, pretty: bool = False) -> str:
    """Encode *value* as JSON text.

    NaN and infinite numbers are rejected, since the result has to survive any
    JSON consumer on the other side of the boundary.
    """
    try:
        return json.dumps(
            to_plain(value), ensure_ascii=False, allow_nan=False, indent=2 if pretty else None
        )
    except (TypeError, ValueError) as exc:
        logger.error("Result is not serializable: %s", exc)
        raise NonSerializableResultError(str(exc)) from exc
