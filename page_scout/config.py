"""
Loading and validation of the PageScout extraction settings.
Pydantic describes the schema and validates the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, FrozenSet, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

SNAPSHOT_EXCLUDED_TAGS: FrozenSet[str] = frozenset({"script", "style", "noscript", "meta", "link"})
MARKDOWN_EXCLUDED_TAGS: FrozenSet[str] = SNAPSHOT_EXCLUDED_TAGS | {"iframe"}
FLATTEN_SKIP_TAGS: FrozenSet[str] = frozenset({"script", "style", "noscript"})
DEFAULT_MAX_DEPTH = 10


class ExtractorConfig(BaseModel):
    """Settings shared by the snapshot extractor and the Markdown renderer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH, ge=0, description="Deepest element level kept in a snapshot."
    )
    html_parser: Literal["lxml", "html.parser"] = Field(
        "lxml", description="BeautifulSoup tree builder used for raw HTML."
    )
    snapshot_excluded_tags: FrozenSet[str] = Field(
        SNAPSHOT_EXCLUDED_TAGS, description="Tags dropped (with subtrees) from snapshots."
    )
    markdown_excluded_tags: FrozenSet[str] = Field(
        MARKDOWN_EXCLUDED_TAGS, description="Tags that render as an empty string."
    )
    flatten_skip_tags: FrozenSet[str] = Field(
        FLATTEN_SKIP_TAGS, description="Subtrees ignored when flattening text."
    )
    pretty: bool = Field(False, description="Indent JSON output.")

    @field_validator(
        "snapshot_excluded_tags", "markdown_excluded_tags", "flatten_skip_tags", mode="before"
    )
    def _lowercase_tags(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(str(tag).strip().lower() for tag in v)
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ExtractorConfig:
    """
    Read YAML or JSON and return a validated ExtractorConfig.
    With *path* ``None`` the default file is used when present, otherwise the
    built-in defaults. An explicit path that does not exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ExtractorConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ExtractorConfig(**data)


__all__ = [
    "ExtractorConfig",
    "load_config",
    "SNAPSHOT_EXCLUDED_TAGS",
    "MARKDOWN_EXCLUDED_TAGS",
    "FLATTEN_SKIP_TAGS",
    "DEFAULT_MAX_DEPTH",
]
