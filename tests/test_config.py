# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from page_scout.config import MARKDOWN_EXCLUDED_TAGS, ExtractorConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("max_depth: 4\nhtml_parser: html.parser", ".yaml", None),
        (json.dumps({"max_depth": 4, "html_parser": "html.parser"}), ".json", None),
        ("max_depth: -1", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("html_parser: html5lib", ".yml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("max_depth = 3", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ExtractorConfig)
        assert cfg.max_depth == 4
        assert cfg.html_parser == "html.parser"


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == ExtractorConfig()
    assert cfg.max_depth == 10
    assert cfg.markdown_excluded_tags == MARKDOWN_EXCLUDED_TAGS


def test_load_config_uses_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_depth: 7\n", encoding="utf-8")
    assert load_config(None).max_depth == 7


def test_missing_explicit_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_tag_sets_are_lowercased(tmp_path):
    cfg_path = write_file(tmp_path, "snapshot_excluded_tags: [SCRIPT, ' Style ']", ".yaml")
    assert load_config(cfg_path).snapshot_excluded_tags == frozenset({"script", "style"})


def test_config_is_frozen():
    cfg = ExtractorConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 3
