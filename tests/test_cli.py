"""Tests for the CLI (`page_scout.cli`) using click.testing.CliRunner.
Cover the `snapshot`, `markdown`, `config` commands, `--version` and error handling.
"""
import json

from click.testing import CliRunner
from page_scout.cli import cli


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "PageScout" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "settings.json"
    cfg_file.write_text(json.dumps({"max_depth": 3, "pretty": True}), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["max_depth"] == 3
    assert data["pretty"] is True


def test_bad_config_exits_with_error(tmp_path):
    cfg_file = tmp_path / "settings.yaml"
    cfg_file.write_text("max_depth: -5", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_snapshot_stdout(capture_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["snapshot", str(capture_file), "--max-depth", "1"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["tag"] == "body"
    assert data["box"]["width"] == 800
    hidden = data["children"][1]
    assert hidden["visible"] is False
    assert hidden["children"] == []  # span sits at depth 2


def test_snapshot_json_file(tmp_path, capture_file):
    out = tmp_path / "snap.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["snapshot", str(capture_file), "--json", str(out)])
    assert result.exit_code == 0
    assert "JSON report" in result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["children"][1]["children"][0]["tag"] == "span"


def test_markdown_stdout(html_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["markdown", str(html_file), "--url", "https://e.test/", "--pretty"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["url"] == "https://e.test/"
    assert data["content"].startswith("# Main Title")


def test_markdown_document(html_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["markdown", str(html_file), "--document"])
    assert result.exit_code == 0
    assert result.stdout.startswith("# Sample Page\n\n# Main Title")


def test_unsupported_source(tmp_path):
    source = tmp_path / "page.txt"
    source.write_text("<p>x</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["markdown", str(source)])
    assert result.exit_code == 1
    assert "Unsupported source format" in result.output


def test_capture_without_document(tmp_path):
    source = tmp_path / "capture.json"
    source.write_text(json.dumps({"title": "x", "document": None}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["snapshot", str(source)])
    assert result.exit_code == 1
    assert "No document" in result.output
