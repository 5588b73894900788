"""
Tests for walk/count CLI commands.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json

import pytest
from click.testing import CliRunner

from visit_parents.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestWalkCommand:
    """Tests for walk command."""

    def test_walk_text(self, runner, tree_file):
        result = runner.invoke(cli, ["walk", str(tree_file)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "root"
        assert lines[1] == "  paragraph"
        assert lines[2] == "    text('Some ')"
        assert lines[4] == "      text('emphasis')"
        assert len(lines) == 11

    def test_walk_json_with_selector(self, runner, tree_file):
        result = runner.invoke(
            cli, ["walk", str(tree_file), "--test", "strong, inlineCode", "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        records = json.loads(result.output)
        assert [r["type"] for r in records] == ["strong", "inlineCode"]
        assert records[0]["path"] == ["root", "paragraph"]
        assert records[0]["depth"] == 2
        assert records[1]["label"] == "inlineCode('code')"

    def test_walk_reverse(self, runner, tree_file):
        result = runner.invoke(
            cli, ["walk", str(tree_file), "--reverse", "-t", "text", "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        labels = [r["label"] for r in json.loads(result.output)]
        assert labels[0] == "text('.')"
        assert labels[-1] == "text('Some ')"

    def test_walk_max_depth(self, runner, tree_file):
        result = runner.invoke(cli, ["walk", str(tree_file), "--max-depth", "2"])
        assert result.exit_code == 0, result.output
        assert "emphasis" in result.output
        assert "text('emphasis')" not in result.output
        assert len(result.output.splitlines()) == 9

    def test_walk_config_file(self, runner, tree_file, tmp_path):
        config = tmp_path / "walk.json"
        config.write_text(
            json.dumps({"max_depth": 1, "output_format": "json"}), encoding="utf-8"
        )
        result = runner.invoke(cli, ["walk", str(tree_file), "--config", str(config)])
        assert result.exit_code == 0, result.output
        assert [r["type"] for r in json.loads(result.output)] == ["root", "paragraph"]

    def test_cli_option_overrides_config(self, runner, tree_file, tmp_path):
        config = tmp_path / "walk.json"
        config.write_text(json.dumps({"output_format": "json"}), encoding="utf-8")
        result = runner.invoke(
            cli,
            ["walk", str(tree_file), "-c", str(config), "--format", "text", "-t", "root"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "root"

    def test_invalid_config(self, runner, tree_file, tmp_path):
        config = tmp_path / "walk.json"
        config.write_text(json.dumps({"max_depth": -1}), encoding="utf-8")
        result = runner.invoke(cli, ["walk", str(tree_file), "-c", str(config)])
        assert result.exit_code != 0
        assert "Validation error" in result.output

    def test_negative_max_depth_option(self, runner, tree_file):
        result = runner.invoke(cli, ["walk", str(tree_file), "--max-depth=-1"])
        assert result.exit_code != 0
        assert "Invalid option" in result.output

    def test_invalid_selector(self, runner, tree_file):
        result = runner.invoke(cli, ["walk", str(tree_file), "-t", "heading["])
        assert result.exit_code != 0
        assert "Invalid selector" in result.output

    def test_invalid_json_tree(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(cli, ["walk", str(path)])
        assert result.exit_code != 0
        assert "Invalid JSON" in result.output

    def test_tree_without_type(self, runner, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        result = runner.invoke(cli, ["walk", str(path)])
        assert result.exit_code != 0
        assert "'type' field" in result.output


class TestCountCommand:
    """Tests for count command."""

    def test_count_text(self, runner, tree_file):
        result = runner.invoke(cli, ["count", str(tree_file)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "text\t6"
        assert "inlineCode\t1" in lines

    def test_count_json_with_selector(self, runner, tree_file):
        result = runner.invoke(
            cli, ["count", str(tree_file), "-t", "[value=\".\"], emphasis", "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"text": 1, "emphasis": 1}

    def test_count_max_depth(self, runner, tree_file):
        result = runner.invoke(cli, ["count", str(tree_file), "--max-depth", "2"])
        assert result.exit_code == 0, result.output
        assert "text\t4" in result.output.splitlines()


def test_unknown_command(runner):
    result = runner.invoke(cli, ["nope"])
    assert result.exit_code != 0


def test_lists_commands(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "walk" in result.output
    assert "count" in result.output
