"""
Unit tests for the 'generate' command.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from jsontree.cli.commands.generate import generate

BROKEN = '{"items": ["name": "item2"]}'


class TestGenerateCommand:

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_writes_graph_file(self, runner):
        with runner.isolated_filesystem():
            Path("data.json").write_text('{"user": {"name": "Ada"}}')

            result = runner.invoke(generate, ["data.json", "-o", "out.json"])

            assert result.exit_code == 0
            assert "Generated: out.json" in result.output
            assert "Nodes: 3" in result.output
            assert "Edges: 2" in result.output

            data = json.loads(Path("out.json").read_text())
            assert [n["path"] for n in data["nodes"]] == ["$", "$.user", "$.user.name"]
            assert data["nodes"][2]["label"] == "name: Ada"
            assert data["edges"][0]["id"] == "e_n_1_n_2"
            assert data["sanitized"] is False
            assert data["viewport"]["action"] == "fit_view"

    def test_default_output_name(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, [], input="[1]")

            assert result.exit_code == 0
            assert Path("graph.json").exists()

    def test_json_envelope_from_stdin(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, ["--json"], input='{"a": 1}')

            assert result.exit_code == 0
            payload = json.loads(result.output)
            assert payload["meta"] == {"command": "generate", "status": "success"}
            assert payload["data"]["stats"]["total_nodes"] == 2
            assert "advisory" not in payload["data"]

    def test_json_envelope_reports_sanitized(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, ["--json"], input=BROKEN)

            payload = json.loads(result.output)
            assert payload["data"]["sanitized"] is True
            assert payload["data"]["advisory"] == "Input was auto-sanitized (heuristic)."

    def test_invalid_json(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, [], input='{"a": }')

            assert result.exit_code == 1
            assert "Invalid JSON" in result.output
            assert not Path("graph.json").exists()

    def test_invalid_json_envelope(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, ["--json"], input='{"a": }')

            assert result.exit_code == 1
            payload = json.loads(result.output)
            assert payload["meta"]["status"] == "error"
            assert payload["error"]["type"] == "ParseError"
            assert payload["error"]["line"] == 1
            assert payload["error"]["column"] == 7

    def test_sanitized_warning(self, runner):
        with runner.isolated_filesystem():
            Path("data.json").write_text(BROKEN)

            result = runner.invoke(generate, ["data.json"])

            assert result.exit_code == 0
            assert "auto-sanitized" in result.output
            # source untouched without --write-back
            assert Path("data.json").read_text() == BROKEN

    def test_write_back(self, runner):
        with runner.isolated_filesystem():
            Path("data.json").write_text(BROKEN)

            result = runner.invoke(generate, ["data.json", "--write-back"])

            assert result.exit_code == 0
            assert Path("data.json").read_text() == '{"items": [{"name": "item2"}]}'

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(generate, ["nope.json"])

            assert result.exit_code == 1
            assert "Input file not found" in result.output
