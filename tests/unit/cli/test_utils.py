"""Unit tests for CLI utilities."""

import json

import pytest
from click.testing import CliRunner

from jsontree.cli.main import main
from jsontree.cli.renderers import JsonRenderer
from jsontree.cli.utils import read_input
from jsontree.parsing.recovery import ParseError


class TestReadInput:
    def test_reads_file(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text('{"a": 1}')

        assert read_input(str(f), 1024) == '{"a": 1}'

    def test_missing_file(self, tmp_path, capsys):
        assert read_input(str(tmp_path / "missing.json"), 1024) is None
        captured = capsys.readouterr()
        assert "Input file not found" in captured.err

    def test_directory(self, tmp_path, capsys):
        assert read_input(str(tmp_path), 1024) is None
        assert "Input is a directory" in capsys.readouterr().err

    def test_too_large(self, tmp_path, capsys):
        f = tmp_path / "big.json"
        f.write_text("[" + "1," * 100 + "1]")

        assert read_input(str(f), 10) is None
        assert "Input too large" in capsys.readouterr().err


class TestJsonRenderer:
    def test_success_envelope(self, capsys):
        JsonRenderer("demo").render_success({"x": 1})
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"meta": {"command": "demo", "status": "success"}, "data": {"x": 1}}

    def test_error_envelope(self, capsys):
        JsonRenderer("demo").render_error(ParseError(message="bad", line=2), line=2)
        payload = json.loads(capsys.readouterr().out)
        assert payload["meta"]["status"] == "error"
        assert payload["error"] == {"message": "bad", "type": "ParseError", "line": 2}


class TestMain:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_help_lists_commands(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ("generate", "search", "repair"):
            assert command in result.output

    def test_dispatches_to_subcommand(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["search", "a", "--json"], input='{"a": 1}')

            assert result.exit_code == 0
            assert json.loads(result.output)["data"]["result"]["found"] is True


class TestReadStdin:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_invalid_utf8_reports_error(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["generate", "--json"], input=b'{"a": "\xff"}')

            assert result.exit_code == 1
            assert isinstance(result.exception, SystemExit)
            assert "Failed to read stdin" in result.output

    def test_utf8_input_accepted(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["generate", "--json"], input='{"city": "Zürich"}'.encode("utf-8"))

            assert result.exit_code == 0
            nodes = json.loads(result.output)["data"]["nodes"]
            assert nodes[1]["label"] == "city: Zürich"

    def test_too_large(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(
                main, ["generate"], input="[" + "1," * 100 + "1]",
                env={"JSONTREE_MAX_INPUT_BYTES": "10"},
            )

            assert result.exit_code == 1
            assert "Input too large" in result.output
