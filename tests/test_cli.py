"""CLI integration tests."""

import json

from click.testing import CliRunner

from loop_errors.cli import main
from loop_errors.errors import loop_promise_caught_error


class TestCLIBasicOperation:
    """Tests for basic CLI functionality."""

    def test_cli_renders_message_from_stdin(self):
        """CLI renders the message for error text on stdin."""
        runner = CliRunner()

        result = runner.invoke(main, ["INCREMENT"], input="boom\n")

        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert result.output == loop_promise_caught_error("INCREMENT", "boom")

    def test_cli_accepts_empty_error_text(self):
        runner = CliRunner()

        result = runner.invoke(main, ["RESET"], input="")

        assert result.exit_code == 0
        assert "action of type RESET" in result.output

    def test_cli_requires_action_type(self):
        runner = CliRunner()

        result = runner.invoke(main, [], input="boom")

        assert result.exit_code != 0


class TestCLIOptions:
    """Tests for CLI option handling."""

    def test_cli_json_output(self):
        runner = CliRunner()

        result = runner.invoke(main, ["FETCH", "--json"], input="network down\n")

        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["action_type"] == "FETCH"
        assert output["error_type"] == "str"
        assert output["error"] == "network down"
        assert output["message"] == loop_promise_caught_error("FETCH", "network down")

    def test_cli_reads_input_file_and_writes_output_file(self, tmp_path):
        error_file = tmp_path / "error.txt"
        error_file.write_text("disk full\n", encoding="utf-8")
        out_file = tmp_path / "out.txt"
        runner = CliRunner()

        result = runner.invoke(main, ["SAVE", "-i", str(error_file), "-o", str(out_file)])

        assert result.exit_code == 0
        assert out_file.read_text(encoding="utf-8") == loop_promise_caught_error("SAVE", "disk full")

    def test_cli_missing_input_file(self, tmp_path):
        runner = CliRunner()

        result = runner.invoke(main, ["SAVE", "-i", str(tmp_path / "nope.txt")])

        assert result.exit_code != 0

    def test_cli_verbose_flag(self):
        runner = CliRunner()

        result = runner.invoke(main, ["LOAD", "--verbose"], input="boom")

        assert result.exit_code == 0
        assert "loop Promises must not throw!" in result.output
