"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ratexpr.cli import app
from ratexpr.cli.calc import evaluate_line
from ratexpr.core.config import CONFIG_FILENAME, Locale


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


class TestEvalCommand:
    def test_prints_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1+2*3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "7"

    def test_prints_fraction(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(1 + 2) / 4"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "3/4"

    def test_evaluation_error_exits_nonzero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1/0"])
        assert result.exit_code == 1
        assert "division by zero" in result.output

    def test_parse_error_shows_caret(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(0+)"])
        assert result.exit_code == 1
        assert "   ^ expected an expression" in result.output

    def test_locale_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1/0", "--locale", "ja"])
        assert result.exit_code == 1
        assert "途中計算にゼロ除算が発生しました。" in result.output

    def test_locale_from_config_file(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        (isolated_config / CONFIG_FILENAME).write_text('[ratexpr]\nlocale = "ja"\n')
        result = cli_runner.invoke(app, ["eval", "(1"])
        assert result.exit_code == 1
        assert "括弧が閉じられていません。" in result.output

    def test_invalid_config_file(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        (isolated_config / CONFIG_FILENAME).write_text("[ratexpr\n")
        result = cli_runner.invoke(app, ["eval", "1"])
        assert result.exit_code == 2
        assert "Invalid config file" in result.output


class TestParseCommand:
    def test_prints_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "1+2"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "operands": [{"value": 1}, {"value": 2}],
            "operators": ["+"],
        }

    def test_does_not_evaluate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "1/0"])
        assert result.exit_code == 0

    def test_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "0)"])
        assert result.exit_code == 1
        assert " ^ no matching opening parenthesis" in result.output


class TestReplCommand:
    def test_evaluates_each_line_until_eof(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            app, ["repl", "--prompt", ""], input="1+2*3\n(0+)\n1/0\n1/3+1/6\n"
        )
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert "7" in lines
        assert "   ^ expected an expression" in lines
        assert "division by zero in an intermediate result" in lines
        assert "1/2" in lines

    def test_caret_accounts_for_prompt(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--prompt", "> "], input="1+\n")
        assert result.exit_code == 0
        assert "    ^ expected an expression" in result.stdout

    def test_empty_input_ends_cleanly(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="")
        assert result.exit_code == 0


class TestEvaluateLine:
    def test_success(self) -> None:
        assert evaluate_line("2/4") == (True, "1/2")

    def test_failure_is_rendered(self) -> None:
        assert evaluate_line("1 2", Locale.JA) == (False, "  ^ 演算子または閉じ括弧が期待されます。")

    def test_deep_nesting_and_padded_literal(self) -> None:
        assert evaluate_line("(" * 1000 + "3" + ")" * 1000) == (True, "3")
        assert evaluate_line("0" * 5000 + "1") == (True, "1")


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "ratexpr" in result.stdout
