"""
Calculator CLI commands.

- repl:  read lines until end of input, printing each result or diagnostic
- eval:  evaluate one expression given on the command line
- parse: print the expression tree of one expression as JSON
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.cells import cell_len
from rich.console import Console

from ratexpr.cli.diagnostics import format_value, render_error
from ratexpr.cli.utils import resolve_config
from ratexpr.core.config import Locale
from ratexpr.core.errors import ExpressionParseError, RatexprError
from ratexpr.core.expression_lang import calculate, parse

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_LOCALE_HELP = "Diagnostic language: en, ja (default: config or RATEXPR_LOCALE)"
_CONFIG_HELP = "Config file (default: ./ratexpr.toml if present)"


def evaluate_line(line: str, locale: Locale = Locale.EN, margin: int = 0) -> tuple[bool, str]:
    """Evaluate one input line for display.

    Args:
        line: The input line.
        locale: Language for diagnostics.
        margin: Caret indent for input echoed after a prompt.

    Returns:
        (ok, text): the formatted value, or the rendered diagnostic.
    """
    try:
        return True, format_value(calculate(line))
    except RatexprError as e:
        return False, render_error(line, e, locale, margin)


def repl_command(
    locale: str | None = typer.Option(None, "--locale", "-l", help=_LOCALE_HELP),
    prompt: str | None = typer.Option(None, "--prompt", "-p", help="Input prompt"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help=_CONFIG_HELP
    ),
) -> None:
    """Evaluate expressions line by line until end of input (Ctrl-D)."""
    config = resolve_config(config_path, locale)
    prompt_text = config.prompt if prompt is None else prompt
    margin = cell_len(prompt_text)

    while True:
        try:
            line = console.input(prompt_text, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        ok, text = evaluate_line(line, config.locale, margin)
        console.print(text, style=None if ok else "red", markup=False, soft_wrap=True)


def eval_command(
    expression: str = typer.Argument(..., help="Expression, e.g. '(1 + 2) / 3'"),
    locale: str | None = typer.Option(None, "--locale", "-l", help=_LOCALE_HELP),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help=_CONFIG_HELP
    ),
) -> None:
    """Evaluate a single expression and print the exact result."""
    config = resolve_config(config_path, locale)

    ok, text = evaluate_line(expression, config.locale)
    if not ok:
        err_console.print(expression, markup=False, soft_wrap=True)
        err_console.print(text, style="red", markup=False, soft_wrap=True)
        raise typer.Exit(code=1)

    console.print(text, markup=False, soft_wrap=True)


def parse_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    indent: int | None = typer.Option(2, "--indent", "-i", help="JSON indentation"),
    locale: str | None = typer.Option(None, "--locale", "-l", help=_LOCALE_HELP),
) -> None:
    """Print the expression tree as JSON without evaluating it."""
    config = resolve_config(None, locale)

    try:
        tree = parse(expression)
    except ExpressionParseError as e:
        err_console.print(expression, markup=False, soft_wrap=True)
        err_console.print(render_error(expression, e, config.locale), style="red", markup=False)
        raise typer.Exit(code=1)

    console.print(tree.model_dump_json(indent=indent), markup=False, soft_wrap=True)
