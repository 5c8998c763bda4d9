"""
ratexpr CLI package.

- calc.py: repl, eval and parse commands
- diagnostics.py: localized error rendering with caret placement
- utils.py: version, logging and config helpers
"""

import typer

from ratexpr.cli.calc import eval_command, parse_command, repl_command
from ratexpr.cli.utils import get_version, version_callback

app = typer.Typer(
    name="ratexpr",
    help="Exact rational calculator for + - * / over unsigned 64-bit integers",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """ratexpr CLI main callback for global options."""
    pass


app.command(name="repl")(repl_command)
app.command(name="eval")(eval_command)
app.command(name="parse")(parse_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "get_version", "main", "version_callback"]
