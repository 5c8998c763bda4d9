"""
ratexpr CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
import tomllib
from dataclasses import replace
from pathlib import Path

import typer

from ratexpr.core.config import CalculatorConfig, load_config, parse_locale

__version__ = "0.1.0"


def get_version() -> str:
    """Get ratexpr version from package metadata."""
    try:
        from importlib.metadata import version

        return version("ratexpr")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"ratexpr {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def resolve_config(config_path: Path | None, locale: str | None) -> CalculatorConfig:
    """Load config, apply a --locale flag over it, and set up logging."""
    try:
        config = load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        typer.echo(f"Invalid config file: {e}", err=True)
        raise typer.Exit(code=2)
    if locale:
        config = replace(config, locale=parse_locale(locale))
    configure_logging(config.log_level)
    return config


__all__ = [
    "configure_logging",
    "get_version",
    "resolve_config",
    "version_callback",
]
