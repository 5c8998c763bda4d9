"""
Calculator configuration for ratexpr.

Settings come from three layers, later ones winning:
1. Defaults on CalculatorConfig
2. The ``[ratexpr]`` table of a TOML file (``ratexpr.toml`` in the working
   directory when no path is given)
3. Environment variables RATEXPR_LOCALE and RATEXPR_LOG_LEVEL

CLI flags override all of these at the command level.

Example ratexpr.toml:

    [ratexpr]
    locale = "ja"
    prompt = "calc> "
    log_level = "DEBUG"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "ratexpr.toml"
LOCALE_ENV_VAR = "RATEXPR_LOCALE"
LOG_LEVEL_ENV_VAR = "RATEXPR_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Locale(StrEnum):
    """Languages available for diagnostics."""

    EN = "en"
    JA = "ja"


_DEFAULT_LOCALE = Locale.EN


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings for the interactive calculator."""

    locale: Locale = _DEFAULT_LOCALE
    prompt: str = "> "
    log_level: str = "WARNING"


def parse_locale(value: str) -> Locale:
    """Map a locale string to a Locale.

    Accepts region-qualified forms such as ``ja_JP.UTF-8``. Unknown values
    fall back to English with a warning.
    """
    normalized = value.strip().lower().replace("-", "_").split(".")[0].split("_")[0]
    try:
        return Locale(normalized)
    except ValueError:
        logger.warning(
            "Unknown locale '%s'. Valid values: %s. Falling back to '%s'.",
            value,
            ", ".join(loc.value for loc in Locale),
            _DEFAULT_LOCALE.value,
        )
        return _DEFAULT_LOCALE


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Unknown log level '%s'. Falling back to 'WARNING'.", value)
        return "WARNING"
    return level


def load_config(path: Path | None = None) -> CalculatorConfig:
    """Load configuration from TOML and the environment.

    Args:
        path: Explicit config file. Must exist when given. When None,
            ``ratexpr.toml`` in the working directory is used if present.

    Returns:
        The merged configuration.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    config = CalculatorConfig()

    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        path = candidate if candidate.exists() else None

    if path is not None:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        section = data.get("ratexpr", {})
        logger.debug("Loaded config from %s: %s", path, section)
        config = replace(
            config,
            locale=parse_locale(section["locale"]) if "locale" in section else config.locale,
            prompt=section.get("prompt", config.prompt),
            log_level=(
                parse_log_level(section["log_level"])
                if "log_level" in section
                else config.log_level
            ),
        )

    env_locale = os.environ.get(LOCALE_ENV_VAR, "")
    if env_locale.strip():
        config = replace(config, locale=parse_locale(env_locale))

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if env_level.strip():
        config = replace(config, log_level=parse_log_level(env_level))

    return config
