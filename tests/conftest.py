"""Shared pytest fixtures for ratexpr tests."""

from pathlib import Path

import pytest

from ratexpr.core.config import LOCALE_ENV_VAR, LOG_LEVEL_ENV_VAR
from ratexpr.core.ir import Group, Number, Operator


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty directory with no ratexpr environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def corpora_dir() -> Path:
    """Return path to the expression corpora directory."""
    return Path(__file__).parent / "corpora"


@pytest.fixture
def precedence_tree() -> Group:
    """Hand-built tree for ``3 - 1 * 2``."""
    return Group(
        operands=(Number(value=3), Number(value=1), Number(value=2)),
        operators=(Operator.SUB, Operator.MUL),
    )
