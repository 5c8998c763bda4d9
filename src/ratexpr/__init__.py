"""
ratexpr - exact rational arithmetic over one-line expressions.

Parses ``+ - * /`` expressions over unsigned 64-bit integers with
parentheses and standard precedence, and evaluates them to exact, reduced
fractions with overflow and division-by-zero detection.

Usage:
    from ratexpr import calculate, parse

    str(calculate("1/2 + 1/3"))   # "5/6"
    parse("(1 + 2) * 3").eval()   # Rational 9
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    EvaluationError,
    EvaluationErrorKind,
    ExpectedExprError,
    ExpectedOpError,
    ExpressionParseError,
    InvalidCloseParenthesisError,
    LiteralOverflowError,
    ParseErrorKind,
    RatexprError,
    UnclosedParenthesesError,
)
from .core.expression_lang import calculate, evaluate, parse
from .core.ir import Expr, Group, Number, Operator, Rational


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("ratexpr")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "calculate",
    "evaluate",
    "parse",
    "Expr",
    "Group",
    "Number",
    "Operator",
    "Rational",
    "RatexprError",
    "ExpressionParseError",
    "ParseErrorKind",
    "ExpectedExprError",
    "ExpectedOpError",
    "InvalidCloseParenthesisError",
    "UnclosedParenthesesError",
    "LiteralOverflowError",
    "EvaluationError",
    "EvaluationErrorKind",
    "ArithmeticOverflowError",
    "DivisionByZeroError",
]
