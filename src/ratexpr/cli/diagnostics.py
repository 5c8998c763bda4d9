"""
Human-readable diagnostics for ratexpr errors.

Turns the typed errors of ``ratexpr.core.errors`` into localized one-line
messages. Positioned errors get a caret under the failure site:

    > 1 + * 2
        ^ expected an expression

The caret column is the terminal cell width of the text before the byte
offset, so wide (CJK) characters shift it by two cells.
"""

from __future__ import annotations

from rich.cells import cell_len

from ratexpr.core.config import Locale
from ratexpr.core.errors import (
    EvaluationError,
    EvaluationErrorKind,
    ExpressionParseError,
    LiteralOverflowError,
    ParseErrorKind,
    RatexprError,
)
from ratexpr.core.ir.rational import Rational

# =============================================================================
# Message catalogs
# =============================================================================

PARSE_MESSAGES: dict[Locale, dict[ParseErrorKind, str]] = {
    Locale.EN: {
        ParseErrorKind.EXPECTED_EXPR: "expected an expression",
        ParseErrorKind.EXPECTED_OP: "expected an operator or a closing parenthesis",
        ParseErrorKind.INVALID_CLOSE_PARENTHESIS: "no matching opening parenthesis",
        ParseErrorKind.UNCLOSED_PARENTHESES: "parenthesis is not closed",
        ParseErrorKind.OVERFLOW: "{literal} is too large to compute",
    },
    Locale.JA: {
        ParseErrorKind.EXPECTED_EXPR: "式が期待されます。",
        ParseErrorKind.EXPECTED_OP: "演算子または閉じ括弧が期待されます。",
        ParseErrorKind.INVALID_CLOSE_PARENTHESIS: "対応する開き括弧がありません。",
        ParseErrorKind.UNCLOSED_PARENTHESES: "括弧が閉じられていません。",
        ParseErrorKind.OVERFLOW: "{literal}は大きすぎて計算不能です。",
    },
}

EVALUATION_MESSAGES: dict[Locale, dict[EvaluationErrorKind, str]] = {
    Locale.EN: {
        EvaluationErrorKind.OVERFLOW: "arithmetic overflow in an intermediate result",
        EvaluationErrorKind.ZERO_DIVISION: "division by zero in an intermediate result",
    },
    Locale.JA: {
        EvaluationErrorKind.OVERFLOW: "途中計算に算術オーバーフローが発生しました。",
        EvaluationErrorKind.ZERO_DIVISION: "途中計算にゼロ除算が発生しました。",
    },
}


# =============================================================================
# Rendering
# =============================================================================


def caret_column(line: str, byte_offset: int) -> int:
    """Display column of a UTF-8 byte offset into ``line``."""
    prefix = line.encode("utf-8")[:byte_offset].decode("utf-8")
    return cell_len(prefix)


def error_message(error: RatexprError, locale: Locale = Locale.EN) -> str:
    """Localized message for an error, without any caret."""
    if isinstance(error, ExpressionParseError):
        template = PARSE_MESSAGES[locale][error.kind]
        if isinstance(error, LiteralOverflowError):
            return template.format(literal=error.literal)
        return template
    if isinstance(error, EvaluationError):
        return EVALUATION_MESSAGES[locale][error.kind]
    return error.message


def render_error(
    line: str, error: RatexprError, locale: Locale = Locale.EN, margin: int = 0
) -> str:
    """Render an error for ``line``, with a caret when it has a position.

    ``margin`` is the width of whatever precedes the echoed input on the
    terminal (a prompt, typically).
    """
    message = error_message(error, locale)
    offset = getattr(error, "offset", None)
    if offset is None:
        return message
    return " " * (margin + caret_column(line, offset)) + "^ " + message


def format_value(value: Rational) -> str:
    return str(value)
