"""Tests for localized error rendering."""

from __future__ import annotations

import pytest

from ratexpr.cli.diagnostics import (
    EVALUATION_MESSAGES,
    PARSE_MESSAGES,
    caret_column,
    error_message,
    format_value,
    render_error,
)
from ratexpr.core.config import Locale
from ratexpr.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    EvaluationErrorKind,
    ExpressionParseError,
    LiteralOverflowError,
    ParseErrorKind,
    UnclosedParenthesesError,
)
from ratexpr.core.expression_lang import parse
from ratexpr.core.ir import Rational


def parse_error(source: str) -> ExpressionParseError:
    with pytest.raises(ExpressionParseError) as exc_info:
        parse(source)
    return exc_info.value


class TestCaretColumn:
    """Byte offsets map to terminal cell columns."""

    def test_ascii(self) -> None:
        assert caret_column("1 + )", 4) == 4

    def test_narrow_multibyte(self) -> None:
        # é is two bytes but one cell wide
        assert caret_column("é)", 2) == 1

    def test_wide_characters(self) -> None:
        # あ is three bytes and two cells wide
        assert caret_column("あ+", 3) == 2

    def test_end_of_line(self) -> None:
        assert caret_column("1+", 2) == 2


class TestRenderError:
    """Positioned errors get a caret, the rest only a message."""

    def test_expected_expression(self) -> None:
        assert render_error("(0+)", parse_error("(0+)")) == "   ^ expected an expression"

    def test_expected_operator(self) -> None:
        rendered = render_error("1 2", parse_error("1 2"))
        assert rendered == "  ^ expected an operator or a closing parenthesis"

    def test_stray_close_parenthesis(self) -> None:
        assert render_error("0)", parse_error("0)")) == " ^ no matching opening parenthesis"

    def test_caret_after_wide_whitespace(self) -> None:
        line = "　1+"
        assert render_error(line, parse_error(line)) == "    ^ expected an expression"

    def test_margin(self) -> None:
        assert render_error("1+", parse_error("1+"), margin=2) == "    ^ expected an expression"

    def test_unclosed_has_no_caret(self) -> None:
        assert render_error("(1", UnclosedParenthesesError()) == "parenthesis is not closed"

    def test_literal_overflow_interpolates(self) -> None:
        error = LiteralOverflowError("18446744073709551616")
        assert render_error("18446744073709551616", error, Locale.JA) == (
            "18446744073709551616は大きすぎて計算不能です。"
        )

    def test_evaluation_errors(self) -> None:
        assert render_error("1/0", DivisionByZeroError(), Locale.JA) == (
            "途中計算にゼロ除算が発生しました。"
        )
        assert error_message(ArithmeticOverflowError()) == (
            "arithmetic overflow in an intermediate result"
        )

    def test_japanese_caret(self) -> None:
        assert render_error("0)", parse_error("0)"), Locale.JA) == " ^ 対応する開き括弧がありません。"


class TestCatalogs:
    @pytest.mark.parametrize("locale", list(Locale))
    def test_every_kind_has_a_message(self, locale: Locale) -> None:
        assert set(PARSE_MESSAGES[locale]) == set(ParseErrorKind)
        assert set(EVALUATION_MESSAGES[locale]) == set(EvaluationErrorKind)


def test_format_value() -> None:
    assert format_value(Rational.of(-4, 6)) == "-2/3"
