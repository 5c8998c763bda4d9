"""
Error types for ratexpr parsing and evaluation.

Each failure pertains to a single input line and is always recoverable.
Every concrete error carries a ``kind`` tag plus the payload its variant
needs; message text here is plain developer English, and localized
rendering happens in ``ratexpr.cli.diagnostics``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ParseErrorKind(StrEnum):
    """Tags for syntax errors."""

    EXPECTED_EXPR = "expected_expr"
    EXPECTED_OP = "expected_op"
    INVALID_CLOSE_PARENTHESIS = "invalid_close_parenthesis"
    UNCLOSED_PARENTHESES = "unclosed_parentheses"
    OVERFLOW = "overflow"


class EvaluationErrorKind(StrEnum):
    """Tags for evaluation errors."""

    OVERFLOW = "overflow"
    ZERO_DIVISION = "zero_division"


class RatexprError(Exception):
    """Base exception for all ratexpr errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Parse errors
# =============================================================================


class ExpressionParseError(RatexprError):
    """
    Raised when an input line is not a well-formed expression.

    Attributes:
        offset: UTF-8 byte offset of the failure site, or None for
            failures that have no position (end of input, literal overflow)
    """

    kind: ClassVar[ParseErrorKind]

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        super().__init__(message)


class ExpectedExprError(ExpressionParseError):
    """
    An operand was required but something else was found.

    Examples:
    - Empty input
    - Operator with no right-hand side: ``1+``
    - Stray character: ``a``
    """

    kind = ParseErrorKind.EXPECTED_EXPR

    def __init__(self, found: str | None, offset: int):
        self.found = found
        got = repr(found) if found is not None else "end of input"
        super().__init__(f"Expected expression at byte {offset}, got {got}", offset)


class ExpectedOpError(ExpressionParseError):
    """An operator or closing parenthesis was required but ``found`` was found."""

    kind = ParseErrorKind.EXPECTED_OP

    def __init__(self, found: str, offset: int):
        self.found = found
        super().__init__(
            f"Expected operator or ')' at byte {offset}, got {found!r}",
            offset,
        )


class InvalidCloseParenthesisError(ExpressionParseError):
    """A ``)`` with no matching ``(``."""

    kind = ParseErrorKind.INVALID_CLOSE_PARENTHESIS

    def __init__(self, offset: int):
        super().__init__(f"Unmatched ')' at byte {offset}", offset)


class UnclosedParenthesesError(ExpressionParseError):
    """Input ended inside an open ``(``."""

    kind = ParseErrorKind.UNCLOSED_PARENTHESES

    def __init__(self) -> None:
        super().__init__("Input ended before ')' closed an open parenthesis")


class LiteralOverflowError(ExpressionParseError):
    """A digit run does not fit the unsigned 64-bit domain."""

    kind = ParseErrorKind.OVERFLOW

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Literal {literal} does not fit in 64 bits")


# =============================================================================
# Evaluation errors
# =============================================================================


class EvaluationError(RatexprError):
    """Raised when a well-formed expression cannot be evaluated exactly."""

    kind: ClassVar[EvaluationErrorKind]


class ArithmeticOverflowError(EvaluationError):
    """A reduced intermediate result does not fit the rational domain."""

    kind = EvaluationErrorKind.OVERFLOW

    def __init__(self) -> None:
        super().__init__("Arithmetic overflow in intermediate result")


class DivisionByZeroError(EvaluationError):
    """The divisor evaluated to exactly zero."""

    kind = EvaluationErrorKind.ZERO_DIVISION

    def __init__(self) -> None:
        super().__init__("Division by zero")
