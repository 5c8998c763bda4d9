"""
Top-down parser for ratexpr expressions.

Tokenization is interleaved with parsing: a single forward cursor walks the
text, skipping whitespace after every consumed token, with no backtracking.
Nested groups are tracked on an explicit stack instead of by recursion.

Grammar:
    line     → group EOF
    group    → operand (op operand)*
    operand  → NUMBER | "(" group ")"
    op       → "+" | "-" | "*" | "/"
    NUMBER   → [0-9]+            (must fit in 64 bits)

Precedence is not resolved here; each group keeps its operators in source
order and the evaluator collapses them.

Error offsets are UTF-8 byte offsets into the input, taken after whitespace
has been skipped.
"""

from __future__ import annotations

import logging

from ratexpr.core.errors import (
    ExpectedExprError,
    ExpectedOpError,
    ExpressionParseError,
    InvalidCloseParenthesisError,
    LiteralOverflowError,
    UnclosedParenthesesError,
)
from ratexpr.core.ir.expressions import U64_MAX, Expr, Group, Number, Operator

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")
_U64_MAX_DIGITS = len(str(U64_MAX))
# Information separators: str.isspace() accepts them, Unicode White_Space does not.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


class _Parser:
    """Cursor over one input line."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0
        self.offset = 0

    @property
    def current(self) -> str | None:
        if self.index < len(self.source):
            return self.source[self.index]
        return None

    def advance(self) -> str:
        """Consume one character without skipping whitespace after it."""
        c = self.source[self.index]
        self.index += 1
        self.offset += len(c.encode("utf-8"))
        return c

    def skip_whitespace(self) -> None:
        while (c := self.current) is not None and c.isspace() and c not in _NOT_WHITESPACE:
            self.advance()

    def next_token(self) -> None:
        """Consume one character, then any whitespace that follows it."""
        self.advance()
        self.skip_whitespace()

    # -- Grammar rules --

    def parse_operand(self) -> Number | None:
        """NUMBER, or None after consuming a '(' that opens a nested group."""
        c = self.current

        if c is not None and c in _ASCII_DIGITS:
            start = self.index
            while self.current is not None and self.current in _ASCII_DIGITS:
                self.advance()
            literal = self.source[start : self.index]
            self.skip_whitespace()
            # Bound the significant digits before int(), which refuses very
            # long digit strings.
            digits = literal.lstrip("0") or "0"
            if len(digits) > _U64_MAX_DIGITS or int(digits) > U64_MAX:
                raise LiteralOverflowError(literal)
            return Number(value=int(digits))

        if c == "(":
            self.next_token()
            return None

        raise ExpectedExprError(c, self.offset)

    def parse_group(self) -> Group:
        """operand (op operand)*, closed by ')' when nested or EOF when outermost.

        Open groups live on an explicit stack, so nesting depth is bounded by
        memory rather than the interpreter's recursion limit.
        """
        enclosing: list[tuple[list[Expr], list[Operator]]] = []
        operands: list[Expr] = []
        operators: list[Operator] = []

        while True:
            operand = self.parse_operand()
            if operand is None:
                enclosing.append((operands, operators))
                operands, operators = [], []
                continue
            operands.append(operand)

            while True:
                c = self.current
                if c is None:
                    if enclosing:
                        raise UnclosedParenthesesError()
                    return Group(operands=operands, operators=operators)

                op = Operator.from_char(c)
                if op is not None:
                    self.next_token()
                    operators.append(op)
                    break
                if c != ")":
                    raise ExpectedOpError(c, self.offset)
                if not enclosing:
                    raise InvalidCloseParenthesisError(self.offset)

                self.next_token()
                group = Group(operands=operands, operators=operators)
                operands, operators = enclosing.pop()
                operands.append(group)


def parse(source: str) -> Expr:
    """Parse one line into an expression tree.

    Args:
        source: Expression text (e.g., "(1 + 2) * 3"); a trailing newline is
            treated as whitespace.

    Returns:
        The root Group of the line.

    Raises:
        ExpressionParseError: On the first syntax error found. The concrete
            subclass tells which one.
    """
    parser = _Parser(source)
    parser.skip_whitespace()
    try:
        return parser.parse_group()
    except ExpressionParseError as e:
        logger.debug("Parse failed (%s): %s", e.kind, e.message)
        raise
