"""
Expression tree types for ratexpr.

The parser produces a shallow, precedence-free tree: each ``Group`` holds the
operands and operators of one parenthesized level in source order, and the
evaluator resolves precedence when it collapses the group.

Supports:
- Unsigned integer literals: 0 .. 2**64 - 1
- Arithmetic: +, -, *, /
- Parentheses (every parenthesized level is a Group, and so is the whole line)
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from ratexpr.core.ir.rational import Rational

# Largest value of the fixed-width literal domain (unsigned 64-bit).
U64_MAX = 2**64 - 1

# Number of precedence tiers. The evaluator runs one collapsing pass per tier.
PRECEDENCE_TIERS = 2


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def tier(self) -> int:
        """Precedence tier: 0 binds tighter than 1."""
        if self in (Operator.MUL, Operator.DIV):
            return 0
        return 1

    @classmethod
    def from_char(cls, c: str) -> Operator | None:
        """Return the operator spelled by ``c``, or None."""
        try:
            return cls(c)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """An unsigned integer literal."""

    value: int = Field(ge=0, le=U64_MAX, description="Literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)

    def eval(self) -> Rational:
        from ratexpr.core.expression_lang.evaluator import evaluate

        return evaluate(self)


class Group(BaseModel):
    """
    One parenthesized level: operands joined by operators, unresolved.

    ``operators[i]`` sits between ``operands[i]`` and ``operands[i + 1]``.

    Examples:
        - ``1+2*3`` → Group(operands=(1, 2, 3), operators=(+, *))
        - ``(4)`` → Group(operands=(Group(operands=(4,), operators=()),), operators=())
    """

    operands: tuple[Expr, ...] = Field(min_length=1, description="Operands in source order")
    operators: tuple[Operator, ...] = Field(default=(), description="Operators between operands")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_arity(self) -> Group:
        if len(self.operands) != len(self.operators) + 1:
            raise ValueError(
                f"Group needs exactly one more operand than operators, "
                f"got {len(self.operands)} operands and {len(self.operators)} operators"
            )
        return self

    def __str__(self) -> str:
        parts = [_render_operand(self.operands[0])]
        for op, operand in zip(self.operators, self.operands[1:], strict=True):
            parts.append(op.value)
            parts.append(_render_operand(operand))
        return " ".join(parts)

    def eval(self) -> Rational:
        from ratexpr.core.expression_lang.evaluator import evaluate

        return evaluate(self)


def _render_operand(expr: Expr) -> str:
    """Nested groups came from parentheses, so render them parenthesized."""
    if isinstance(expr, Group):
        return f"({expr})"
    return str(expr)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Group

# Rebuild models for recursive forward references
Group.model_rebuild()
