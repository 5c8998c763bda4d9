"""
Expression evaluator for ratexpr.

Evaluates an expression tree to an exact Rational. Pure evaluation: no I/O,
no shared state, safe to call from several threads at once.

Precedence is resolved per group by collapsing the flat operand/operator
sequence once per tier, tightest tier first. Within a tier the collapse runs
left to right, which gives left associativity. This only works because there
are a handful of tiers over binary operators; a richer grammar would need
precedence climbing in the parser instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ratexpr.core.errors import EvaluationError
from ratexpr.core.ir.expressions import PRECEDENCE_TIERS, Expr, Group, Number, Operator
from ratexpr.core.ir.rational import Rational

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> Rational:
    """Evaluate an expression tree exactly.

    Args:
        expr: Tree produced by ``parse`` (or built by hand).

    Returns:
        The canonical rational value.

    Raises:
        ArithmeticOverflowError: If a reduced intermediate result leaves the
            64-bit rational domain.
        DivisionByZeroError: If a divisor evaluates to zero.
    """
    if isinstance(expr, Number):
        return Rational.from_integer(expr.value)

    if isinstance(expr, Group):
        return _evaluate_group(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _evaluate_group(root: Group) -> Rational:
    # Each frame is a group and the values of its operands evaluated so far.
    frames: list[tuple[Group, list[Rational]]] = [(root, [])]

    while True:
        group, values = frames[-1]
        if len(values) < len(group.operands):
            operand = group.operands[len(values)]
            if isinstance(operand, Group):
                frames.append((operand, []))
            else:
                values.append(evaluate(operand))
            continue

        operators = list(group.operators)
        for tier in range(PRECEDENCE_TIERS):
            values, operators = _collapse_tier(values, operators, tier)

        frames.pop()
        if not frames:
            return values[0]
        frames[-1][1].append(values[0])


def _collapse_tier(
    values: Sequence[Rational], operators: Sequence[Operator], tier: int
) -> tuple[list[Rational], list[Operator]]:
    """Apply every operator of ``tier``, keeping the others for a later pass."""
    out_values: list[Rational] = []
    out_operators: list[Operator] = []
    acc = values[0]

    for op, value in zip(operators, values[1:], strict=True):
        if op.tier == tier:
            acc = apply(op, acc, value)
        else:
            out_values.append(acc)
            out_operators.append(op)
            acc = value

    out_values.append(acc)
    return out_values, out_operators


def apply(op: Operator, left: Rational, right: Rational) -> Rational:
    """Combine two values with one operator, checked."""
    try:
        if op == Operator.ADD:
            return left.checked_add(right)
        if op == Operator.SUB:
            return left.checked_sub(right)
        if op == Operator.MUL:
            return left.checked_mul(right)
        return left.checked_div(right)
    except EvaluationError as e:
        logger.debug("%s %s %s failed: %s", left, op.value, right, e.kind)
        raise
