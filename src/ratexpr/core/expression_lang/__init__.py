"""
ratexpr expression language.

Parser and evaluator for one-line arithmetic over unsigned 64-bit integers
with exact rational results.

Usage:
    from ratexpr.core.expression_lang import calculate, evaluate, parse

    expr = parse("1 + 2 * 3")
    result = evaluate(expr)
    # str(result) == "7"
"""

from ratexpr.core.expression_lang.evaluator import apply, evaluate
from ratexpr.core.expression_lang.parser import parse
from ratexpr.core.ir.rational import Rational


def calculate(source: str) -> Rational:
    """Parse and evaluate one line."""
    return evaluate(parse(source))


__all__ = ["apply", "calculate", "evaluate", "parse"]
