"""
ratexpr intermediate representation.

Frozen pydantic models for expression trees and the exact rational values
they evaluate to.
"""

from ratexpr.core.ir.expressions import (
    PRECEDENCE_TIERS,
    U64_MAX,
    Expr,
    Group,
    Number,
    Operator,
)
from ratexpr.core.ir.rational import Rational

__all__ = [
    "PRECEDENCE_TIERS",
    "U64_MAX",
    "Expr",
    "Group",
    "Number",
    "Operator",
    "Rational",
]
