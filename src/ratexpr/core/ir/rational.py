"""
Checked exact rational value for ratexpr.

This module provides the evaluation result type. A Rational:
1. Is exact (integer numerator and denominator, no floating point)
2. Is always canonical (gcd-reduced, positive denominator, zero is 0/1)
3. Never leaves the fixed-width domain: numerator and denominator both fit
   in an unsigned 64-bit integer, with the sign kept separately

Every operation computes the exact result with Python integers, reduces it,
and only then checks it against the domain, so a product whose unreduced form
is too large still succeeds when its reduced form fits.

Usage:
    half = Rational.of(1, 2)
    one = half.checked_mul(Rational.from_integer(2))   # Rational 1
    str(Rational.of(-2, 4))                            # "-1/2"
"""

from __future__ import annotations

from fractions import Fraction
from math import gcd

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ratexpr.core.errors import ArithmeticOverflowError, DivisionByZeroError
from ratexpr.core.ir.expressions import U64_MAX


class Rational(BaseModel):
    """
    Canonical signed fraction with unsigned 64-bit magnitude parts.

    Attributes:
        numerator: Magnitude of the numerator (0 .. U64_MAX)
        denominator: Denominator (1 .. U64_MAX)
        negative: Sign flag; always False for zero
    """

    numerator: int = Field(ge=0, le=U64_MAX)
    denominator: int = Field(default=1, ge=1, le=U64_MAX)
    negative: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_canonical(self) -> Rational:
        if gcd(self.numerator, self.denominator) != 1:
            raise ValueError(f"{self.numerator}/{self.denominator} is not reduced")
        if self.numerator == 0 and self.negative:
            raise ValueError("zero cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> Rational:
        """Exact value of an unsigned literal. Never fails inside the domain."""
        return cls(numerator=value)

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Rational:
        """
        Build a canonical Rational from any signed integer pair.

        Raises:
            DivisionByZeroError: If denominator is 0
            ArithmeticOverflowError: If the reduced parts do not fit the domain
        """
        if denominator == 0:
            raise DivisionByZeroError()
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        magnitude = abs(numerator) // divisor
        denominator //= divisor
        if magnitude > U64_MAX or denominator > U64_MAX:
            raise ArithmeticOverflowError()
        return cls(numerator=magnitude, denominator=denominator, negative=numerator < 0)

    # -------------------------------------------------------------------------
    # Checked arithmetic
    # -------------------------------------------------------------------------

    @property
    def signed_numerator(self) -> int:
        return -self.numerator if self.negative else self.numerator

    def checked_add(self, other: Rational) -> Rational:
        return Rational.of(
            self.signed_numerator * other.denominator + other.signed_numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def checked_sub(self, other: Rational) -> Rational:
        return Rational.of(
            self.signed_numerator * other.denominator - other.signed_numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def checked_mul(self, other: Rational) -> Rational:
        return Rational.of(
            self.signed_numerator * other.signed_numerator,
            self.denominator * other.denominator,
        )

    def checked_div(self, other: Rational) -> Rational:
        """Multiply by the reciprocal; a zero divisor is rejected up front."""
        if other.is_zero:
            raise DivisionByZeroError()
        return Rational.of(
            self.signed_numerator * other.denominator,
            self.denominator * other.signed_numerator,
        )

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_fraction(self) -> Fraction:
        """Convert to the stdlib Fraction (no domain bound applies there)."""
        return Fraction(self.signed_numerator, self.denominator)

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        if self.is_integer:
            return f"{sign}{self.numerator}"
        return f"{sign}{self.numerator}/{self.denominator}"
