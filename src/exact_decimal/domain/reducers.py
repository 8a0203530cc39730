"""Variadic helpers folding left-to-right over Decimal-like operands."""

from __future__ import annotations

from exact_decimal.domain.decimal_value import ONE, ZERO, Decimal, DecimalLike, as_decimal


def add(*values: DecimalLike) -> Decimal:
    """Sum of $values; `ZERO` when empty."""
    result = ZERO
    for value in values:
        result = result.add(value)
    return result


def sub(base: DecimalLike, *values: DecimalLike) -> Decimal:
    """$base minus every value in $values, in order."""
    result = as_decimal(base)
    for value in values:
        result = result.sub(value)
    return result


def mul(*values: DecimalLike) -> Decimal:
    """Product of $values; `ONE` when empty."""
    result = ONE
    for value in values:
        result = result.mul(value)
    return result


def div(base: DecimalLike, *values: DecimalLike) -> Decimal:
    """$base divided by every value in $values, in order; each step must be exact."""
    result = as_decimal(base)
    for value in values:
        result = result.div(value)
    return result


def minimum(first: DecimalLike, *values: DecimalLike) -> Decimal:
    """Smallest operand; the first one wins ties."""
    result = as_decimal(first)
    for value in values:
        if result.gt(value):
            result = as_decimal(value)
    return result


def maximum(first: DecimalLike, *values: DecimalLike) -> Decimal:
    """Largest operand; the first one wins ties."""
    result = as_decimal(first)
    for value in values:
        if result.lt(value):
            result = as_decimal(value)
    return result


def gcd(a: DecimalLike, b: DecimalLike) -> Decimal:
    """Greatest common divisor of two decimals using Euclid's algorithm on `Decimal.mod`.

    Works for non-integers too: gcd(0.6, 0.9) == 0.3. The result is never negative.

    Examples:
        >>> gcd(12, 18)
        Decimal('6')
    """
    a = as_decimal(a)
    b = as_decimal(b)
    while b.neq0():
        a, b = b, a.mod(b)
    return a.abs()
