"""Exact fractions used as the intermediate form of division.

A `DecimalFraction` is never stored on a `Decimal`; it only exists while a quotient is
being computed. The key operation is `split_terminating_fraction`, which decides whether
a reduced fraction has a finite decimal expansion by factoring its denominator into
powers of 2 and 5 (the prime factors of 10).
"""

from __future__ import annotations

from math import gcd
from typing import NamedTuple

from exact_decimal.errors import DecimalDivisionByZeroError, NonTerminatingDecimalError
from exact_decimal.utils.math import digit_count, pow10, round_half_up_div


class DecimalFraction(NamedTuple):
    """Reduced fraction with a positive denominator.

    Attributes:
        numerator (int): Signed numerator.
        denominator (int): Positive denominator, coprime with $numerator.
    """

    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def reduce_fraction(numerator: int, denominator: int) -> DecimalFraction:
    """Normalize sign and reduce $numerator / $denominator to lowest terms.

    Raises:
        DecimalDivisionByZeroError: If $denominator is zero.
    """
    # Raise: a fraction needs a non-zero denominator
    if denominator == 0:
        raise DecimalDivisionByZeroError(numerator)

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    divisor = gcd(numerator, denominator)
    return DecimalFraction(numerator // divisor, denominator // divisor)


def split_terminating_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Convert a fraction into a raw (mantissa, exponent) pair with an exact decimal value.

    Every factor 2 removed from the denominator is compensated by a factor 5 in the
    numerator (and vice versa), each one moving the decimal point one place left.
    Whatever is left in the denominator afterwards must be 1.

    Args:
        numerator: Signed numerator.
        denominator: Non-zero denominator; sign is normalized.

    Returns:
        Tuple (mantissa, exponent) with mantissa * 10 ** exponent == numerator / denominator.

    Raises:
        DecimalDivisionByZeroError: If $denominator is zero.
        NonTerminatingDecimalError: If the reduced denominator has a prime factor other than 2 or 5.
    """
    fraction = reduce_fraction(numerator, denominator)

    # Negative values are split on their magnitude and negated back
    if fraction.numerator < 0:
        mantissa, exponent = split_terminating_fraction(-fraction.numerator, fraction.denominator)
        return -mantissa, exponent

    remaining = fraction.denominator
    factor = 1
    exponent = 0
    while remaining > 1 and remaining % 2 == 0:
        remaining //= 2
        factor *= 5
        exponent -= 1
    while remaining > 1 and remaining % 5 == 0:
        remaining //= 5
        factor *= 2
        exponent -= 1

    # Raise: a leftover factor (3, 7, 11, ...) means the expansion never ends
    if remaining != 1:
        raise NonTerminatingDecimalError(fraction.numerator, fraction.denominator)

    return fraction.numerator * factor, exponent


def fraction_magnitude(numerator: int, denominator: int) -> int:
    """Return floor(log10(|numerator / denominator|)) for a non-zero fraction ($denominator > 0).

    Examples:
        >>> fraction_magnitude(1, 3)
        -1
        >>> fraction_magnitude(1000, 7)
        2
    """
    numerator = abs(numerator)
    estimate = digit_count(numerator) - digit_count(denominator)

    # The digit-count estimate is either exact or one too high
    if estimate >= 0:
        reaches = numerator >= denominator * pow10(estimate)
    else:
        reaches = numerator * pow10(-estimate) >= denominator
    return estimate if reaches else estimate - 1


def round_fraction_to_significant_digits(numerator: int, denominator: int, significant_digits: int) -> tuple[int, int]:
    """Round $numerator / $denominator to $significant_digits significant digits.

    Rounds half-up on the magnitude and reapplies the sign, so ties move away from zero.

    Args:
        numerator: Signed numerator.
        denominator: Non-zero denominator; sign is normalized.
        significant_digits: Number of digits to keep, counted from the first non-zero digit (>= 1).

    Returns:
        Raw (mantissa, exponent) pair of the rounded value; (0, 0) for a zero fraction.

    Raises:
        DecimalDivisionByZeroError: If $denominator is zero.
    """
    fraction = reduce_fraction(numerator, denominator)
    if fraction.numerator == 0:
        return 0, 0

    if fraction.numerator < 0:
        mantissa, exponent = round_fraction_to_significant_digits(-fraction.numerator, fraction.denominator, significant_digits)
        return -mantissa, exponent

    # Shift so the integer part of the scaled quotient has exactly $significant_digits digits
    shift = significant_digits - 1 - fraction_magnitude(fraction.numerator, fraction.denominator)
    if shift >= 0:
        mantissa = round_half_up_div(fraction.numerator * pow10(shift), fraction.denominator)
    else:
        mantissa = round_half_up_div(fraction.numerator, fraction.denominator * pow10(-shift))
    return mantissa, -shift
