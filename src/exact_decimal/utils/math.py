from __future__ import annotations


def pow10(exponent: int) -> int:
    """Return 10 ** $exponent as an exact integer.

    Raises:
        ValueError: If $exponent < 0.
    """
    if exponent < 0:
        raise ValueError(f"$exponent must be >= 0, but provided value is: {exponent}")
    return 10**exponent


def digit_count(n: int) -> int:
    """Number of decimal digits of |$n| (zero has one digit).

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-120)
        3
    """
    return len(str(abs(n)))


def floor_div(numerator: int, denominator: int) -> int:
    """Greatest integer <= $numerator / $denominator ($denominator > 0)."""
    return numerator // denominator


def ceil_div(numerator: int, denominator: int) -> int:
    """Least integer >= $numerator / $denominator ($denominator > 0).

    Examples:
        >>> ceil_div(7, 2)
        4
        >>> ceil_div(-7, 2)
        -3
    """
    return -((-numerator) // denominator)


def round_half_up_div(numerator: int, denominator: int) -> int:
    """Round $numerator / $denominator to the nearest integer, ties toward +infinity.

    Computes floor(q + 1/2) without leaving integer arithmetic: floor((2n + d) / 2d).

    Examples:
        >>> round_half_up_div(25, 2)
        13
        >>> round_half_up_div(-25, 2)
        -12
        >>> round_half_up_div(-27, 2)
        -13
    """
    return (2 * numerator + denominator) // (2 * denominator)
