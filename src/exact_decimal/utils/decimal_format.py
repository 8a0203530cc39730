from __future__ import annotations


def format_plain(mantissa: int, exponent: int) -> str:
    """Render mantissa * 10 ** exponent in positional notation (never scientific).

    Args:
        mantissa: Integer mantissa; may be negative.
        exponent: Power of ten applied to $mantissa.

    Returns:
        String like "-0.0123" or "1200". Trailing fractional zeros are kept exactly
        as the (mantissa, exponent) pair implies, so canonical input gives canonical output.

    Examples:
        >>> format_plain(123, -5)
        '0.00123'
        >>> format_plain(-12, 2)
        '-1200'
    """
    if mantissa < 0:
        return "-" + format_plain(-mantissa, exponent)

    digits = str(mantissa)
    if exponent >= 0:
        return digits + "0" * exponent

    # Need at least one digit in front of the point
    digits = digits.rjust(-exponent + 1, "0")
    return digits[:exponent] + "." + digits[exponent:]


def format_fixed(mantissa: int, exponent: int, precision: int) -> str:
    """Render a non-negative value with exactly $precision fractional digits.

    The value must already be rounded so that $exponent >= -$precision; this function only
    pads, it never rounds.

    Args:
        mantissa: Non-negative integer mantissa.
        exponent: Power of ten applied to $mantissa, >= -$precision.
        precision: Number of digits after the decimal point; 0 omits the point.

    Returns:
        String like "123.50" for (1235, -1, 2).

    Raises:
        ValueError: If the pair carries more fractional digits than $precision.
    """
    # Raise: rounding must happen before formatting
    if exponent < -precision:
        raise ValueError(f"Cannot call `format_fixed` because $exponent ({exponent}) needs more than $precision ({precision}) fractional digits")

    if exponent >= 0:
        integer = str(mantissa) + "0" * exponent
        return integer + "." + "0" * precision if precision > 0 else integer

    digits = str(mantissa).rjust(-exponent + 1, "0")
    return digits[:exponent] + "." + digits[exponent:].ljust(precision, "0")
