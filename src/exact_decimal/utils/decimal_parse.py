"""Parsing of decimal literal strings into (mantissa, exponent) pairs.

Accepted forms (case-insensitive):
    - integer literals, optionally signed: "123", "-120", "+7"
    - prefixed integer literals: "0x1f", "0o17", "0b101" (sign allowed)
    - decimal literals: sign? digits+ ('.' digits+)? ('e' sign? digits+)?

No whitespace, digit separators or exponent-only forms like ".5" / "5." are accepted.
"""

from __future__ import annotations

import re

from exact_decimal.errors import DecimalParseError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INTEGER_PATTERN = re.compile(r"([+-]?)0([xob])([0-9a-f]+)", re.IGNORECASE)
_DECIMAL_PATTERN = re.compile(r"([+-]?[0-9]+)(?:\.([0-9]+))?(?:e([+-]?[0-9]+))?", re.IGNORECASE)

_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}


def _parse_prefixed_integer(text: str) -> int | None:
    match = _PREFIXED_INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None

    sign, prefix, digits = match.groups()
    try:
        value = int(digits, _PREFIX_BASES[prefix.lower()])
    except ValueError:
        # Digits outside the base, e.g. "0b102" or "0o9"
        return None
    return -value if sign == "-" else value


def parse_decimal_literal(text: str) -> tuple[int, int]:
    """Parse $text into a raw (mantissa, exponent) pair.

    The pair is not canonical: "120.0" yields (1200, -1). Canonicalization is the job
    of the `Decimal` constructor.

    Args:
        text: Decimal or integer literal.

    Returns:
        Tuple (mantissa, exponent) such that the literal equals mantissa * 10 ** exponent.

    Raises:
        DecimalParseError: If $text matches none of the accepted forms.
    """
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text, 10), 0

    prefixed = _parse_prefixed_integer(text)
    if prefixed is not None:
        return prefixed, 0

    match = _DECIMAL_PATTERN.fullmatch(text)

    # Raise: nothing matched, the string is not a number we understand
    if match is None:
        raise DecimalParseError(text)

    integer_part, fraction_part, exponent_part = match.groups()
    exponent = int(exponent_part, 10) if exponent_part is not None else 0

    if fraction_part is not None:
        exponent -= len(fraction_part)
        digits = integer_part + fraction_part
    else:
        digits = integer_part

    return int(digits, 10), exponent
