__version__ = "0.1.0"

from exact_decimal.domain.decimal_value import MINUS_ONE, ONE, ZERO, Decimal, DecimalLike, as_decimal
from exact_decimal.domain.fraction import DecimalFraction
from exact_decimal.domain.reducers import gcd
from exact_decimal.errors import (
    DecimalDivisionByZeroError,
    DecimalError,
    DecimalParseError,
    InvalidArgumentError,
    NonTerminatingDecimalError,
    NotAnIntegerError,
)

__all__ = [
    "Decimal",
    "DecimalLike",
    "DecimalFraction",
    "as_decimal",
    "gcd",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "DecimalError",
    "InvalidArgumentError",
    "DecimalParseError",
    "DecimalDivisionByZeroError",
    "NonTerminatingDecimalError",
    "NotAnIntegerError",
]
