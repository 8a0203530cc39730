"""Errors raised by the exact decimal value type."""

from __future__ import annotations


class DecimalError(ArithmeticError):
    """Base class for every failure raised by `Decimal` operations."""


class InvalidArgumentError(DecimalError, ValueError):
    """Raised when an argument has the right type family but an unusable value.

    Typical cases are a non-integer exponent, a negative precision or a non-finite float.
    """


class DecimalParseError(DecimalError, ValueError):
    """Raised when a string does not match the decimal literal grammar."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse Decimal from $text '{text}'")


class DecimalDivisionByZeroError(DecimalError, ZeroDivisionError):
    """Raised when a fraction has a zero denominator or a value is reduced modulo zero."""

    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(f"Cannot divide $numerator ({numerator}) by zero")


class NonTerminatingDecimalError(DecimalError):
    """Raised when an exact fraction has no finite decimal expansion.

    The reduced fraction is kept on the error so callers can retry with `significant_digits`.
    """

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(f"Fraction {numerator}/{denominator} cannot be represented with a fixed number of decimals")


class NotAnIntegerError(DecimalError, ValueError):
    """Raised when an integer conversion is requested for a value with a fractional part."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Cannot call `to_int` because Decimal {value} is not an integer")
