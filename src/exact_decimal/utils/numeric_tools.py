from __future__ import annotations

from decimal import Decimal as StdDecimal
from fractions import Fraction
from typing import TypeAlias

from exact_decimal.errors import InvalidArgumentError

# Use where an exact `int` is required, but integral floats are also accepted (and converted to `int`)
IntLike: TypeAlias = int | float

# Scalars that the `Decimal` conversion entry point knows how to read exactly
NumberLike: TypeAlias = int | float | str | StdDecimal | Fraction


def as_int(value: IntLike, name: str, operation: str) -> int:
    """Converts $value to `int` or fails with `InvalidArgumentError`.

    Accepts `int` and floats without a fractional part. `bool` is rejected even though
    it subclasses `int`, because `True` as an exponent is always a caller mistake.

    Args:
        value: Candidate integer argument.
        name: Parameter name used in the error message (e.g. "exponent").
        operation: Name of the calling operation used in the error message.

    Returns:
        The value as a plain `int`.

    Raises:
        InvalidArgumentError: If $value is not an integer.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Cannot call `{operation}` because ${name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidArgumentError(f"Cannot call `{operation}` because ${name} must be an integer, got {value!r}")


def as_non_negative_int(value: IntLike, name: str, operation: str) -> int:
    """Same as `as_int`, additionally requiring $value >= 0."""
    result = as_int(value, name, operation)

    # Raise: negative counts make no sense for precision-like arguments
    if result < 0:
        raise InvalidArgumentError(f"Cannot call `{operation}` because ${name} must be a non-negative integer, got {value!r}")
    return result


def as_positive_int(value: IntLike, name: str, operation: str) -> int:
    """Same as `as_int`, additionally requiring $value >= 1."""
    result = as_int(value, name, operation)

    # Raise: at least one digit has to survive rounding
    if result < 1:
        raise InvalidArgumentError(f"Cannot call `{operation}` because ${name} must be a positive integer, got {value!r}")
    return result
