from __future__ import annotations

import logging
import math
from decimal import Decimal as StdDecimal
from fractions import Fraction
from typing import TypeAlias

from exact_decimal.domain.fraction import (
    DecimalFraction,
    reduce_fraction,
    round_fraction_to_significant_digits,
    split_terminating_fraction,
)
from exact_decimal.errors import DecimalDivisionByZeroError, InvalidArgumentError, NotAnIntegerError
from exact_decimal.utils.decimal_format import format_fixed, format_plain
from exact_decimal.utils.decimal_parse import parse_decimal_literal
from exact_decimal.utils.math import ceil_div, digit_count, floor_div, pow10, round_half_up_div
from exact_decimal.utils.numeric_tools import IntLike, NumberLike, as_int, as_non_negative_int, as_positive_int

logger = logging.getLogger(__name__)

# Use where optimal type is `Decimal`, but other scalars are also acceptable (and will be converted exactly)
DecimalLike: TypeAlias = "Decimal | NumberLike"


class Decimal:
    """Exact decimal number: an arbitrary-precision integer mantissa scaled by a power of ten.

    The value is `mantissa * 10 ** exponent`. Every instance is canonical:
    zero is always (0, 0) and a non-zero mantissa never ends with a zero digit,
    so two Decimals are equal exactly when their (mantissa, exponent) pairs are equal.

    Instances are immutable and every operation returns a new Decimal. Division either
    produces the exact decimal result or raises `NonTerminatingDecimalError`, unless the
    caller asks for a rounded result with `significant_digits`.

    Attributes:
        mantissa (int): Signed integer mantissa, not divisible by 10 unless zero.
        exponent (int): Power of ten applied to the mantissa; 0 for zero.
    """

    __slots__ = ("_mantissa", "_exponent")

    ZERO: Decimal
    ONE: Decimal
    MINUS_ONE: Decimal

    # region Init

    def __init__(self, mantissa: int, exponent: IntLike = 0) -> None:
        """Create a canonical Decimal equal to $mantissa * 10 ** $exponent.

        Trailing zeros of $mantissa are moved into the exponent.

        Args:
            mantissa: Integer mantissa.
            exponent: Integer power of ten.

        Raises:
            TypeError: If $mantissa is not an `int`.
            InvalidArgumentError: If $exponent is not an integer.
        """
        # Raise: mantissa must be an exact integer, floats go through `from_float`
        if not isinstance(mantissa, int) or isinstance(mantissa, bool):
            raise TypeError(f"Cannot call `Decimal.__init__` because $mantissa must be int, got type '{type(mantissa).__name__}'")

        exponent = as_int(exponent, "exponent", "Decimal.__init__")

        if mantissa == 0:
            exponent = 0
        else:
            while mantissa % 10 == 0:
                mantissa //= 10
                exponent += 1

        self._mantissa = mantissa
        self._exponent = exponent

    # endregion

    # region Properties

    @property
    def mantissa(self) -> int:
        return self._mantissa

    @property
    def exponent(self) -> int:
        return self._exponent

    # endregion

    # region Construction

    @classmethod
    def from_int(cls, value: int) -> Decimal:
        """Wrap an integer with exponent 0 (trailing zeros are still absorbed)."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Cannot call `from_int` because $value must be int, got type '{type(value).__name__}'")
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> Decimal:
        """Convert a float using its shortest round-trip representation.

        Ints and integral floats are converted directly. Other floats go through `repr`, so
        `Decimal.from_float(0.1)` is exactly 0.1 and not the binary approximation
        0.1000000000000000055511151231257827...

        Raises:
            InvalidArgumentError: If $value is NaN or infinite.
        """
        if isinstance(value, int):
            return cls.from_int(value)

        # Raise: there is no NaN/Infinity sentinel
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Cannot call `from_float` because $value ({value}) is not finite")

        if value.is_integer():
            return cls(int(value))

        text = repr(value)
        logger.debug(f"Converting float $value ({text}) through its shortest representation")
        return cls.from_string(text)

    @classmethod
    def from_string(cls, text: str) -> Decimal:
        """Parse an integer or decimal literal such as "-12.5", "1.23e-4" or "0x1f".

        Raises:
            TypeError: If $text is not a string.
            DecimalParseError: If $text is not a valid literal.
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot call `from_string` because $text must be str, got type '{type(text).__name__}'")
        mantissa, exponent = parse_decimal_literal(text)
        return cls(mantissa, exponent)

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int, significant_digits: IntLike | None = None) -> Decimal:
        """Convert an exact fraction into a Decimal.

        Without $significant_digits the result is exact or the call fails. With it, the
        quotient is rounded half-up (ties away from zero) to that many significant digits.

        Args:
            numerator: Integer numerator.
            denominator: Integer denominator.
            significant_digits: Optional number of significant digits (>= 1) to round to.

        Returns:
            Decimal: The quotient.

        Raises:
            TypeError: If $numerator or $denominator is not an `int`.
            DecimalDivisionByZeroError: If $denominator is zero.
            NonTerminatingDecimalError: If the quotient has no finite decimal expansion
                and $significant_digits is not given.
        """
        for name, item in (("numerator", numerator), ("denominator", denominator)):
            if not isinstance(item, int) or isinstance(item, bool):
                raise TypeError(f"Cannot call `from_fraction` because ${name} must be int, got type '{type(item).__name__}'")

        if significant_digits is None:
            mantissa, exponent = split_terminating_fraction(numerator, denominator)
            return cls(mantissa, exponent)

        digits = as_positive_int(significant_digits, "significant_digits", "from_fraction")
        fraction = reduce_fraction(numerator, denominator)
        logger.debug(f"Rounding fraction {fraction} to {digits} significant digit(s)")
        mantissa, exponent = round_fraction_to_significant_digits(fraction.numerator, fraction.denominator, digits)
        return cls(mantissa, exponent)

    @classmethod
    def from_value(cls, value: DecimalLike) -> Decimal:
        """Single conversion entry point used by every operation that takes an operand.

        Accepts Decimal (returned as is), int, float, str, `decimal.Decimal` and
        `fractions.Fraction`. A Fraction is converted exactly and fails if it does not terminate.

        Raises:
            TypeError: If $value has an unsupported type.
            InvalidArgumentError: If $value is a non-finite float or `decimal.Decimal`.
            DecimalParseError: If $value is a string that is not a valid literal.
            NonTerminatingDecimalError: If $value is a Fraction without a finite expansion.
        """
        if isinstance(value, Decimal):
            return value
        if isinstance(value, bool):
            raise TypeError(f"Cannot call `from_value` because $value must be a number, got bool ({value})")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, StdDecimal):
            # Raise: NaN / Infinity have no counterpart here
            if not value.is_finite():
                raise InvalidArgumentError(f"Cannot call `from_value` because $value ({value}) is not finite")
            return cls.from_string(str(value))
        if isinstance(value, Fraction):
            return cls.from_fraction(value.numerator, value.denominator)
        raise TypeError(f"Cannot call `from_value` because $value has unsupported type '{type(value).__name__}'")

    # endregion

    # region Conversion

    def to_string(self) -> str:
        """Positional notation without exponent, e.g. "-0.0123" or "1200"."""
        return format_plain(self._mantissa, self._exponent)

    def to_fixed(self, precision: IntLike) -> str:
        """Render with exactly $precision fractional digits, rounding half-up.

        Negative values are rounded on their absolute value, so -123.45 becomes "-123.5".

        Raises:
            InvalidArgumentError: If $precision is not a non-negative integer.
        """
        precision = as_non_negative_int(precision, "precision", "to_fixed")
        if self.lt0():
            return "-" + self.neg().to_fixed(precision)

        value = self.e(precision).round().e(-precision)
        return format_fixed(value._mantissa, value._exponent, precision)

    def to_int(self) -> int:
        """Exact integer value.

        Raises:
            NotAnIntegerError: If the value has a fractional part.
        """
        if not self.is_integer():
            raise NotAnIntegerError(self.to_string())
        return self._mantissa * pow10(self._exponent)

    def to_float(self) -> float:
        """Nearest float, obtained through the string form."""
        return float(self.to_string())

    def to_fraction(self) -> DecimalFraction:
        """Exact value as a reduced fraction with a positive denominator."""
        if self._exponent >= 0:
            return DecimalFraction(self._mantissa * pow10(self._exponent), 1)
        return reduce_fraction(self._mantissa, pow10(-self._exponent))

    def as_integer_ratio(self) -> tuple[int, int]:
        """Same as `to_fraction`, as a plain tuple (numeric protocol used by `fractions.Fraction`)."""
        numerator, denominator = self.to_fraction()
        return numerator, denominator

    def to_stdlib_decimal(self) -> StdDecimal:
        """Exact `decimal.Decimal` with the same value (independent of the decimal context)."""
        return StdDecimal(self.to_string())

    def to_json(self) -> str:
        """Serialization hook: same text as `to_string`."""
        return self.to_string()

    # endregion

    # region Predicates

    def is_integer(self) -> bool:
        return self._exponent >= 0

    def eq0(self) -> bool:
        return self._mantissa == 0

    def neq0(self) -> bool:
        return not self.eq0()

    def gt0(self) -> bool:
        return self._mantissa > 0

    def gte0(self) -> bool:
        return self._mantissa >= 0

    def lt0(self) -> bool:
        return self._mantissa < 0

    def lte0(self) -> bool:
        return self._mantissa <= 0

    def magnitude(self) -> int:
        """Return floor(log10(|self|)), e.g. 2 for 123 and -2 for 0.0123.

        Raises:
            InvalidArgumentError: If the value is zero.
        """
        # Raise: log10(0) is undefined
        if self.eq0():
            raise InvalidArgumentError("Cannot call `magnitude` because the value is zero")
        return digit_count(self._mantissa) - 1 + self._exponent

    # endregion

    # region Comparison

    def eq(self, value: DecimalLike) -> bool:
        other = Decimal.from_value(value)
        # Canonical form makes the pair comparison equivalent to comparing aligned mantissas
        return self._mantissa == other._mantissa and self._exponent == other._exponent

    def neq(self, value: DecimalLike) -> bool:
        return not self.eq(value)

    def gt(self, value: DecimalLike) -> bool:
        mantissa1, mantissa2, _ = _align(self, Decimal.from_value(value))
        return mantissa1 > mantissa2

    def gte(self, value: DecimalLike) -> bool:
        mantissa1, mantissa2, _ = _align(self, Decimal.from_value(value))
        return mantissa1 >= mantissa2

    def lt(self, value: DecimalLike) -> bool:
        mantissa1, mantissa2, _ = _align(self, Decimal.from_value(value))
        return mantissa1 < mantissa2

    def lte(self, value: DecimalLike) -> bool:
        mantissa1, mantissa2, _ = _align(self, Decimal.from_value(value))
        return mantissa1 <= mantissa2

    def compare(self, value: DecimalLike) -> int:
        """Return -1, 0 or 1 as the sign of (self - $value)."""
        mantissa1, mantissa2, _ = _align(self, Decimal.from_value(value))
        return (mantissa1 > mantissa2) - (mantissa1 < mantissa2)

    def sign(self) -> Decimal:
        """Return `ONE`, `ZERO` or `MINUS_ONE`."""
        if self.gt0():
            return Decimal.ONE
        if self.lt0():
            return Decimal.MINUS_ONE
        return Decimal.ZERO

    # endregion

    # region Arithmetic

    def add(self, value: DecimalLike) -> Decimal:
        mantissa1, mantissa2, exponent = _align(self, Decimal.from_value(value))
        return Decimal(mantissa1 + mantissa2, exponent)

    def sub(self, value: DecimalLike) -> Decimal:
        mantissa1, mantissa2, exponent = _align(self, Decimal.from_value(value))
        return Decimal(mantissa1 - mantissa2, exponent)

    def mul(self, value: DecimalLike) -> Decimal:
        other = Decimal.from_value(value)
        return Decimal(self._mantissa * other._mantissa, self._exponent + other._exponent)

    def neg(self) -> Decimal:
        return Decimal(-self._mantissa, self._exponent)

    def abs(self) -> Decimal:
        return self if self.gte0() else self.neg()

    def div(self, value: DecimalLike, significant_digits: IntLike | None = None) -> Decimal:
        """Exact quotient self / $value.

        Args:
            value: Divisor.
            significant_digits: If given, round the quotient to this many significant digits
                instead of failing on a non-terminating result.

        Raises:
            DecimalDivisionByZeroError: If $value is zero.
            NonTerminatingDecimalError: If the quotient does not terminate and
                $significant_digits is not given.
        """
        dividend = self.to_fraction()
        divisor = Decimal.from_value(value).to_fraction()
        return Decimal.from_fraction(
            dividend.numerator * divisor.denominator,
            dividend.denominator * divisor.numerator,
            significant_digits,
        )

    def inv(self, significant_digits: IntLike | None = None) -> Decimal:
        """Reciprocal 1 / self, see `div`."""
        return Decimal.ONE.div(self, significant_digits)

    def mod(self, value: DecimalLike) -> Decimal:
        """Euclidean remainder: always in [0, |$value|), whatever the signs.

        Raises:
            DecimalDivisionByZeroError: If $value is zero.
        """
        mantissa1, mantissa2, exponent = _align(self, Decimal.from_value(value))

        # Raise: remainder modulo zero is undefined
        if mantissa2 == 0:
            raise DecimalDivisionByZeroError(mantissa1)

        # Python's % with a positive divisor is already in [0, divisor)
        return Decimal(mantissa1 % abs(mantissa2), exponent)

    def pow(self, n: IntLike) -> Decimal:
        """Integer power; negative $n goes through the exact reciprocal.

        Raises:
            InvalidArgumentError: If $n is not an integer.
            NonTerminatingDecimalError: If $n < 0 and 1 / self does not terminate.
            DecimalDivisionByZeroError: If $n < 0 and self is zero.
        """
        n = as_int(n, "n", "pow")
        if n == 0:
            return Decimal.ONE
        if n == 1:
            return self
        if n < 0:
            return self.inv().pow(-n)
        return Decimal(self._mantissa**n, self._exponent * n)

    def e(self, exponent: IntLike) -> Decimal:
        """Multiply by 10 ** $exponent, i.e. shift the decimal point."""
        exponent = as_int(exponent, "exponent", "e")
        return Decimal(self._mantissa, self._exponent + exponent)

    # endregion

    # region Rounding

    def floor(self, precision: DecimalLike | None = None) -> Decimal:
        """Greatest multiple of $precision (default 1) that is <= self."""
        if precision is None:
            if self._exponent >= 0:
                return self
            return Decimal(floor_div(self._mantissa, pow10(-self._exponent)))

        unit = Decimal.from_value(precision)
        quotient = self._quotient(unit)
        return Decimal(floor_div(quotient.numerator, quotient.denominator)).mul(unit)

    def ceil(self, precision: DecimalLike | None = None) -> Decimal:
        """Least multiple of $precision (default 1) that is >= self."""
        if precision is None:
            if self._exponent >= 0:
                return self
            return Decimal(ceil_div(self._mantissa, pow10(-self._exponent)))

        unit = Decimal.from_value(precision)
        quotient = self._quotient(unit)
        return Decimal(ceil_div(quotient.numerator, quotient.denominator)).mul(unit)

    def round(self, precision: DecimalLike | None = None) -> Decimal:
        """Nearest multiple of $precision (default 1); ties go toward +infinity.

        12.5 rounds to 13 and -12.5 rounds to -12.
        """
        if precision is None:
            if self._exponent >= 0:
                return self
            return Decimal(round_half_up_div(self._mantissa, pow10(-self._exponent)))

        unit = Decimal.from_value(precision)
        quotient = self._quotient(unit)
        return Decimal(round_half_up_div(quotient.numerator, quotient.denominator)).mul(unit)

    def _quotient(self, unit: Decimal) -> DecimalFraction:
        """Exact rational self / $unit, used by the rounding family."""
        dividend = self.to_fraction()
        divisor = unit.to_fraction()
        return reduce_fraction(dividend.numerator * divisor.denominator, dividend.denominator * divisor.numerator)

    # endregion

    # region Python protocol

    def _compare_operand(self, other: object) -> int | None:
        """Three-way comparison for operators; None when $other is not a comparable number.

        Finite floats are compared by their exact binary value, so `==` agrees with `hash`.
        The named methods (`eq`, `lt`, ...) keep reading floats through their shortest repr.
        """
        if isinstance(other, float) and math.isfinite(other):
            other = Fraction(other)
        if isinstance(other, Fraction):
            # Fractions like 1/3 are comparable even though they cannot become a Decimal
            own = Fraction(*self.as_integer_ratio())
            return (own > other) - (own < other)
        value = _coerce(other)
        if value is None:
            return None
        return self.compare(value)

    def __eq__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __hash__(self) -> int:
        # Matches hash() of an equal int, Fraction or decimal.Decimal
        return hash(Fraction(*self.to_fraction()))

    def __lt__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __add__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.add(value)

    def __radd__(self, other: object) -> Decimal:
        return self.__add__(other)

    def __sub__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.sub(value)

    def __rsub__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value.sub(self)

    def __mul__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.mul(value)

    def __rmul__(self, other: object) -> Decimal:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.div(value)

    def __rtruediv__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value.div(self)

    def __mod__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.mod(value)

    def __rmod__(self, other: object) -> Decimal:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value.mod(self)

    def __pow__(self, other: object, modulo: object = None) -> Decimal:
        if modulo is not None:
            return NotImplemented
        if isinstance(other, Decimal) and other.is_integer():
            return self.pow(other.to_int())
        if isinstance(other, int) and not isinstance(other, bool):
            return self.pow(other)
        return NotImplemented

    def __rpow__(self, other: object, modulo: object = None) -> Decimal:
        if modulo is not None or not self.is_integer():
            return NotImplemented
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value.pow(self.to_int())

    def __neg__(self) -> Decimal:
        return self.neg()

    def __pos__(self) -> Decimal:
        return self

    def __abs__(self) -> Decimal:
        return self.abs()

    def __floor__(self) -> int:
        return self.floor().to_int()

    def __ceil__(self) -> int:
        return self.ceil().to_int()

    def __round__(self, ndigits: int | None = None) -> int | Decimal:
        if ndigits is None:
            return self.round().to_int()
        return self.round(Decimal(1, -as_int(ndigits, "ndigits", "__round__")))

    def __bool__(self) -> bool:
        return self.neq0()

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __copy__(self) -> Decimal:
        return self

    def __deepcopy__(self, memo: dict) -> Decimal:
        return self

    def __reduce__(self) -> tuple:
        return self.__class__, (self._mantissa, self._exponent)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.to_string()}')"

    # endregion


def _align(value1: Decimal, value2: Decimal) -> tuple[int, int, int]:
    """Scale both mantissas to the smaller exponent so they can be combined directly.

    Returns:
        Tuple (mantissa1, mantissa2, exponent) where value_i == mantissa_i * 10 ** exponent.
    """
    exponent = min(value1.exponent, value2.exponent)
    mantissa1 = value1.mantissa * pow10(value1.exponent - exponent)
    mantissa2 = value2.mantissa * pow10(value2.exponent - exponent)
    return mantissa1, mantissa2, exponent


def _coerce(other: object) -> Decimal | None:
    """Operand conversion for operators.

    Strings and bools are not treated as numbers there, and non-finite floats or
    `decimal.Decimal` values are simply not comparable.
    """
    if isinstance(other, Decimal):
        return other
    if isinstance(other, bool) or isinstance(other, str):
        return None
    if isinstance(other, float) and not math.isfinite(other):
        return None
    if isinstance(other, StdDecimal) and not other.is_finite():
        return None
    if isinstance(other, (int, float, StdDecimal, Fraction)):
        return Decimal.from_value(other)
    return None


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` exactly; see `Decimal.from_value`."""
    return Decimal.from_value(value)


Decimal.ZERO = Decimal(0)
Decimal.ONE = Decimal(1)
Decimal.MINUS_ONE = Decimal(-1)

ZERO = Decimal.ZERO
ONE = Decimal.ONE
MINUS_ONE = Decimal.MINUS_ONE
