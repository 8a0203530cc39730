from __future__ import annotations

import logging

import pytest

from exact_decimal import (
    Decimal,
    DecimalDivisionByZeroError,
    InvalidArgumentError,
    NonTerminatingDecimalError,
    ONE,
    ZERO,
)


def d(value: object) -> Decimal:
    return Decimal.from_value(value)  # type: ignore[arg-type]


# Values used by the algebraic property tests below
SAMPLES = [
    d(0),
    d(1),
    d(-1),
    d(123),
    d(-120),
    d("0.5"),
    d("-0.0123"),
    d("123456789.123456789123456789"),
    d("1e-20"),
    d("-7.25e12"),
]


# region Add / Sub / Mul / Neg / Abs


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (d(123), d(456), d(579)),
        (d(1000), d(456), d(1456)),
        (d(1000), d(45.6), d(1045.6)),
        (d(1000), d(-45.6), d(954.4)),
        (d(-1000), d(-45.6), d(-1045.6)),
        (d("0.1"), d("0.2"), d("0.3")),
    ],
)
def test_add(a: Decimal, b: Decimal, expected: Decimal) -> None:
    assert a.add(b).eq(expected)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (d(123), d(456), d(-333)),
        (d(1000), d(456), d(544)),
        (d(1000), d(45.6), d(954.4)),
        (d(1000), d(-45.6), d(1045.6)),
        (d(-1000), d(-45.6), d(-954.4)),
        (d("0.3"), d("0.1"), d("0.2")),
    ],
)
def test_sub(a: Decimal, b: Decimal, expected: Decimal) -> None:
    assert a.sub(b).eq(expected)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (d(123), d(456), d(56088)),
        (d(1000), d(456), d(456000)),
        (d(1000), d(45.6), d(45600)),
        (d(1000), d(-45.6), d(-45600)),
        (d(-1000), d(-45.6), d(45600)),
        (d("0.1"), d("0.1"), d("0.01")),
    ],
)
def test_mul(a: Decimal, b: Decimal, expected: Decimal) -> None:
    assert a.mul(b).eq(expected)


def test_operations_accept_decimal_like_operands() -> None:
    assert d(1).add("0.5").eq("1.5")
    assert d(1).sub(0.25).eq(0.75)
    assert d("2.5").mul(4).eq(10)


@pytest.mark.parametrize(
    "value, expected",
    [(d(123), d(-123)), (d(-123), d(123)), (d(0), d(0)), (d(12.3), d(-12.3)), (d(-12.3), d(12.3))],
)
def test_neg(value: Decimal, expected: Decimal) -> None:
    assert value.neg().eq(expected)


@pytest.mark.parametrize(
    "value, expected",
    [(d(123), d(123)), (d(-123), d(123)), (d(0), d(0)), (d(12.3), d(12.3)), (d(-12.3), d(12.3))],
)
def test_abs(value: Decimal, expected: Decimal) -> None:
    assert value.abs().eq(expected)


@pytest.mark.parametrize("x", SAMPLES)
def test_negation_is_an_involution(x: Decimal) -> None:
    assert x.neg().neg().eq(x)


@pytest.mark.parametrize("x", SAMPLES)
@pytest.mark.parametrize("y", SAMPLES[::3])
def test_sub_undoes_add(x: Decimal, y: Decimal) -> None:
    assert x.add(y).sub(y).eq(x)


@pytest.mark.parametrize("x", SAMPLES)
def test_multiplicative_identity_and_zero(x: Decimal) -> None:
    assert x.mul(ONE).eq(x)
    assert x.mul(ZERO).eq0()


# endregion

# region Div / Inv


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (d(1000), d(2), d(500)),
        (d(2), d(1000), d(0.002)),
        (d(1000), d(0.2), d(5000)),
        (d(1), d(8), d(0.125)),
        (d(141), d(376), d(0.375)),
        (d(1), d(4), d(0.25)),
        (d(0), d(3), d(0)),
        (d(-3), d(8), d(-0.375)),
    ],
)
def test_div_exact(a: Decimal, b: Decimal, expected: Decimal) -> None:
    assert a.div(b).eq(expected)


@pytest.mark.parametrize("a, b", [(d(1), d(3)), (d(1000), d(30)), (d(2), d(7))])
def test_div_non_terminating_fails(a: Decimal, b: Decimal) -> None:
    with pytest.raises(NonTerminatingDecimalError):
        a.div(b)


def test_non_terminating_error_carries_reduced_fraction() -> None:
    with pytest.raises(NonTerminatingDecimalError) as exc_info:
        d(1000).div(30)
    assert (exc_info.value.numerator, exc_info.value.denominator) == (100, 3)


@pytest.mark.parametrize(
    "a, b, significant_digits, expected",
    [
        (d(1), d(3), 2, d("0.33")),
        (d(2), d(3), 3, d("0.667")),
        (d(-2), d(3), 2, d("-0.67")),
        (d(1000), d(30), 4, d("33.33")),
        (d(200), d(3), 2, d(67)),
        (d(20000), d(3), 2, d(6700)),
        (d(1), d(8), 5, d("0.125")),
        (d(1), d(4), 1, d("0.3")),
        (d("9.99"), d(1), 2, d(10)),
        (d(0), d(3), 2, d(0)),
    ],
)
def test_div_with_significant_digits(a: Decimal, b: Decimal, significant_digits: int, expected: Decimal) -> None:
    assert a.div(b, significant_digits).eq(expected)


def test_div_with_significant_digits_logs_rounding(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="exact_decimal.domain.decimal_value"):
        d(1).div(3, 2)
    assert "1/3" in caplog.text


@pytest.mark.parametrize("significant_digits", [0, -1, 1.5])
def test_div_rejects_invalid_significant_digits(significant_digits: object) -> None:
    with pytest.raises(InvalidArgumentError, match=r"\$significant_digits"):
        d(1).div(3, significant_digits)  # type: ignore[arg-type]


@pytest.mark.parametrize("a", [d(1), d(0)])
def test_div_by_zero(a: Decimal) -> None:
    with pytest.raises(DecimalDivisionByZeroError):
        a.div(0)
    with pytest.raises(ZeroDivisionError):
        a.div(0, 5)


@pytest.mark.parametrize(
    "value, expected",
    [(d(1000), d(0.001)), (d(0.2), d(5)), (d(1), d(1)), (d(0.5), d(2)), (d(0.25), d(4)), (d(-8), d("-0.125"))],
)
def test_inv(value: Decimal, expected: Decimal) -> None:
    assert value.inv().eq(expected)


def test_inv_non_terminating() -> None:
    with pytest.raises(NonTerminatingDecimalError):
        d(3).inv()
    assert d(3).inv(3).eq("0.333")


# endregion

# region Mod


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (d(1000), d(2), d(0)),
        (d(1000), d(3), d(1)),
        (d(1000), d(0.2), d(0)),
        (d(1000), d(0.3), d(0.1)),
        (d(1), d(8), d(1)),
        (d(17.5), d(3), d(2.5)),
        (d(1), d(3), d(1)),
        (d(1000), d(30), d(10)),
        (d(-1), d(3), d(2)),
        (d(-17.5), d(3), d(0.5)),
        (d(7), d(-3), d(1)),
        (d(-7), d(-3), d(2)),
    ],
)
def test_mod_is_euclidean(a: Decimal, b: Decimal, expected: Decimal) -> None:
    assert a.mod(b).eq(expected)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", [d(3), d(-3), d("0.7"), d("-0.07"), d("1e-30")])
def test_mod_result_is_within_divisor_range(a: Decimal, b: Decimal) -> None:
    result = a.mod(b)
    assert result.gte0()
    assert result.lt(b.abs())
    assert result.eq(a.mod(b.neg()))


def test_mod_by_zero() -> None:
    with pytest.raises(DecimalDivisionByZeroError):
        d(5).mod(0)


# endregion

# region Pow / E


@pytest.mark.parametrize(
    "a, n, expected",
    [
        (d(2), 1, d(2)),
        (d(2), 0, d(1)),
        (d(2), 2, d(4)),
        (d(2), -1, d(0.5)),
        (d(2), -2, d(0.25)),
        (d(0.2), 1, d(0.2)),
        (d(0.2), 0, d(1)),
        (d(0.2), 2, d(0.04)),
        (d(0.2), 3, d(0.008)),
        (d(0.2), -1, d(5)),
        (d(0.2), -2, d(25)),
        (d(3), 1, d(3)),
        (d(3), 0, d(1)),
        (d(3), 2, d(9)),
        (d(-2), 1, d(-2)),
        (d(-2), 0, d(1)),
        (d(-2), 2, d(4)),
        (d(-2), -1, d(-0.5)),
        (d(-2), -2, d(0.25)),
        (d(-0.5), 3, d(-0.125)),
        (d(10), 3, d(1000)),
        (d(0), 3, d(0)),
    ],
)
def test_pow(a: Decimal, n: int, expected: Decimal) -> None:
    assert a.pow(n).eq(expected)


def test_pow_negative_exponent_needs_terminating_reciprocal() -> None:
    with pytest.raises(NonTerminatingDecimalError):
        d(3).pow(-1)
    with pytest.raises(DecimalDivisionByZeroError):
        d(0).pow(-1)


@pytest.mark.parametrize("n", [1.5, "2", True])
def test_pow_rejects_non_integer_exponent(n: object) -> None:
    with pytest.raises(InvalidArgumentError, match=r"\$n must be an integer"):
        d(2).pow(n)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value, exponent, expected",
    [(d("1.23"), 2, d(123)), (d("1.23"), -3, d("0.00123")), (d(5), 0, d(5)), (d(0), 5, d(0))],
)
def test_e_shifts_decimal_point(value: Decimal, exponent: int, expected: Decimal) -> None:
    result = value.e(exponent)
    assert (result.mantissa, result.exponent) == (expected.mantissa, expected.exponent)


# endregion
