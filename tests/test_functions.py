import math
from fractions import Fraction

import pytest

from mutable_types import (
    MutableType,
    MutableBool,
    MutableInteger,
    MutableRational,
    MutableReal,
    MutableComplex,
    TypeMismatch,
    InvalidArgument,
    DivideByZero,
    approx_equal,
    rational_divide,
)
from mutable_types import functions as mf


def test_approx_equal_at_single_precision() -> None:
    assert approx_equal(MutableReal(1.0000001), MutableReal(1.0000002))
    assert not approx_equal(MutableReal(1.0), MutableReal(1.1))
    assert approx_equal(1, MutableReal(1.0000001))
    assert approx_equal(MutableComplex(1 + 1j), 1.0000001 + 1j)
    assert not approx_equal(MutableComplex(1 + 1j), 1 + 1.1j)


def test_approx_equal_needs_a_float_operand() -> None:
    with pytest.raises(TypeMismatch):
        approx_equal(MutableInteger(1), MutableInteger(1))
    with pytest.raises(TypeMismatch):
        approx_equal(MutableBool(True), 1.0)


def test_rational_divide() -> None:
    assert rational_divide(MutableInteger(1), MutableInteger(3)) == Fraction(1, 3)
    assert rational_divide(MutableRational(Fraction(1, 2)), 2) == Fraction(1, 4)
    assert type(rational_divide(4, MutableInteger(2))) is Fraction
    with pytest.raises(DivideByZero):
        rational_divide(MutableRational(Fraction(1, 2)), 0)
    with pytest.raises(TypeMismatch):
        rational_divide(MutableReal(1.0), 2)


def test_sign_keeps_the_kind() -> None:
    assert mf.sign(MutableInteger(-5)) == -1
    assert type(mf.sign(MutableInteger(0))) is int
    assert mf.sign(MutableRational(Fraction(3, 4))) == Fraction(1)
    assert type(mf.sign(MutableRational(Fraction(3, 4)))) is Fraction
    assert mf.sign(MutableReal(2.5)) == 1.0
    assert math.copysign(1.0, mf.sign(MutableReal(-0.0))) == -1.0
    assert math.isnan(mf.sign(MutableReal(math.nan)))
    assert mf.sign(MutableComplex(3 + 4j)) == pytest.approx(0.6 + 0.8j)
    assert mf.sign(MutableComplex(0j)) == 0j


def test_numerator_and_denominator() -> None:
    assert mf.numerator(MutableRational(Fraction(6, 4))) == 3
    assert mf.denominator(MutableRational(Fraction(6, 4))) == 2
    assert mf.denominator(MutableInteger(5)) == 1
    with pytest.raises(TypeMismatch):
        mf.numerator(MutableReal(0.5))


def test_rounding_family() -> None:
    assert mf.round_(MutableReal(2.5)) == 2.0
    assert mf.round_(MutableReal(3.5)) == 4.0
    assert mf.ceil(MutableReal(1.2)) == 2.0
    assert mf.floor(MutableReal(-1.2)) == -2.0
    assert mf.trunc(MutableRational(Fraction(-7, 2))) == -3.0
    assert mf.floor(MutableInteger(5)) == 5.0
    with pytest.raises(TypeMismatch):
        mf.ceil(MutableComplex(1j))


@pytest.mark.parametrize("fn", [mf.round_, mf.ceil, mf.floor, mf.trunc])
def test_rounding_family_gives_floats(fn) -> None:
    for box in (MutableInteger(3), MutableRational(Fraction(7, 2)), MutableReal(-2.5)):
        assert type(fn(box)) is float
    assert fn(MutableReal(math.inf)) == math.inf
    assert fn(-math.inf) == -math.inf
    assert math.isnan(fn(MutableReal(math.nan)))


def test_non_complex_functions() -> None:
    assert mf.cbrt(MutableReal(-27.0)) == pytest.approx(-3.0)
    assert mf.cbrt(MutableInteger(8)) == pytest.approx(2.0)
    assert mf.atan2(MutableReal(1.0), MutableReal(1.0)) == pytest.approx(math.pi / 4)
    assert mf.atan(MutableInteger(-1), MutableInteger(0)) == pytest.approx(-math.pi / 2)
    with pytest.raises(TypeMismatch):
        mf.cbrt(MutableComplex(8 + 0j))


def test_complex_accessors() -> None:
    z = MutableComplex(3 + 4j)
    assert mf.abs2(z) == 25.0
    assert mf.real(z) == 3.0
    assert mf.imag(z) == 4.0
    assert mf.conj(z) == 3 - 4j
    assert mf.angle(MutableComplex(1j)) == pytest.approx(math.pi / 2)
    assert mf.abs2(MutableReal(-3.0)) == 9.0
    assert mf.imag(MutableReal(2.0)) == 0.0


def test_real_input_gives_float() -> None:
    assert mf.sqrt(MutableReal(4.0)) == 2.0
    assert type(mf.sqrt(MutableInteger(9))) is float
    assert mf.sqrt(MutableRational(Fraction(1, 4))) == 0.5
    assert mf.log2(MutableReal(8.0)) == pytest.approx(3.0)
    assert mf.log10(1000) == pytest.approx(3.0)
    assert mf.exp2(MutableInteger(3)) == pytest.approx(8.0)
    assert mf.exp10(MutableInteger(2)) == pytest.approx(100.0)
    assert mf.exp(0) == 1.0
    assert mf.sin(MutableReal(0.0)) == 0.0
    assert mf.cosh(MutableReal(0.0)) == 1.0
    assert mf.atan(MutableReal(1.0)) == pytest.approx(math.pi / 4)


def test_complex_input_gives_complex() -> None:
    assert mf.sqrt(MutableComplex(-4 + 0j)) == pytest.approx(2j)
    assert mf.exp(MutableComplex(0j)) == 1 + 0j
    assert mf.exp2(MutableComplex(3 + 0j)) == pytest.approx(8 + 0j)
    assert mf.exp10(MutableComplex(2 + 0j)) == pytest.approx(100 + 0j)
    assert mf.log2(MutableComplex(8 + 0j)) == pytest.approx(3 + 0j)
    assert type(mf.atan(MutableComplex(1j / 2))) is complex
    assert type(mf.tanh(MutableComplex(1 + 1j))) is complex


@pytest.mark.parametrize(
    "fn, value",
    [
        (mf.sqrt, -1.0),
        (mf.log10, -10),
        (mf.asin, 2.0),
        (mf.acosh, 0.5),
    ],
)
def test_real_domain_errors(fn, value) -> None:
    with pytest.raises(InvalidArgument):
        fn(MutableReal(value))


@pytest.mark.parametrize(
    "fn, value, expected",
    [
        (mf.exp, 1000.0, math.inf),
        (mf.exp2, 2000, math.inf),
        (mf.exp10, 400.0, math.inf),
        (mf.cosh, -1000.0, math.inf),
        (mf.sinh, 1000.0, math.inf),
        (mf.sinh, -1000.0, -math.inf),
        (mf.log, 0.0, -math.inf),
        (mf.log, -0.0, -math.inf),
        (mf.log2, 0, -math.inf),
        (mf.log10, 0.0, -math.inf),
        (mf.atanh, 1.0, math.inf),
        (mf.atanh, -1.0, -math.inf),
    ],
)
def test_overflow_and_poles_give_infinities(fn, value, expected) -> None:
    assert fn(value) == expected
    assert fn(MutableReal(value)) == expected


def test_large_finite_results_do_not_overflow() -> None:
    assert mf.exp(MutableReal(-1000.0)) == 0.0
    assert mf.exp10(MutableReal(-400.0)) == 0.0
    assert mf.exp(MutableReal(700.0)) == pytest.approx(math.exp(700.0))


def test_booleans_are_refused() -> None:
    with pytest.raises(TypeMismatch):
        mf.sqrt(MutableBool(True))
    with pytest.raises(TypeMismatch):
        mf.sqrt(True)
    with pytest.raises(TypeMismatch):
        mf.sign(MutableBool(False))


def test_functions_never_return_boxes() -> None:
    forwards = [mf.sqrt, mf.sin, mf.cos, mf.tan, mf.sinh, mf.cosh, mf.tanh,
                mf.atan, mf.asinh, mf.exp, mf.exp2, mf.exp10, mf.sign, mf.abs2,
                mf.real, mf.imag, mf.conj, mf.angle]
    for fn in forwards:
        for box in (MutableInteger(1), MutableRational(Fraction(1, 2)),
                    MutableReal(0.5), MutableComplex(0.5 + 0.5j)):
            assert not isinstance(fn(box), MutableType)


def test_forwarded_functions_are_named() -> None:
    assert mf.sqrt.__name__ == "sqrt"
    assert mf.log.__name__ == "log"
