import math

import pytest

from kelib import floats


def test_is_nan():
    assert floats.is_nan(math.nan) is True
    assert floats.is_nan(1.0) is False
    assert floats.is_nan(math.inf) is False


def test_is_infinite_covers_all_ones_exponent():
    assert floats.is_infinite(math.inf) is True
    assert floats.is_infinite(-math.inf) is True
    assert floats.is_infinite(math.nan) is True
    assert floats.is_infinite(1e308) is False
    assert floats.is_infinite(0.0) is False


@pytest.mark.parametrize(
    "left,right",
    [(math.nan, 2.0), (2.0, math.nan), (math.inf, 2.0), (-math.inf, 3.0), (5.5, 0.0), (5.5, -0.0)],
)
def test_float_modulo_nan_cases(left, right):
    result = floats.float_modulo(left, right)
    assert str(result) == "nan"
    assert math.isnan(result) is True


def test_float_modulo_infinite_divisor_returns_left():
    assert floats.float_modulo(42.0, math.inf) == 42.0
    assert floats.float_modulo(-42.0, -math.inf) == -42.0


def test_float_modulo_keeps_signed_zero():
    result = floats.float_modulo(-0.0, -5.0)
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0
    positive = floats.float_modulo(0.0, 3.0)
    assert math.copysign(1.0, positive) == 1.0


@pytest.mark.parametrize(
    "left,right",
    [(7.5, 2.0), (-7.5, 2.0), (7.5, -2.0), (100.25, 0.5), (1e10, 3.0), (-0.3, 0.1)],
)
def test_float_modulo_invariant(left, right):
    r = floats.float_modulo(left, right)
    quotient = (left - r) / right
    assert quotient == pytest.approx(round(quotient))
    assert abs(r) < abs(right)
    assert r == 0.0 or math.copysign(1.0, r) == math.copysign(1.0, left)