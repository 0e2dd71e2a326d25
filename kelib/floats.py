"""Floating-point classification and modulus."""

from __future__ import annotations

import math
import struct

_FLOAT64_EXPONENT_MASK = 0x7FF0000000000000


def is_nan(value: float) -> bool:
    """True if value is NaN."""
    return math.isnan(value)


def is_infinite(value: float) -> bool:
    """True if all exponent bits are set, which holds for infinities and NaN."""
    (raw,) = struct.unpack("<Q", struct.pack("<d", float(value)))
    return (raw & _FLOAT64_EXPONENT_MASK) == _FLOAT64_EXPONENT_MASK


def float_modulo(left: float, right: float) -> float:
    """Return r with left = I * right + r for an integer I, truncating toward zero.

    The result is NaN if either operand is NaN, left is infinite or right is
    zero. An infinite right gives left unchanged, and a signed zero left is
    returned as is.
    """
    left = float(left)
    right = float(right)
    if math.isnan(left) or math.isnan(right) or math.isinf(left) or right == 0.0:
        return math.nan
    if math.isinf(right) or left == 0.0:
        return left
    return math.fmod(left, right)