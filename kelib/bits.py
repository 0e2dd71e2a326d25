"""Bit scanning, alignment and overflow-checked unsigned arithmetic."""

from __future__ import annotations

MALLOC_ALIGNMENT = 16
KB = 1024
MB = 1024 * KB
GB = 1024 * MB

UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1


def _check_unsigned(value: int, bits: int, name: str = "value") -> None:
    if value < 0 or value >> bits:
        raise ValueError(f"{name} {value!r} does not fit in an unsigned {bits}-bit integer")


def _check_nonzero(value: int, bits: int) -> None:
    _check_unsigned(value, bits)
    if value == 0:
        raise ValueError("number must be non-zero")


def _check_alignment(alignment: int) -> None:
    if not is_power_of_two(alignment):
        raise ValueError(f"alignment {alignment!r} is not a power of two")


def log2(number: int) -> int:
    """Index of the highest set bit of a positive integer."""
    if number <= 0:
        raise ValueError("log2 requires a positive number")
    return number.bit_length() - 1


def find_leftmost_bit32(number: int) -> int:
    """Index of the highest set bit of a non-zero 32-bit value."""
    _check_nonzero(number, 32)
    return number.bit_length() - 1


def find_leftmost_bit64(number: int) -> int:
    """Index of the highest set bit of a non-zero 64-bit value."""
    _check_nonzero(number, 64)
    return number.bit_length() - 1


def find_rightmost_bit(number: int) -> int:
    """Index of the lowest set bit of a non-zero 64-bit value."""
    _check_nonzero(number, 64)
    return (number & -number).bit_length() - 1


def is_power_of_two(value: int) -> bool:
    """True if value is a positive power of two."""
    return value > 0 and not value & (value - 1)


def align(count: int, alignment: int) -> int:
    """Round count up to the next multiple of a power-of-two alignment."""
    _check_alignment(alignment)
    return count + (alignment - (count % alignment)) % alignment


def is_uint_add_safe(a: int, b: int, bits: int = 64) -> bool:
    """True unless an operand's highest bit lies beyond the given width."""
    if not a or not b:
        return True
    return log2(a) < bits and log2(b) < bits


def is_uint32_add_safe(a: int, b: int) -> bool:
    return is_uint_add_safe(a, b, 32)


def is_uint64_add_safe(a: int, b: int) -> bool:
    return is_uint_add_safe(a, b, 64)


def is_uint_multiply_safe(a: int, b: int, bits: int = 64) -> bool:
    """Conservative check that a * b fits in an unsigned integer of the given width."""
    if a <= 1 or b <= 1:
        return True
    return log2(a) + log2(b) < bits


def is_uint32_multiply_safe(a: int, b: int) -> bool:
    return is_uint_multiply_safe(a, b, 32)


def is_uint64_multiply_safe(a: int, b: int) -> bool:
    return is_uint_multiply_safe(a, b, 64)


def is_aligned(addr: int, alignment: int) -> bool:
    """True if addr is a multiple of the power-of-two alignment."""
    _check_alignment(alignment)
    return not addr & (alignment - 1)


def aligned_base(addr: int, alignment: int) -> int:
    """Round addr down to a multiple of the power-of-two alignment."""
    _check_alignment(alignment)
    return addr & ~(alignment - 1)


def set_pointer_bits(ptr: int, bits: int) -> int:
    """Tag the low bits of an address."""
    return ptr | bits


def get_pointer_bits(ptr: int, num_bits: int) -> int:
    """Read the low num_bits tag bits of an address."""
    return ptr & ((1 << num_bits) - 1)


def clear_pointer_bits(ptr: int, num_bits: int) -> int:
    """Strip the low num_bits tag bits from an address."""
    return ptr & ~((1 << num_bits) - 1)


def try_uint64_multiply(left: int, right: int) -> int | None:
    """Product of two 64-bit values, or None if it overflows."""
    _check_unsigned(left, 64, "left")
    _check_unsigned(right, 64, "right")
    result = left * right
    return result if result <= UINT64_MAX else None


def try_uint32_add(left: int, right: int) -> int | None:
    """Sum of two 32-bit values, or None if it overflows."""
    _check_unsigned(left, 32, "left")
    _check_unsigned(right, 32, "right")
    result = left + right
    return result if result <= UINT32_MAX else None


def try_uint64_add(left: int, right: int) -> int | None:
    """Sum of two 64-bit values, or None if it overflows."""
    _check_unsigned(left, 64, "left")
    _check_unsigned(right, 64, "right")
    result = left + right
    return result if result <= UINT64_MAX else None