"""Tests for circular bit rotation."""

import pytest
from typing import Callable, List

from bit_manipulator.config import get_integer_type, IntegerType
from bit_manipulator.errors import InvalidRangeError
from bit_manipulator.rotation import (
    rotate_left,
    rotate_left_unchecked,
    rotate_right,
    rotate_right_unchecked,
)


def test_rotate_left_known_values() -> None:
    assert rotate_left(0x12, 4, "uint8") == 0x21
    assert rotate_left(0x80000001, 1, "uint32") == 0x00000003
    assert rotate_left(0x1234, 8, "int16") == 0x3412
    assert rotate_left(0x0123456789ABCDEF, 16, "uint64") == 0x456789ABCDEF0123


def test_rotate_right_known_values() -> None:
    assert rotate_right(1, 1, "uint32") == 0x80000000
    assert rotate_right(0x0123456789ABCDEF, 4, "uint64") == 0xF0123456789ABCDE
    assert rotate_right(0x0102, 8, "uint16") == 0x0201


def test_rotation_keeps_signedness() -> None:
    assert rotate_left(-128, 1, "int8") == 1  # 0x80 -> 0x01
    assert rotate_right(1, 1, "int8") == -128
    assert rotate_left(0x4000, 1, "int16") == -32768
    assert rotate_left(-1, 13, "int64") == -1


def test_zero_and_full_width_are_identity(
    rotation_type: IntegerType, boundary_values: Callable[[IntegerType], List[int]]
) -> None:
    for value in boundary_values(rotation_type):
        assert rotate_left(value, 0, rotation_type) == value
        assert rotate_right(value, 0, rotation_type) == value
        assert rotate_left(value, rotation_type.bits, rotation_type) == value
        assert rotate_right(value, rotation_type.bits, rotation_type) == value


def test_right_undoes_left(
    rotation_type: IntegerType, boundary_values: Callable[[IntegerType], List[int]]
) -> None:
    for value in boundary_values(rotation_type):
        for distance in range(rotation_type.bits + 1):
            rotated = rotate_right(value, distance, rotation_type)
            assert rotate_left(rotated, distance, rotation_type) == value


def test_composition(rotation_type: IntegerType) -> None:
    bits = rotation_type.bits
    value = rotation_type.min_value + 0x5A
    for a, b in [(1, 2), (3, bits - 1), (bits // 2, bits // 2 + 1), (bits, 5)]:
        once = rotate_left(value, (a + b) % bits, rotation_type)
        twice = rotate_left(rotate_left(value, a, rotation_type), b, rotation_type)
        assert once == twice


def test_rotation_preserves_bit_count(rotation_type: IntegerType) -> None:
    value = rotation_type.max_value - 6
    ones = bin(value & rotation_type.mask).count("1")
    for distance in range(rotation_type.bits + 1):
        rotated = rotate_left(value, distance, rotation_type)
        assert bin(rotated & rotation_type.mask).count("1") == ones


def test_negative_distance_rejected() -> None:
    with pytest.raises(InvalidRangeError, match="distance < 0") as exc_info:
        rotate_left(1, -1, "uint32")
    assert exc_info.value.param == "distance"
    assert exc_info.value.value == -1


def test_distance_past_width_rejected() -> None:
    with pytest.raises(InvalidRangeError, match="distance > 16"):
        rotate_right(1, 17, "int16")


def test_value_out_of_range_rejected() -> None:
    with pytest.raises(ValueError, match="out of uint8 range"):
        rotate_left(256, 1, "uint8")


def test_unchecked_wraps_distance() -> None:
    assert rotate_left_unchecked(1, 33, "uint32") == 2
    assert rotate_right_unchecked(1, 65, "uint64") == 1 << 63
    assert rotate_left_unchecked(1, -1, "uint8") == 0x80
    assert rotate_left_unchecked(0x1FF, 0, "uint8") == 0xFF  # masked to width


def test_custom_type_is_rejected() -> None:
    int24 = get_integer_type("int24", {"bits": 24, "signed": True})
    with pytest.raises(ValueError, match="int24 is not supported by rotation"):
        rotate_left(1, 1, int24)
    with pytest.raises(ValueError, match="int24 is not supported by rotation"):
        rotate_right(1, 1, int24)
