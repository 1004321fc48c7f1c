"""
Circular bit rotation of fixed-width integers.
Bits shifted out of one end re-enter at the other; no bit is lost.
"""

from .config import IntegerType, IntegerTypeLike, resolve_integer_type
from .utils import to_signed, to_unsigned
from .validation import check_distance, check_rotation_type


def _rotate_pattern(pattern: int, distance: int, bits: int) -> int:
    # Zero and full-width rotations are identities; the shift formula is not used for them.
    distance %= bits
    if distance == 0:
        return pattern
    return ((pattern << distance) | (pattern >> (bits - distance))) & ((1 << bits) - 1)


def _rotate(value: int, distance: int, spec: IntegerType) -> int:
    rotated = _rotate_pattern(to_unsigned(value, spec.bits), distance, spec.bits)
    return to_signed(rotated, spec.bits) if spec.signed else rotated


def _checked_type(value: int, distance: int, int_type: IntegerTypeLike) -> IntegerType:
    spec = resolve_integer_type(int_type)
    check_rotation_type(spec)
    check_distance(distance, spec.bits)
    spec.check_value(value)
    return spec


def rotate_left_unchecked(value: int, distance: int, int_type: IntegerTypeLike) -> int:
    """Rotate left without validation; distance is taken modulo the width."""
    return _rotate(value, distance, resolve_integer_type(int_type))


def rotate_right_unchecked(value: int, distance: int, int_type: IntegerTypeLike) -> int:
    """Rotate right without validation; distance is taken modulo the width."""
    return _rotate(value, -distance, resolve_integer_type(int_type))


def rotate_left(value: int, distance: int, int_type: IntegerTypeLike) -> int:
    """
    Rotate value left by distance bits (value <<< distance).

    Args:
        value: Integer to rotate. Must fit int_type.
        distance: Number of bit positions, 0 to the type width inclusive.
        int_type: IntegerType or type name ('int8' ... 'uint64').

    Returns:
        The rotated integer, in the signedness of int_type.

    Raises:
        InvalidRangeError: distance < 0 or distance > width.
        ValueError: value out of range for int_type.
    """
    return _rotate(value, distance, _checked_type(value, distance, int_type))


def rotate_right(value: int, distance: int, int_type: IntegerTypeLike) -> int:
    """
    Rotate value right by distance bits (value >>> distance).
    Same argument contract as rotate_left.
    """
    return _rotate(value, -distance, _checked_type(value, distance, int_type))
