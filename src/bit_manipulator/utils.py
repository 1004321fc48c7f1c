"""
Utility functions for low-level bit reinterpretation and buffer management.
"""

from typing import List, Tuple, Union

from .config import IntegerTypeLike, resolve_integer_type
from .constants import ByteOrder

_MASK32 = 0xFFFFFFFF


def to_unsigned(value: int, bits: int) -> int:
    """Returns the two's-complement bit pattern of value truncated to bits."""
    return value & ((1 << bits) - 1)


def to_signed(pattern: int, bits: int) -> int:
    """Reinterprets an unsigned bit pattern of the given width as a signed integer."""
    sign_bit = 1 << (bits - 1)
    if pattern & sign_bit:
        return pattern - (1 << bits)
    return pattern


def split_hi_lo(pattern: int) -> Tuple[int, int]:
    """Splits a 64-bit pattern into its more and less significant 32-bit halves."""
    return (pattern >> 32) & _MASK32, pattern & _MASK32


def join_hi_lo(hi: int, lo: int) -> int:
    """Inverse of split_hi_lo."""
    return ((hi & _MASK32) << 32) | (lo & _MASK32)


def byte_shifts(size: int, order: ByteOrder) -> range:
    """
    Bit shift for each byte position of a packed value, in buffer order.
    Big-endian starts from the most significant byte.
    """
    top = 8 * (size - 1)
    if order is ByteOrder.BIG:
        return range(top, -1, -8)
    return range(0, top + 1, 8)


def buffer_append(
    buffer: Union[List[int], bytearray],
    number: int,
    int_type: IntegerTypeLike,
    order: Union[ByteOrder, str] = ByteOrder.BIG,
) -> None:
    """Appends an integer of the given type to the buffer."""
    spec = resolve_integer_type(int_type)
    spec.check_value(number)
    pattern = to_unsigned(number, spec.bits)
    for shift in byte_shifts(spec.size, ByteOrder(order)):
        buffer.append((pattern >> shift) & 0xFF)
