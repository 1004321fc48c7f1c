"""
Conversion between fixed-width integers and their big-endian or little-endian
byte representation.

Every operation comes in two flavours. The checked entry points validate all of
their arguments before touching a buffer and raise from ``errors`` on misuse.
The ``*_unchecked`` entry points do no validation at all; they are the hot path
for callers that already established bounds (the checked array functions
validate once and then call them). Out-of-bounds use of an unchecked function
is the caller's bug: Python may raise IndexError, or a negative offset may
quietly address the buffer from its end.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, MutableSequence, Sequence, Tuple, Union

from . import bulk
from .config import IntegerType, IntegerTypeLike, resolve_integer_type
from .constants import ByteOrder
from .utils import byte_shifts, join_hi_lo, split_hi_lo, to_signed, to_unsigned
from .validation import (
    check_buffer_offset,
    check_codec_type,
    check_pack_array_arguments,
    check_unpack_array_arguments,
    check_values_fit,
)

ReadableBuffer = Union[bytes, bytearray, memoryview, Sequence[int]]
WritableBuffer = Union[bytearray, memoryview, MutableSequence[int]]
OrderLike = Union[ByteOrder, str]


def _resolve(int_type: IntegerTypeLike, order: OrderLike) -> Tuple[IntegerType, ByteOrder]:
    return resolve_integer_type(int_type), ByteOrder(order)


def _resolve_checked(int_type: IntegerTypeLike, order: OrderLike) -> Tuple[IntegerType, ByteOrder]:
    spec, byte_order = _resolve(int_type, order)
    check_codec_type(spec)
    return spec, byte_order


# --- Core byte layout ---


def _write_pattern(
    pattern: int, bits: int, order: ByteOrder, buffer: WritableBuffer, offset: int
) -> None:
    # 64-bit values go out as two 32-bit halves; hi is always the more significant one.
    if bits == 64:
        hi, lo = split_hi_lo(pattern)
        first, second = (hi, lo) if order is ByteOrder.BIG else (lo, hi)
        _write_pattern(first, 32, order, buffer, offset)
        _write_pattern(second, 32, order, buffer, offset + 4)
        return

    for k, shift in enumerate(byte_shifts(bits // 8, order)):
        buffer[offset + k] = (pattern >> shift) & 0xFF


def _read_pattern(buffer: ReadableBuffer, offset: int, bits: int, order: ByteOrder) -> int:
    if bits == 64:
        first = _read_pattern(buffer, offset, 32, order)
        second = _read_pattern(buffer, offset + 4, 32, order)
        if order is ByteOrder.BIG:
            return join_hi_lo(first, second)
        return join_hi_lo(second, first)

    pattern = 0
    for k, shift in enumerate(byte_shifts(bits // 8, order)):
        pattern |= (int(buffer[offset + k]) & 0xFF) << shift
    return pattern


def _decode(pattern: int, spec: IntegerType) -> int:
    # Reinterpret only the fully composed pattern, never individual bytes.
    return to_signed(pattern, spec.bits) if spec.signed else pattern


# --- Scalar, unchecked ---


def pack_unchecked(value: int, int_type: IntegerTypeLike, order: OrderLike) -> bytearray:
    """Pack value into a new buffer; value is truncated to the type width."""
    spec, byte_order = _resolve(int_type, order)
    out = bytearray(spec.size)
    _write_pattern(to_unsigned(value, spec.bits), spec.bits, byte_order, out, 0)
    return out


def pack_into_unchecked(
    value: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
    buffer: WritableBuffer,
    offset: int = 0,
) -> None:
    spec, byte_order = _resolve(int_type, order)
    _write_pattern(to_unsigned(value, spec.bits), spec.bits, byte_order, buffer, offset)


def unpack_unchecked(
    buffer: ReadableBuffer, int_type: IntegerTypeLike, order: OrderLike, offset: int = 0
) -> int:
    spec, byte_order = _resolve(int_type, order)
    return _decode(_read_pattern(buffer, offset, spec.bits, byte_order), spec)


# --- Scalar, checked ---


def pack(value: int, int_type: IntegerTypeLike, order: OrderLike) -> bytearray:
    """
    Pack an integer into a newly allocated buffer of exactly size bytes.

    Args:
        value: Integer to pack. Must fit int_type.
        int_type: IntegerType or type name (e.g. 'int32').
        order: ByteOrder or 'big' / 'little'.

    Returns:
        A bytearray holding the packed value.

    Raises:
        ValueError: value out of range for int_type, or int_type not 16/32/64-bit.
    """
    spec, byte_order = _resolve_checked(int_type, order)
    spec.check_value(value)
    return pack_unchecked(value, spec, byte_order)


def pack_into(
    value: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
    buffer: Optional[WritableBuffer],
    offset: int = 0,
) -> None:
    """
    Pack an integer into buffer at offset.

    Raises:
        NullArgumentError: buffer is None.
        InvalidRangeError: offset < 0 or offset > len(buffer) - size.
        ValueError: value out of range for int_type.
    """
    spec, byte_order = _resolve_checked(int_type, order)
    check_buffer_offset(buffer, offset, spec.size)
    spec.check_value(value)
    pack_into_unchecked(value, spec, byte_order, buffer, offset)  # type: ignore[arg-type]


def unpack(
    buffer: Optional[ReadableBuffer],
    int_type: IntegerTypeLike,
    order: OrderLike,
    offset: int = 0,
) -> int:
    """
    Unpack an integer of int_type from buffer at offset.

    Raises:
        NullArgumentError: buffer is None.
        InvalidRangeError: offset < 0 or offset > len(buffer) - size.
    """
    spec, byte_order = _resolve_checked(int_type, order)
    check_buffer_offset(buffer, offset, spec.size)
    return unpack_unchecked(buffer, spec, byte_order, offset)  # type: ignore[arg-type]


# --- Arrays, unchecked ---


def pack_array_unchecked(
    values: Sequence[int],
    src_offset: int,
    buffer: WritableBuffer,
    dst_offset: int,
    count: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
) -> None:
    """Pack values[src_offset:src_offset + count] into buffer starting at dst_offset."""
    spec, byte_order = _resolve(int_type, order)
    if bulk.use_bulk(count, spec.size):
        bulk.pack_span(values, src_offset, buffer, dst_offset, count, spec, byte_order)
        return

    for i in range(count):
        pattern = to_unsigned(int(values[src_offset + i]), spec.bits)
        _write_pattern(pattern, spec.bits, byte_order, buffer, dst_offset + i * spec.size)


def unpack_array_unchecked(
    buffer: ReadableBuffer,
    src_offset: int,
    values: MutableSequence[int],
    dst_offset: int,
    count: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
) -> None:
    """Unpack count values from buffer at src_offset into values[dst_offset:]."""
    spec, byte_order = _resolve(int_type, order)
    if bulk.use_bulk(count, spec.size):
        bulk.unpack_span(buffer, src_offset, values, dst_offset, count, spec, byte_order)
        return

    for i in range(count):
        pattern = _read_pattern(buffer, src_offset + i * spec.size, spec.bits, byte_order)
        values[dst_offset + i] = _decode(pattern, spec)


# --- Arrays, checked ---


def pack_array(
    values: Optional[Sequence[int]],
    src_offset: int,
    buffer: Optional[WritableBuffer],
    dst_offset: int,
    count: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
) -> None:
    """
    Pack count integers from values (starting at src_offset) into buffer
    (starting at dst_offset), each taking size bytes.

    Equivalent to calling pack_into for each value at successive offsets.

    Raises:
        NullArgumentError: values or buffer is None.
        InvalidRangeError: negative offset or count, count too large for either
            array, or an offset at or beyond the end of its array.
        InvalidArgumentCombinationError: an in-bounds offset whose span overflows.
        ValueError: a value in the span is out of range for int_type.
    """
    spec, byte_order = _resolve_checked(int_type, order)
    check_pack_array_arguments(values, src_offset, buffer, dst_offset, count, spec.size)
    check_values_fit(values, src_offset, count, spec)
    pack_array_unchecked(
        values, src_offset, buffer, dst_offset, count, spec, byte_order  # type: ignore[arg-type]
    )


def unpack_array(
    buffer: Optional[ReadableBuffer],
    src_offset: int,
    values: Optional[MutableSequence[int]],
    dst_offset: int,
    count: int,
    int_type: IntegerTypeLike,
    order: OrderLike,
) -> None:
    """
    Unpack count integers from buffer (starting at src_offset) into values
    (starting at dst_offset). Mirror of pack_array, same error contract.
    """
    spec, byte_order = _resolve_checked(int_type, order)
    check_unpack_array_arguments(buffer, src_offset, values, dst_offset, count, spec.size)
    unpack_array_unchecked(
        buffer, src_offset, values, dst_offset, count, spec, byte_order  # type: ignore[arg-type]
    )


# --- Bound codecs ---


@dataclass(frozen=True)
class IntegerCodec:
    """
    Codec bound to one integer type and byte order, in the spirit of struct.Struct.
    """

    int_type: IntegerType
    order: ByteOrder

    def __post_init__(self) -> None:
        # Accept type names and order strings like the module-level functions do.
        object.__setattr__(self, "int_type", resolve_integer_type(self.int_type))
        object.__setattr__(self, "order", ByteOrder(self.order))
        check_codec_type(self.int_type)

    @property
    def size(self) -> int:
        return self.int_type.size

    def pack(self, value: int) -> bytearray:
        return pack(value, self.int_type, self.order)

    def pack_into(self, value: int, buffer: Optional[WritableBuffer], offset: int = 0) -> None:
        pack_into(value, self.int_type, self.order, buffer, offset)

    def unpack(self, buffer: Optional[ReadableBuffer], offset: int = 0) -> int:
        return unpack(buffer, self.int_type, self.order, offset)

    def pack_array(
        self,
        values: Optional[Sequence[int]],
        src_offset: int,
        buffer: Optional[WritableBuffer],
        dst_offset: int,
        count: int,
    ) -> None:
        pack_array(values, src_offset, buffer, dst_offset, count, self.int_type, self.order)

    def unpack_array(
        self,
        buffer: Optional[ReadableBuffer],
        src_offset: int,
        values: Optional[MutableSequence[int]],
        dst_offset: int,
        count: int,
    ) -> None:
        unpack_array(buffer, src_offset, values, dst_offset, count, self.int_type, self.order)

    def pack_unchecked(self, value: int) -> bytearray:
        return pack_unchecked(value, self.int_type, self.order)

    def pack_into_unchecked(self, value: int, buffer: WritableBuffer, offset: int = 0) -> None:
        pack_into_unchecked(value, self.int_type, self.order, buffer, offset)

    def unpack_unchecked(self, buffer: ReadableBuffer, offset: int = 0) -> int:
        return unpack_unchecked(buffer, self.int_type, self.order, offset)

    def pack_array_unchecked(
        self,
        values: Sequence[int],
        src_offset: int,
        buffer: WritableBuffer,
        dst_offset: int,
        count: int,
    ) -> None:
        pack_array_unchecked(
            values, src_offset, buffer, dst_offset, count, self.int_type, self.order
        )

    def unpack_array_unchecked(
        self,
        buffer: ReadableBuffer,
        src_offset: int,
        values: MutableSequence[int],
        dst_offset: int,
        count: int,
    ) -> None:
        unpack_array_unchecked(
            buffer, src_offset, values, dst_offset, count, self.int_type, self.order
        )


@lru_cache(maxsize=None)
def _shared_codec(type_name: str, order: ByteOrder) -> IntegerCodec:
    return IntegerCodec(resolve_integer_type(type_name), order)


def get_codec(type_name: str, order: OrderLike) -> IntegerCodec:
    """Return the shared codec for a standard type name and byte order."""
    return _shared_codec(type_name.lower(), ByteOrder(order))


INT16_BE = get_codec("int16", ByteOrder.BIG)
INT16_LE = get_codec("int16", ByteOrder.LITTLE)
UINT16_BE = get_codec("uint16", ByteOrder.BIG)
UINT16_LE = get_codec("uint16", ByteOrder.LITTLE)
INT32_BE = get_codec("int32", ByteOrder.BIG)
INT32_LE = get_codec("int32", ByteOrder.LITTLE)
UINT32_BE = get_codec("uint32", ByteOrder.BIG)
UINT32_LE = get_codec("uint32", ByteOrder.LITTLE)
INT64_BE = get_codec("int64", ByteOrder.BIG)
INT64_LE = get_codec("int64", ByteOrder.LITTLE)
UINT64_BE = get_codec("uint64", ByteOrder.BIG)
UINT64_LE = get_codec("uint64", ByteOrder.LITTLE)
