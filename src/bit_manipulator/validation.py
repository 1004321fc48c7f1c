"""
Argument checks shared by every checked entry point.

All checks run before any buffer is touched, so a failing call never leaves
a partially written buffer behind.
"""

from typing import Any, Optional, Sized

import numpy as np

from .config import IntegerType
from .constants import CODEC_WIDTHS, ROTATION_WIDTHS
from .errors import (
    InvalidArgumentCombinationError,
    InvalidRangeError,
    NullArgumentError,
)


def require(obj: Optional[Any], param: str) -> None:
    """Raise NullArgumentError if obj is None."""
    if obj is None:
        raise NullArgumentError(param)


def check_codec_type(spec: IntegerType) -> None:
    if spec.bits not in CODEC_WIDTHS:
        raise ValueError(
            f"{spec.name} is not supported by the endianness codec (widths: {CODEC_WIDTHS})"
        )


def check_rotation_type(spec: IntegerType) -> None:
    if spec.bits not in ROTATION_WIDTHS:
        raise ValueError(
            f"{spec.name} is not supported by rotation (widths: {ROTATION_WIDTHS})"
        )


def check_buffer_offset(
    buffer: Optional[Sized], offset: int, size: int, param: str = "buffer"
) -> None:
    """
    Validate a single-value access of size bytes at offset.

    Raises:
        NullArgumentError: buffer is None.
        InvalidRangeError: offset < 0 or offset > len(buffer) - size.
    """
    require(buffer, param)
    if offset < 0:
        raise InvalidRangeError("offset", offset, f"offset < 0 : {offset} < 0")
    limit = len(buffer) - size  # type: ignore[arg-type]
    if offset > limit:
        raise InvalidRangeError(
            "offset",
            offset,
            f"offset > len({param}) - {size} : {offset} > {limit}",
        )


def _check_span(offset: int, span: int, length: int, param: str, array_name: str) -> None:
    if offset + span <= length:
        return
    if offset >= length:
        raise InvalidRangeError(
            param, offset, f"{param} >= len({array_name}) : {offset} >= {length}"
        )
    raise InvalidArgumentCombinationError(param, offset, span, length)


def _check_array_arguments(
    buffer: Optional[Sized],
    buffer_offset: int,
    buffer_offset_name: str,
    values: Optional[Sized],
    values_offset: int,
    values_offset_name: str,
    count: int,
    size: int,
    values_first: bool,
) -> None:
    if values_first:
        require(values, "values")
        require(buffer, "buffer")
    else:
        require(buffer, "buffer")
        require(values, "values")

    src_offset, dst_offset = (
        (values_offset, buffer_offset) if values_first else (buffer_offset, values_offset)
    )
    if src_offset < 0:
        raise InvalidRangeError("src_offset", src_offset, f"src_offset < 0 : {src_offset} < 0")
    if dst_offset < 0:
        raise InvalidRangeError("dst_offset", dst_offset, f"dst_offset < 0 : {dst_offset} < 0")

    buffer_len = len(buffer)  # type: ignore[arg-type]
    values_len = len(values)  # type: ignore[arg-type]
    if count < 0 or count * size > buffer_len or count > values_len:
        raise InvalidRangeError(
            "count",
            count,
            f"count < 0, and/or count * {size} > len(buffer) ({buffer_len})"
            f" and/or count > len(values) ({values_len}) : count = {count}",
        )

    _check_span(buffer_offset, count * size, buffer_len, buffer_offset_name, "buffer")
    _check_span(values_offset, count, values_len, values_offset_name, "values")


def check_pack_array_arguments(
    values: Optional[Sized],
    src_offset: int,
    buffer: Optional[Sized],
    dst_offset: int,
    count: int,
    size: int,
) -> None:
    """
    Validate copying count values from values[src_offset] into buffer[dst_offset].

    Raises:
        NullArgumentError: values or buffer is None (checked in that order).
        InvalidRangeError: a negative offset or count, a count too large for either
            array, or an offset at or beyond the end of its array.
        InvalidArgumentCombinationError: an in-bounds offset whose span overflows.
    """
    _check_array_arguments(
        buffer, dst_offset, "dst_offset",
        values, src_offset, "src_offset",
        count, size, values_first=True,
    )


def check_unpack_array_arguments(
    buffer: Optional[Sized],
    src_offset: int,
    values: Optional[Sized],
    dst_offset: int,
    count: int,
    size: int,
) -> None:
    """Mirror of check_pack_array_arguments for buffer[src_offset] -> values[dst_offset]."""
    _check_array_arguments(
        buffer, src_offset, "src_offset",
        values, dst_offset, "dst_offset",
        count, size, values_first=False,
    )


def check_values_fit(values: Any, start: int, count: int, spec: IntegerType) -> None:
    """Raise ValueError if any of values[start:start + count] does not fit spec."""
    if count == 0:
        return
    if isinstance(values, np.ndarray):
        span = values[start:start + count]
    else:
        # Index element by element; not every sequence supports slicing.
        span = [values[i] for i in range(start, start + count)]
    spec.check_value(int(min(span)))
    spec.check_value(int(max(span)))


def check_distance(distance: int, bits: int) -> None:
    """Rotation distance must lie in 0..bits (a full-width rotation is allowed)."""
    if distance < 0:
        raise InvalidRangeError("distance", distance, f"distance < 0 : {distance} < 0")
    if distance > bits:
        raise InvalidRangeError(
            "distance", distance, f"distance > {bits} : {distance} > {bits}"
        )
