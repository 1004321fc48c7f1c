"""
Bulk copy strategy for the array variants of the endianness codec.

Short spans are packed one value at a time by the caller. Longer spans are
handed to numpy: when the requested byte order is the interpreter's native
order the element bytes are copied as they are, otherwise every element is
byteswapped first. Either way the bytes written are identical.
"""

import logging
from typing import Any, MutableSequence

import numpy as np

from .config import IntegerType
from .constants import BULK_THRESHOLD_BYTES, NATIVE_ORDER, ByteOrder

logger = logging.getLogger(__name__)


def use_bulk(count: int, size: int) -> bool:
    """True if a span of count values of size bytes should take the numpy path."""
    return count * size >= BULK_THRESHOLD_BYTES


def _pattern_dtype(spec: IntegerType) -> np.dtype:
    # Unsigned native dtype carrying the raw bit pattern.
    return np.dtype(f"u{spec.size}")


def _to_patterns(values: Any, start: int, count: int, spec: IntegerType) -> np.ndarray:
    if isinstance(values, np.ndarray):
        # Integer casts wrap, which is the two's-complement truncation we want.
        return values[start:start + count].astype(_pattern_dtype(spec))
    mask = spec.mask
    span = (values[i] for i in range(start, start + count))
    return np.fromiter((int(v) & mask for v in span), dtype=_pattern_dtype(spec), count=count)


def _write_bytes(buffer: Any, offset: int, patterns: np.ndarray) -> None:
    raw = patterns.view(np.uint8)
    end = offset + raw.size
    if isinstance(buffer, np.ndarray):
        buffer[offset:end] = raw
    else:
        buffer[offset:end] = raw.tobytes()


def _read_bytes(buffer: Any, offset: int, length: int) -> bytes:
    if isinstance(buffer, np.ndarray):
        return buffer[offset:offset + length].astype(np.uint8).tobytes()
    return bytes(buffer[offset:offset + length])


def pack_span(
    values: Any,
    src_offset: int,
    buffer: Any,
    dst_offset: int,
    count: int,
    spec: IntegerType,
    order: ByteOrder,
) -> None:
    """Write values[src_offset:src_offset + count] into buffer at dst_offset."""
    swap = order is not NATIVE_ORDER
    logger.debug(
        "bulk pack of %d x %s (%s-endian, %s)",
        count, spec.name, order.value, "byteswap" if swap else "raw copy",
    )
    patterns = _to_patterns(values, src_offset, count, spec)
    if swap:
        patterns = patterns.byteswap()
    _write_bytes(buffer, dst_offset, patterns)


def unpack_span(
    buffer: Any,
    src_offset: int,
    values: MutableSequence[int],
    dst_offset: int,
    count: int,
    spec: IntegerType,
    order: ByteOrder,
) -> None:
    """Read count values from buffer at src_offset into values[dst_offset:]."""
    swap = order is not NATIVE_ORDER
    logger.debug(
        "bulk unpack of %d x %s (%s-endian, %s)",
        count, spec.name, order.value, "byteswap" if swap else "raw copy",
    )
    raw = _read_bytes(buffer, src_offset, count * spec.size)
    patterns = np.frombuffer(raw, dtype=_pattern_dtype(spec))
    if swap:
        patterns = patterns.byteswap()
    decoded = patterns.view(np.dtype(spec.dtype_code))

    if isinstance(values, np.ndarray):
        values[dst_offset:dst_offset + count] = decoded
        return
    for i, value in enumerate(decoded.tolist()):
        values[dst_offset + i] = value
