from .config import get_integer_type, IntegerType
from .constants import ByteOrder
from .endianness import (
    pack,
    pack_into,
    unpack,
    pack_array,
    unpack_array,
    pack_unchecked,
    pack_into_unchecked,
    unpack_unchecked,
    pack_array_unchecked,
    unpack_array_unchecked,
    IntegerCodec,
    get_codec,
)
from .errors import (
    BitManipulatorError,
    NullArgumentError,
    InvalidRangeError,
    InvalidArgumentCombinationError,
)
from .rotation import (
    rotate_left,
    rotate_right,
    rotate_left_unchecked,
    rotate_right_unchecked,
)

__all__ = [
    "get_integer_type",
    "IntegerType",
    "ByteOrder",
    "pack",
    "pack_into",
    "unpack",
    "pack_array",
    "unpack_array",
    "pack_unchecked",
    "pack_into_unchecked",
    "unpack_unchecked",
    "pack_array_unchecked",
    "unpack_array_unchecked",
    "IntegerCodec",
    "get_codec",
    "BitManipulatorError",
    "NullArgumentError",
    "InvalidRangeError",
    "InvalidArgumentCombinationError",
    "rotate_left",
    "rotate_right",
    "rotate_left_unchecked",
    "rotate_right_unchecked",
]
