import sys
from enum import Enum
from typing import Final, Tuple


class ByteOrder(str, Enum):
    """
    Byte order of a packed integer.
    The values match the ``byteorder`` argument of ``int.to_bytes`` / ``int.from_bytes``.
    """

    BIG = "big"  # most-significant byte first
    LITTLE = "little"  # least-significant byte first


# Byte order of the running interpreter.
NATIVE_ORDER: Final[ByteOrder] = ByteOrder(sys.byteorder)

# Array spans of at least this many bytes go through the numpy copy/byteswap path.
BULK_THRESHOLD_BYTES: Final[int] = 128

# Bit widths handled by each family of operations.
CODEC_WIDTHS: Final[Tuple[int, ...]] = (16, 32, 64)
ROTATION_WIDTHS: Final[Tuple[int, ...]] = (8, 16, 32, 64)
