import pytest
from typing import Callable, Dict, List, Tuple

from bit_manipulator.config import get_integer_type, IntegerType

CODEC_TYPE_NAMES: Tuple[str, ...] = ("int16", "uint16", "int32", "uint32", "int64", "uint64")
ROTATION_TYPE_NAMES: Tuple[str, ...] = ("int8", "uint8") + CODEC_TYPE_NAMES

FILL_BYTE = 0xAA


def _boundary_values(spec: IntegerType) -> List[int]:
    """Extremes of the type plus a few values around zero and the sign bit."""
    values = {spec.min_value, spec.min_value + 1, 0, 1, spec.max_value - 1, spec.max_value}
    if spec.signed:
        values.add(-1)
    else:
        values.add(1 << (spec.bits - 1))
    return sorted(values)


@pytest.fixture(params=CODEC_TYPE_NAMES)
def codec_type(request: pytest.FixtureRequest) -> IntegerType:
    """Each integer type supported by the endianness codec."""
    return get_integer_type(request.param)


@pytest.fixture(params=ROTATION_TYPE_NAMES)
def rotation_type(request: pytest.FixtureRequest) -> IntegerType:
    """Each integer type supported by rotation."""
    return get_integer_type(request.param)


@pytest.fixture(params=["big", "little"])
def order(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture
def filled_buffer() -> Callable[[int], bytearray]:
    """Factory for buffers pre-filled with a marker byte, to detect stray writes."""

    def make(length: int) -> bytearray:
        return bytearray([FILL_BYTE] * length)

    return make


@pytest.fixture
def sample_values() -> Dict[str, List[int]]:
    return {
        "int16": [0x1234, -2, 0, 32767, -32768],
        "uint32": [0xDEADBEEF, 1, 0, 0xFFFFFFFF],
        "int64": [-(1 << 63), -1, 0x0102030405060708, (1 << 63) - 1],
    }


@pytest.fixture
def fill_byte() -> int:
    """Marker byte that filled_buffer writes into every fresh buffer."""
    return FILL_BYTE


@pytest.fixture
def boundary_values() -> Callable[[IntegerType], List[int]]:
    """Extremes of a type plus a few values around zero and the sign bit."""
    return _boundary_values
