import pytest
import sys
from typing import Dict, Any

from bit_manipulator.config import (
    DEFAULTS,
    get_integer_type,
    resolve_integer_type,
    IntegerType,
)
from bit_manipulator.constants import NATIVE_ORDER, ByteOrder


def test_default_int32() -> None:
    spec: IntegerType = get_integer_type("int32")
    assert spec.name == "int32"
    assert spec.bits == 32
    assert spec.signed is True
    assert spec.size == 4
    assert spec.min_value == -2147483648
    assert spec.max_value == 2147483647


def test_default_uint64() -> None:
    spec: IntegerType = get_integer_type("uint64")
    assert spec.size == 8
    assert spec.min_value == 0
    assert spec.max_value == 0xFFFFFFFFFFFFFFFF
    assert spec.mask == 0xFFFFFFFFFFFFFFFF
    assert spec.dtype_code == "u8"


def test_lookup_is_case_insensitive() -> None:
    assert get_integer_type("UInt16") == get_integer_type("uint16")


def test_all_defaults_resolve() -> None:
    for name in DEFAULTS:
        spec = get_integer_type(name)
        assert spec.size * 8 == spec.bits


def test_override_config() -> None:
    overrides: Dict[str, Any] = {"signed": False}
    spec: IntegerType = get_integer_type("int16", custom_config=overrides)
    assert spec.signed is False
    assert spec.bits == 16  # Should remain default
    assert spec.name == "int16"


def test_custom_type_success() -> None:
    custom_specs: Dict[str, Any] = {"bits": 24, "signed": True}
    spec: IntegerType = get_integer_type("int24", custom_config=custom_specs)
    assert spec.name == "int24"
    assert spec.size == 3
    assert spec.max_value == (1 << 23) - 1


def test_custom_type_missing_field() -> None:
    custom_specs: Dict[str, Any] = {"signed": True}  # "bits" missing
    with pytest.raises(ValueError, match="Missing required fields"):
        get_integer_type("int24", custom_config=custom_specs)


def test_unknown_type_no_config() -> None:
    with pytest.raises(ValueError, match="Unknown integer type"):
        get_integer_type("int128x")


def test_partial_byte_width_rejected() -> None:
    with pytest.raises(ValueError, match="whole number of bytes"):
        IntegerType(name="int12", bits=12, signed=True)


def test_check_value_bounds() -> None:
    spec = get_integer_type("uint16")
    spec.check_value(0)
    spec.check_value(65535)
    with pytest.raises(ValueError, match=r"Value 65536 out of uint16 range \(0 to 65535\)"):
        spec.check_value(65536)


def test_resolve_passes_instances_through() -> None:
    spec = IntegerType(name="int32", bits=32, signed=True)
    assert resolve_integer_type(spec) is spec
    assert resolve_integer_type("int32") == spec


def test_native_order_matches_interpreter() -> None:
    assert NATIVE_ORDER.value == sys.byteorder
    assert ByteOrder("big") is ByteOrder.BIG
