from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Any, Optional, Union


@dataclass(frozen=True)
class IntegerType:
    """
    Description of a fixed-width integer type.
    All fields are mandatory; everything else is derived from them.
    """

    # Type name as used in lookups and error messages (e.g. 'int16', 'uint64').
    name: str

    # Width in bits. Must be a positive multiple of 8.
    bits: int

    # Two's-complement signed if True, unsigned otherwise.
    signed: bool

    def __post_init__(self) -> None:
        if self.bits <= 0 or self.bits % 8 != 0:
            raise ValueError(
                f"Integer type '{self.name}' must be a whole number of bytes, got {self.bits} bits"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IntegerType":
        """
        Create an integer type from a dictionary.
        Raises ValueError if required fields are missing.
        """
        known_fields = cls.__annotations__.keys()

        missing = [key for key in known_fields if key not in data]
        if missing:
            raise ValueError(
                f"Invalid integer type. Missing required fields: {missing}"
            )

        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered_data)

    @property
    def size(self) -> int:
        """Number of bytes one value occupies."""
        return self.bits // 8

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    @property
    def dtype_code(self) -> str:
        """numpy kind/size code without a byte order prefix (e.g. 'i4', 'u8')."""
        return f"{'i' if self.signed else 'u'}{self.size}"

    def check_value(self, value: int) -> None:
        """Raise ValueError if value does not fit this type."""
        if not self.min_value <= value <= self.max_value:
            raise ValueError(
                f"Value {value} out of {self.name} range ({self.min_value} to {self.max_value})"
            )


# Standard fixed-width integer types
DEFAULTS: Dict[str, Dict[str, Any]] = {
    "int8": {"bits": 8, "signed": True},
    "uint8": {"bits": 8, "signed": False},
    "int16": {"bits": 16, "signed": True},
    "uint16": {"bits": 16, "signed": False},
    "int32": {"bits": 32, "signed": True},
    "uint32": {"bits": 32, "signed": False},
    "int64": {"bits": 64, "signed": True},
    "uint64": {"bits": 64, "signed": False},
}

IntegerTypeLike = Union[IntegerType, str]


def get_integer_type(
    type_name: str, custom_config: Optional[Dict[str, Any]] = None
) -> IntegerType:
    """
    Retrieve the description of an integer type.

    Args:
        type_name: The name of the type (e.g., 'int32'). Case insensitive.
        custom_config: A dictionary of overrides. If provided, these values
                       will replace the defaults.

    Custom and overridden types are descriptors only: the endianness codec
    still accepts 16/32/64-bit widths and rotation 8 to 64-bit widths, so an
    'int24' built here is rejected by both with ValueError.

    Returns:
        An IntegerType object.

    Raises:
        ValueError: If the type name is unknown and no valid custom config is provided,
                    or if the resulting description is missing required fields.
    """
    key = type_name.lower()
    if key in DEFAULTS:
        base_data = DEFAULTS[key].copy()
    elif custom_config:
        # Unknown name: custom_config has to supply every field
        base_data = {}
    else:
        raise ValueError(
            f"Unknown integer type '{type_name}' and no custom config provided."
        )

    base_data.setdefault("name", key)

    if custom_config:
        base_data.update(custom_config)

    return IntegerType.from_dict(base_data)


@lru_cache(maxsize=None)
def _standard_type(type_name: str) -> IntegerType:
    return get_integer_type(type_name)


def resolve_integer_type(int_type: IntegerTypeLike) -> IntegerType:
    """Accept either an IntegerType or a standard type name."""
    if isinstance(int_type, IntegerType):
        return int_type
    return _standard_type(int_type)
