"""
Exceptions raised by the checked entry points.
Each one also derives from the built-in exception callers would expect,
so ``except ValueError`` / ``except TypeError`` keep working.
"""

from typing import Any


class BitManipulatorError(Exception):
    """Base for argument validation failures."""


class NullArgumentError(BitManipulatorError, TypeError):
    """A required buffer or array argument is None."""

    def __init__(self, param: str) -> None:
        super().__init__(f"{param} must not be None")
        self.param = param


class InvalidRangeError(BitManipulatorError, ValueError):
    """
    A negative offset or count, an offset at or beyond the end of its array,
    or a rotation distance outside the type width.
    """

    def __init__(self, param: str, value: Any, reason: str) -> None:
        super().__init__(f"{param} out of range: {reason}")
        self.param = param
        self.value = value


class InvalidArgumentCombinationError(BitManipulatorError, ValueError):
    """An in-bounds offset whose span still runs past the end of its array."""

    def __init__(self, param: str, offset: int, span: int, length: int) -> None:
        super().__init__(
            f"{param} + span > length : {offset} + {span} > {length}"
        )
        self.param = param
        self.offset = offset
        self.span = span
        self.length = length
