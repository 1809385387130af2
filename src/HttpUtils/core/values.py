"""Closed set of values a query parameter can carry.

Each variant validates its payload on construction, so a serializer never
sees a value of the wrong kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Union

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


def _expect_int(value: object, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} expects an int, got {type(value).__name__}")
    return value


def _check_range(value: int, low: int, high: int, kind: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{kind} value {value} out of range [{low}, {high}]")


@dataclass(frozen=True, slots=True)
class Text:
    """Single string parameter, serialized verbatim."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Text expects a str, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class TextList:
    """Multi-valued string parameter, serialized as repeated ``key[]=`` tokens."""

    values: Iterable[str] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, (str, bytes)):
            raise TypeError("TextList expects an iterable of str, not a single string")
        items = tuple(self.values)
        for idx, item in enumerate(items):
            if not isinstance(item, str):
                raise TypeError(f"TextList[{idx}] must be a str, got {type(item).__name__}")
        # Freeze caller lists so the record stays read-only.
        object.__setattr__(self, "values", items)


@dataclass(frozen=True, slots=True)
class Int32:
    """Signed 32-bit integer parameter."""

    value: int

    def __post_init__(self) -> None:
        _check_range(_expect_int(self.value, "Int32"), INT32_MIN, INT32_MAX, "Int32")


@dataclass(frozen=True, slots=True)
class Int64:
    """Signed 64-bit integer parameter."""

    value: int

    def __post_init__(self) -> None:
        _check_range(_expect_int(self.value, "Int64"), INT64_MIN, INT64_MAX, "Int64")


@dataclass(frozen=True, slots=True)
class BigInt:
    """Arbitrary-precision integer parameter."""

    value: int

    def __post_init__(self) -> None:
        _expect_int(self.value, "BigInt")


@dataclass(frozen=True, slots=True)
class Bool:
    """Boolean parameter, serialized as ``true``/``false``."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Bool expects a bool, got {type(self.value).__name__}")


QueryValue = Union[Text, TextList, Int32, Int64, BigInt, Bool]

QUERY_VALUE_TYPES: Final[tuple[type, ...]] = (Text, TextList, Int32, Int64, BigInt, Bool)
