"""
Generic value model for valuecodec.

Values are plain Python objects: None, bool, int, float, str, list and dict,
plus two small marker types. Raw carries pre-rendered text that writers emit
verbatim; PrimitiveArray marks a list adapted from a fixed host array, which
the JSON writer renders as "[]" when empty.
"""

import array
import decimal
import math
import numbers
import struct
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

Value = Any
Display = Callable[[Any], str]

# array.array type codes holding floating-point or character data
_FLOAT_TYPECODES = frozenset("fd")
_FLOAT32_DIGITS = range(1, 10)
_CHAR_TYPECODES = frozenset("uw")


class ValueKind(Enum):
    """The eight variants of the value model."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    MAP = "map"
    RAW = "raw"


@dataclass(frozen=True)
class Raw:
    """Pre-rendered text emitted verbatim by every writer."""

    text: str

    def __str__(self) -> str:
        return self.text


class PrimitiveArray(tuple):
    """List-kind value adapted from a fixed host array."""

    def __repr__(self) -> str:
        return f"PrimitiveArray({tuple.__repr__(self)})"


def kind_of(value: Value) -> ValueKind:
    """Classify a value, raising TypeError for objects outside the model."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, PrimitiveArray)):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAP
    if isinstance(value, Raw):
        return ValueKind.RAW
    raise TypeError(f"{type(value).__name__} is not a valuecodec value")


def values_equal(left: Value, right: Value) -> bool:
    """Structural equality that never equates values of different kinds."""
    kind = kind_of(left)
    if kind != kind_of(right):
        return False

    if kind == ValueKind.LIST:
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )

    if kind == ValueKind.MAP:
        return left.keys() == right.keys() and all(
            values_equal(left[key], right[key]) for key in left
        )

    if kind == ValueKind.FLOAT and left != left and right != right:
        return True

    return left == right


def _expect(value: Value, expected: ValueKind) -> Value:
    actual = kind_of(value)
    if actual != expected:
        raise TypeError(f"Expected {expected.value} value, got {actual.value}")
    return value


def is_null(value: Value) -> bool:
    return kind_of(value) == ValueKind.NULL


def as_boolean(value: Value) -> bool:
    return _expect(value, ValueKind.BOOLEAN)


def as_integer(value: Value) -> int:
    return _expect(value, ValueKind.INTEGER)


def as_float(value: Value) -> float:
    return _expect(value, ValueKind.FLOAT)


def as_string(value: Value) -> str:
    return _expect(value, ValueKind.STRING)


def as_list(value: Value) -> Union[list[Value], PrimitiveArray]:
    return _expect(value, ValueKind.LIST)


def as_map(value: Value) -> dict[str, Value]:
    return _expect(value, ValueKind.MAP)


def as_raw(value: Value) -> Raw:
    return _expect(value, ValueKind.RAW)


def to_value(obj: Any, display: Optional[Display] = None) -> Value:
    """
    Adapt a host object into a fresh value tree.

    Args:
        obj: A value, or any nesting of mappings, collections and scalars
        display: Optional callable rendering unsupported objects as Raw text

    Returns:
        A value built only from model types

    Raises:
        TypeError: If obj contains an unsupported object and no display
            callable was given
    """
    if obj is None or isinstance(obj, (bool, str, Raw)):
        return obj
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, float):
        return float(obj)
    if isinstance(obj, numbers.Integral):
        return int(obj)
    if isinstance(obj, (numbers.Real, decimal.Decimal)):
        return float(obj)

    if isinstance(obj, Mapping):
        return {
            key if isinstance(key, str) else str(key): to_value(item, display)
            for key, item in obj.items()
        }

    if isinstance(obj, (tuple, bytes, bytearray, memoryview, array.array)):
        return PrimitiveArray(_adapt_host_array(obj, display))

    if isinstance(obj, Collection):
        return [to_value(item, display) for item in obj]

    if display is not None:
        return Raw(display(obj))

    raise TypeError(
        f"Cannot convert {type(obj).__name__} to a valuecodec value; "
        "pass display= to render it as raw text"
    )


def _adapt_host_array(obj: Any, display: Optional[Display]) -> list[Value]:
    if isinstance(obj, memoryview):
        if obj.format == "f":
            return [_shortest_float32(item) for item in obj.tolist()]
        return [to_value(item, display) for item in obj.tolist()]
    if isinstance(obj, array.array):
        if obj.typecode in _CHAR_TYPECODES:
            return list(obj)
        if obj.typecode == "f":
            return [_shortest_float32(item) for item in obj]
        if obj.typecode in _FLOAT_TYPECODES:
            return [float(item) for item in obj]
        return [int(item) for item in obj]
    return [to_value(item, display) for item in obj]


def _shortest_float32(item: float) -> float:
    """Return the double with the fewest digits that packs to the same float32."""
    if not math.isfinite(item):
        return item
    packed = struct.pack("f", item)
    for digits in _FLOAT32_DIGITS:
        candidate = float(f"{item:.{digits}g}")
        if struct.pack("f", candidate) == packed:
            return candidate
    return item
