"""
Number rendering shared by the JSON and XML writers.

Floats print like a JVM double: plain notation for magnitudes in
[1e-3, 1e7), scientific notation with an uppercase E otherwise, and always
at least one fractional digit. Non-finite floats have no JSON form and
render as null.
"""

import math
from decimal import Decimal
from typing import Union

from ..core.constants import NULL_TEXT

_PLAIN_LOWER = 1e-3
_PLAIN_UPPER = 1e7


def format_float(value: float) -> str:
    """Render a float using the shortest digits that round-trip."""
    if not math.isfinite(value):
        return NULL_TEXT

    magnitude = abs(value)
    if magnitude == 0.0 or _PLAIN_LOWER <= magnitude < _PLAIN_UPPER:
        text = repr(value)
        if "." not in text:
            text += ".0"
        return text

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    digit_text = "".join(str(digit) for digit in digits)
    scientific_exponent = len(digit_text) - 1 + exponent
    fraction = digit_text[1:] or "0"
    prefix = "-" if sign else ""
    return f"{prefix}{digit_text[0]}.{fraction}E{scientific_exponent}"


def format_number(value: Union[int, float]) -> str:
    """Render an integer or float."""
    if isinstance(value, float):
        return format_float(value)
    return str(value)
