"""
Value coercion for filter functions.

Turns a raw value string into a validated (value, unit) pair for a given
definition: numbers are parsed, unit-less percentages are scaled, and
magnitudes are clamped to the definition's range.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

from ..core import FilterDefinition, FilterValue, ParseError, ValueKind
from .tokenizer import is_balanced


_NUMBER_WITH_UNIT = re.compile(
    r"\s*(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>[A-Za-z%]*)\s*"
)

_TENTH = Decimal("0.1")


def coerce(definition: FilterDefinition, raw_value: str) -> Tuple[FilterValue, str]:
    """Validate a raw value against a definition. Returns (value, unit)."""
    if not definition.is_numeric:
        text = raw_value.strip()
        if not is_balanced(text):
            raise ParseError(f"Unbalanced parentheses in {definition.name} value {text!r}")
        return text, ""

    match = _NUMBER_WITH_UNIT.fullmatch(raw_value)
    if match is None:
        raise ParseError(f"Invalid {definition.name} value {raw_value!r}")

    value = float(match.group("number"))
    unit = match.group("unit")

    # A bare number is a fraction of one for percentage filters
    if definition.value_kind == ValueKind.PERCENTAGE and not unit:
        value *= 100
        unit = "%"

    # Checked after scaling, which can overflow near the float limit
    if not math.isfinite(value):
        raise ParseError(f"Out of range {definition.name} value {raw_value!r}")

    return clamp(value, definition.min_value, definition.max_value), unit


def clamp(value: float, min_value: Optional[float], max_value: Optional[float]) -> float:
    """Clamp value to the finite bounds given; None or infinite bounds are open."""
    if min_value is not None and math.isfinite(min_value) and value < min_value:
        return float(min_value)
    if max_value is not None and math.isfinite(max_value) and value > max_value:
        return float(max_value)
    return value


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    if abs(value) >= 1e15:
        # No fractional digits left at this magnitude
        return value
    rounded = Decimal(repr(value)).quantize(_TENTH, rounding=ROUND_HALF_UP)
    return float(rounded)


def format_number(value: float) -> str:
    """Shortest decimal text for value: 30.0 -> "30", 2.50 -> "2.5"."""
    if value == int(value):
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: FilterValue) -> str:
    """Text of a stored value: numbers via format_number, free text verbatim."""
    if isinstance(value, str):
        return value
    return format_number(value)
