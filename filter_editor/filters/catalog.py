"""
Filter definitions for the CSS `filter` property.

Each definition describes one filter function: its value domain, the
allowed range and the canonical unit. The catalog is built once at import
and is read-only.
"""

import math
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..core import FilterDefinition, ValueKind


UNIT_MAPPING = {
    ValueKind.LENGTH: "px",
    ValueKind.PERCENTAGE: "%",
    ValueKind.ANGLE: "deg",
    ValueKind.FREE_TEXT: "",
}


def _numeric(name: str, kind: ValueKind, min_value: float, max_value: float) -> FilterDefinition:
    return FilterDefinition(
        name=name,
        value_kind=kind,
        min_value=min_value,
        max_value=max_value,
        unit_suffix=UNIT_MAPPING[kind],
    )


def _free_text(name: str, placeholder: str) -> FilterDefinition:
    return FilterDefinition(
        name=name,
        value_kind=ValueKind.FREE_TEXT,
        placeholder=placeholder,
    )


_DEFINITIONS = (
    _numeric("blur", ValueKind.LENGTH, 0, math.inf),
    _numeric("brightness", ValueKind.PERCENTAGE, 0, math.inf),
    _numeric("contrast", ValueKind.PERCENTAGE, 0, math.inf),
    _free_text("drop-shadow", "x y radius color"),
    # Values over 100% are valid CSS but render the same as 100%
    _numeric("grayscale", ValueKind.PERCENTAGE, 0, 100),
    _numeric("hue-rotate", ValueKind.ANGLE, 0, 360),
    _numeric("invert", ValueKind.PERCENTAGE, 0, 100),
    _numeric("opacity", ValueKind.PERCENTAGE, 0, 100),
    _numeric("saturate", ValueKind.PERCENTAGE, 0, math.inf),
    _numeric("sepia", ValueKind.PERCENTAGE, 0, 100),
    _free_text("url", "example.svg#c1"),
)

# Registry of all known filter functions, keyed by name
FILTER_CATALOG: Mapping[str, FilterDefinition] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS}
)


def lookup(name: str) -> Optional[FilterDefinition]:
    """Get a definition by filter name. Returns None if not found."""
    return FILTER_CATALOG.get(name.strip().lower())


def filter_names() -> List[str]:
    """All filter names in catalog order."""
    return list(FILTER_CATALOG)


def default_raw_value(definition: FilterDefinition) -> str:
    """Raw value inserted when a filter is added without one."""
    if not definition.is_numeric:
        return ""
    start = definition.min_value if definition.min_value else 0
    return f"{start:g}{definition.unit_suffix}"
