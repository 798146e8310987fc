"""
Filter-value model for the CSS `filter` property.

Provides the catalog of known filter functions, the tokenizer and value
coercion used to parse filter strings, and the editable filter list that
serializes back to CSS.
"""

from .catalog import FILTER_CATALOG, UNIT_MAPPING, lookup, filter_names, default_raw_value
from .tokenizer import NONE_VALUE, tokenize
from .coercion import coerce, clamp, round_tenths, format_number, format_value
from .filter_list import FilterListModel, reorder_ids
from .gestures import (
    LIST_ITEM_HEIGHT,
    FAST_VALUE_MULTIPLIER,
    SLOW_VALUE_MULTIPLIER,
    DEFAULT_VALUE_MULTIPLIER,
    LabelDrag,
    value_multiplier,
    drag_to_value,
    drag_steps,
    drag_destination,
)

__all__ = [
    "FilterListModel",
    "reorder_ids",
    # Catalog
    "FILTER_CATALOG",
    "UNIT_MAPPING",
    "lookup",
    "filter_names",
    "default_raw_value",
    # Parsing
    "NONE_VALUE",
    "tokenize",
    "coerce",
    "clamp",
    "round_tenths",
    "format_number",
    "format_value",
    # Gestures
    "LIST_ITEM_HEIGHT",
    "FAST_VALUE_MULTIPLIER",
    "SLOW_VALUE_MULTIPLIER",
    "DEFAULT_VALUE_MULTIPLIER",
    "LabelDrag",
    "value_multiplier",
    "drag_to_value",
    "drag_steps",
    "drag_destination",
]
