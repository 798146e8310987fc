"""CSS filter editor: a structured model for CSS `filter` values."""
from .core import (
    ValueKind,
    FilterDefinition,
    EntryView,
    FilterEditorError,
    ParseError,
    UnknownFilterKind,
    UnknownEntry,
)
from .filters import FilterListModel, lookup, tokenize, coerce

__version__ = "0.1.0"

__all__ = [
    "FilterListModel",
    "ValueKind",
    "FilterDefinition",
    "EntryView",
    "FilterEditorError",
    "ParseError",
    "UnknownFilterKind",
    "UnknownEntry",
    "lookup",
    "tokenize",
    "coerce",
]
