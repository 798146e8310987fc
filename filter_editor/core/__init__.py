"""Core types and errors."""
from .types import ValueKind, FilterValue, FilterDefinition, FilterEntry, EntryView
from .errors import FilterEditorError, ParseError, UnknownFilterKind, UnknownEntry

__all__ = [
    "ValueKind",
    "FilterValue",
    "FilterDefinition",
    "FilterEntry",
    "EntryView",
    "FilterEditorError",
    "ParseError",
    "UnknownFilterKind",
    "UnknownEntry",
]
