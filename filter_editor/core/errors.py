"""
Error types raised by the filter-value model.

Everything the model raises derives from FilterEditorError so the UI layer
can catch a single type and present the message.
"""

from typing import Optional


class FilterEditorError(Exception):
    """Base class for filter editor errors."""


class ParseError(FilterEditorError, ValueError):
    """A filter string or a raw value could not be parsed."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position


class UnknownFilterKind(FilterEditorError, LookupError):
    """A filter function name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown filter kind: {name!r}")
        self.name = name


class UnknownEntry(FilterEditorError, LookupError):
    """An operation referenced an entry id not present in the list."""

    def __init__(self, entry_id: int):
        super().__init__(f"No filter entry with id {entry_id}")
        self.entry_id = entry_id
