"""UI widgets module."""
from .filter_editor import FilterEditorWidget

__all__ = ["FilterEditorWidget"]
