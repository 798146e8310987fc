"""Qt user interface for the filter editor."""
from .main_window import MainWindow

__all__ = ["MainWindow"]
