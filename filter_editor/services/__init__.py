"""Services module initialization."""
from .settings import Settings

__all__ = ["Settings"]
