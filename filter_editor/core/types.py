"""
Core data types for the CSS filter editor.

All types use @dataclass and Enum for structured representations.
No loose dicts at the internal API boundary.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional, Union


class ValueKind(Enum):
    """Value domain of a filter function."""
    LENGTH = auto()
    PERCENTAGE = auto()
    ANGLE = auto()
    FREE_TEXT = auto()


FilterValue = Union[float, str]


@dataclass(frozen=True)
class FilterDefinition:
    """Immutable catalog entry for one filter function."""
    name: str
    value_kind: ValueKind
    min_value: Optional[float] = None  # None for free text
    max_value: Optional[float] = None  # math.inf when unbounded
    unit_suffix: str = ""
    placeholder: str = ""

    @property
    def is_numeric(self) -> bool:
        return self.value_kind != ValueKind.FREE_TEXT

    @property
    def bounds(self) -> tuple[Optional[float], Optional[float]]:
        return self.min_value, self.max_value


@dataclass
class FilterEntry:
    """One active filter in an edited list."""
    id: int
    name: str
    value: FilterValue
    unit: str = ""
    position: int = 0


class EntryView(NamedTuple):
    """Read-only snapshot of an entry, handed out to renderers."""
    id: int
    name: str
    value: FilterValue
    unit: str
