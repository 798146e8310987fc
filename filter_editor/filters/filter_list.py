"""
Filter list management.

Owns the ordered chain of filter entries being edited and converts it to
and from a CSS `filter` value.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from ..core import (
    EntryView,
    FilterDefinition,
    FilterEntry,
    ParseError,
    UnknownEntry,
    UnknownFilterKind,
)
from .catalog import default_raw_value, lookup
from .coercion import coerce, format_value, round_tenths
from .tokenizer import NONE_VALUE, tokenize


logger = logging.getLogger(__name__)


def reorder_ids(ids: Sequence[int], moving_id: int, destination: int) -> List[int]:
    """
    Move one id to a new index, shifting the ids in between by one.

    The destination is clamped to the valid index range.
    Raises ValueError if moving_id is not in ids.
    """
    result = list(ids)
    result.remove(moving_id)
    destination = max(0, min(destination, len(result)))
    result.insert(destination, moving_id)
    return result


class FilterListModel:
    """Container for an ordered, id-addressed sequence of filter entries."""

    def __init__(self, css: Optional[str] = None):
        self._entries: List[FilterEntry] = []
        self._next_id = 0
        if css is not None:
            self.from_css(css)

    # ========== Parsing ==========

    def from_css(self, css: str, skip_unknown: bool = False) -> None:
        """
        Replace all entries with the filters parsed from a CSS value.

        Unknown filter names abort the parse unless skip_unknown is set, in
        which case they are dropped with a warning. On any error the current
        entries are left untouched.
        """
        if not css or not css.strip():
            raise ParseError("Missing CSS filter value")

        parsed = []
        for name, raw_value in tokenize(css):
            definition = lookup(name)
            if definition is None:
                if skip_unknown:
                    logger.warning("Skipping unknown filter %r in %r", name, css)
                    continue
                raise UnknownFilterKind(name)
            value, unit = coerce(definition, raw_value)
            parsed.append((definition, value, unit))

        self._entries = [
            FilterEntry(id=self._allocate_id(), name=definition.name, value=value, unit=unit)
            for definition, value, unit in parsed
        ]
        self._repack()
        logger.debug("Parsed %d filter(s) from %r", len(self._entries), css)

    # ========== Mutations ==========

    def add(self, name: str, raw_value: Optional[str] = None) -> int:
        """Append a filter at the end of the list. Returns its id."""
        definition = self._resolve(name)
        if raw_value is None:
            raw_value = default_raw_value(definition)
        value, unit = coerce(definition, raw_value)

        entry = FilterEntry(
            id=self._allocate_id(),
            name=definition.name,
            value=value,
            unit=unit,
            position=len(self._entries),
        )
        self._entries.append(entry)
        logger.debug("Added %s(%s) as #%d", entry.name, raw_value, entry.id)
        return entry.id

    def remove(self, entry_id: int) -> None:
        """Remove a filter by id and close the gap it leaves."""
        entry = self._find(entry_id)
        del self._entries[entry.position]
        self._repack()
        logger.debug("Removed %s #%d", entry.name, entry_id)

    def update(self, entry_id: int, raw_value: str) -> None:
        """Set a new value on an existing filter; id and position are kept."""
        entry = self._find(entry_id)
        definition = self._resolve(entry.name)
        value, unit = coerce(definition, raw_value)
        if definition.is_numeric:
            value = round_tenths(value)

        entry.value = value
        entry.unit = unit
        logger.debug("Updated %s #%d to %r%s", entry.name, entry_id, value, unit)

    def move_to(self, entry_id: int, new_position: int) -> int:
        """
        Move a filter to a new position, shifting the ones in between.

        The position is clamped to the list bounds. Returns the final position.
        """
        self._find(entry_id)
        order = reorder_ids(self.ids(), entry_id, new_position)
        by_id = {entry.id: entry for entry in self._entries}
        self._entries = [by_id[i] for i in order]
        self._repack()

        position = by_id[entry_id].position
        logger.debug("Moved #%d to position %d", entry_id, position)
        return position

    def clear(self) -> None:
        """Remove all filters. Ids already handed out are not reused."""
        self._entries.clear()

    # ========== Serialization ==========

    def value_text(self, entry_id: int) -> str:
        """CSS text of one filter's value, unit included."""
        entry = self._find(entry_id)
        return format_value(entry.value) + entry.unit

    def to_css(self) -> str:
        """Serialize the list to a CSS filter value."""
        if not self._entries:
            return NONE_VALUE
        return " ".join(
            f"{entry.name}({format_value(entry.value)}{entry.unit})"
            for entry in self._entries
        )

    # ========== Read access ==========

    def entries(self) -> List[EntryView]:
        """Snapshot of all filters in position order."""
        return [self._view(entry) for entry in self._entries]

    def get(self, entry_id: int) -> EntryView:
        """Snapshot of a single filter."""
        return self._view(self._find(entry_id))

    def definition_of(self, entry_id: int) -> FilterDefinition:
        """Catalog definition backing a filter."""
        return self._resolve(self._find(entry_id).name)

    def position_of(self, entry_id: int) -> int:
        return self._find(entry_id).position

    def ids(self) -> List[int]:
        """Entry ids in position order."""
        return [entry.id for entry in self._entries]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EntryView]:
        return iter(self.entries())

    def __contains__(self, entry_id: object) -> bool:
        return any(entry.id == entry_id for entry in self._entries)

    def __repr__(self) -> str:
        return f"FilterListModel({self.to_css()!r})"

    # ========== Internals ==========

    def _allocate_id(self) -> int:
        entry_id = self._next_id
        self._next_id += 1
        return entry_id

    def _repack(self) -> None:
        for i, entry in enumerate(self._entries):
            entry.position = i

    def _find(self, entry_id: int) -> FilterEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise UnknownEntry(entry_id)

    @staticmethod
    def _resolve(name: str) -> FilterDefinition:
        definition = lookup(name)
        if definition is None:
            raise UnknownFilterKind(name)
        return definition

    @staticmethod
    def _view(entry: FilterEntry) -> EntryView:
        return EntryView(entry.id, entry.name, entry.value, entry.unit)
