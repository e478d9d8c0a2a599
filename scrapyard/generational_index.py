"""Generational indices, the allocator that hands them out and sparse component arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, NamedTuple, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalIndex:
    """An entity handle: a slot index plus the generation of that slot."""

    index: int
    generation: int = 0


class _Slot(NamedTuple):
    generation: int
    packed_index: int
    entity_index: int


@dataclass
class ArrayEntry(Generic[T]):
    """A stored value together with the entity that owns it."""

    value: T
    owned_entity: GenerationalIndex


class GenerationalIndexArray(Generic[T]):
    """Densely packed values addressed through a sparse per-entity lookup table."""

    def __init__(self) -> None:
        self.unpacked_entries: list[Optional[_Slot]] = []
        self.entries: list[ArrayEntry[T]] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ArrayEntry[T]]:
        return iter(self.entries)

    def set_empty(self) -> None:
        """Append an empty lookup slot."""
        self.unpacked_entries.append(None)

    def set(self, index: GenerationalIndex, value: T) -> None:
        """Store ``value`` for ``index``, replacing whatever occupied its slot."""
        entry = ArrayEntry(value, index)
        slot = self.get_unpacked_index(index)
        if slot is not None:
            self.entries[slot.packed_index] = entry
            packed = slot.packed_index
        else:
            self.entries.append(entry)
            packed = len(self.entries) - 1
        if index.index < len(self.unpacked_entries):
            self.unpacked_entries[index.index] = _Slot(index.generation, packed, index.index)

    def get_unpacked_index(self, index: GenerationalIndex) -> Optional[_Slot]:
        """Return the lookup slot for ``index`` regardless of generation, if filled."""
        if 0 <= index.index < len(self.unpacked_entries):
            return self.unpacked_entries[index.index]
        return None

    def contains(self, index: GenerationalIndex) -> bool:
        slot = self.get_unpacked_index(index)
        return slot is not None and slot.generation == index.generation

    def get(self, index: GenerationalIndex) -> Optional[T]:
        """Return the value stored for ``index``, or None if absent or stale."""
        if not self.contains(index):
            return None
        slot = self.get_unpacked_index(index)
        entry = self.entries[slot.packed_index]
        if entry.owned_entity.generation == index.generation:
            return entry.value
        return None

    def remove(self, index: GenerationalIndex) -> None:
        """Drop the value stored for ``index``; absent indices are ignored."""
        if not self.contains(index):
            return
        slot = self.get_unpacked_index(index)
        del self.entries[slot.packed_index]
        self.unpacked_entries[index.index] = None
        self.update_entries()

    def update_entries(self) -> None:
        """Point every filled lookup slot at its value's current packed position."""
        for position, entry in enumerate(self.entries):
            owner = entry.owned_entity.index
            if owner < len(self.unpacked_entries):
                slot = self.unpacked_entries[owner]
                if slot is not None:
                    self.unpacked_entries[owner] = slot._replace(packed_index=position)


@dataclass
class _AllocatorEntry:
    live: bool
    generation: int


class GenerationalIndexAllocator:
    """Hands out generational indices, reusing freed slots with a bumped generation."""

    def __init__(self) -> None:
        self._entries: list[_AllocatorEntry] = []
        self._free: list[int] = []

    def allocate(self) -> GenerationalIndex:
        if self._free:
            index = self._free.pop()
            entry = self._entries[index]
            entry.generation += 1
            entry.live = True
            return GenerationalIndex(index, entry.generation)
        self._entries.append(_AllocatorEntry(live=True, generation=0))
        return GenerationalIndex(len(self._entries) - 1, 0)

    def deallocate(self, index: GenerationalIndex) -> bool:
        self._entries[index.index].live = False
        self._free.append(index.index)
        return True

    def is_live(self, index: GenerationalIndex) -> bool:
        return self._entries[index.index].live