"""
GrowableList: an append-only sequence of value references.

Capacity starts at DEFAULT_CAPACITY and doubles whenever an append finds
the buffer full, giving amortized O(1) appends and at most O(log n)
reallocations for n appends.
"""
from __future__ import annotations
from typing import Iterable

from tagbox.containers.frame import Frame
from tagbox.memory import allocate_slots, allocation_site, reallocate_slots
from tagbox.values import Entry, check_entry

DEFAULT_CAPACITY = 2
GROWTH_FACTOR = 2


class GrowableList(Frame):
    """Append-only container with geometric capacity growth.

    Invariant: 0 <= length <= capacity == len(slot buffer).
    """

    container_name = "list"

    def __init__(self) -> None:
        super().__init__()
        self._slots = allocate_slots(DEFAULT_CAPACITY, site="list buffer")
        self._capacity = DEFAULT_CAPACITY

    @classmethod
    def create(cls) -> "GrowableList":
        """Empty list with the default capacity."""
        with allocation_site("list frame"):
            return cls()

    @classmethod
    def from_values(cls, elements: Iterable[Entry]) -> "GrowableList":
        """Create a fresh list and append each element in order.

        Always returns a new list; no existing list is reused or modified.
        """
        lst = cls.create()
        for element in elements:
            lst.append(element)
        return lst

    @property
    def capacity(self) -> int:
        """Number of slots allocated."""
        self._live_slots()
        return self._capacity

    def append(self, value: Entry) -> None:
        """Store `value` at index length, doubling capacity first if the buffer is full.

        Raises:
            AllocationFailure: RE2021 if growing the buffer fails; the list is unchanged.
            ValueKindError: CE2006 if `value` is neither a TaggedValue nor None.
        """
        slots = self._live_slots()
        check_entry(value)
        if self._length == self._capacity:
            new_capacity = self._capacity * GROWTH_FACTOR
            slots = reallocate_slots(slots, new_capacity, site="list growth")
            self._slots = slots
            self._capacity = new_capacity
        slots[self._length] = value
        self._length += 1

    def __repr__(self) -> str:
        if self._released:
            return "GrowableList(<released>)"
        return f"GrowableList(length={self._length}, capacity={self._capacity})"
