"""
Slot-buffer allocation with error handling.

Containers keep their references in a fixed-length list of slots which they
own exclusively. Every allocation site goes through this module so that an
interpreter MemoryError surfaces as AllocationFailure (RE2021) naming the
site, instead of escaping from the middle of a container operation.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Sequence

from tagbox.internals.errors import AllocationFailure
from tagbox.values import Entry

Slots = List[Entry]


def _new_slots(count: int) -> Slots:
    return [None] * count


@contextmanager
def allocation_site(site: str) -> Iterator[None]:
    """Convert a MemoryError raised inside the block into AllocationFailure."""
    try:
        yield
    except MemoryError:
        raise AllocationFailure(site) from None


def allocate_slots(count: int, site: str) -> Slots:
    """Allocate a buffer of `count` empty slots.

    Raises:
        AllocationFailure: RE2021 if the buffer could not be allocated.
    """
    with allocation_site(site):
        return _new_slots(count)


def copy_slots(entries: Sequence[Entry], site: str) -> Slots:
    """Allocate a buffer of exactly len(entries) slots and copy the references in."""
    slots = allocate_slots(len(entries), site)
    with allocation_site(site):
        slots[:] = entries
    return slots


def reallocate_slots(slots: Slots, count: int, site: str) -> Slots:
    """Return a new buffer of `count` slots holding the references of `slots`.

    The old buffer is left untouched, so a failed reallocation leaves the
    caller's state as it was.

    Raises:
        AllocationFailure: RE2021 if the new buffer could not be allocated.
    """
    grown = allocate_slots(count, site)
    kept = min(len(slots), count)
    grown[:kept] = slots[:kept]
    return grown


def release_slots(slots: Slots) -> None:
    """Drop every reference held by the buffer."""
    slots.clear()
