"""FixedTuple: a named, write-once sequence of value references."""
from __future__ import annotations
from typing import Iterable

from tagbox.containers.frame import Frame
from tagbox.memory import allocation_site, copy_slots
from tagbox.values import Entry, check_entry


class FixedTuple(Frame):
    """Fixed-length container whose references are set once at construction.

    The slot buffer is allocated exactly once, sized to the input, and holds
    a shallow copy of the caller's references. The values themselves stay
    owned by the caller.

    Raises:
        AllocationFailure: RE2021 if the slot buffer cannot be allocated.
    """

    container_name = "tuple"

    def __init__(self, name: str, elements: Iterable[Entry]) -> None:
        super().__init__()
        self._name = name
        if not isinstance(elements, (list, tuple)):
            elements = tuple(elements)
        for element in elements:
            check_entry(element)
        self._slots = copy_slots(elements, site="tuple buffer")
        self._length = len(self._slots)

    @classmethod
    def construct(cls, name: str, elements: Iterable[Entry]) -> "FixedTuple":
        """Build a tuple, reporting a failed frame allocation as AllocationFailure."""
        with allocation_site("tuple frame"):
            return cls(name, elements)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        if self._released:
            return f"FixedTuple({self._name!r}, <released>)"
        return f"FixedTuple({self._name!r}, length={self._length})"
