"""
Container frame: ownership of the slot buffer and the release lifecycle.

A frame owns its slot buffer exclusively but only holds shared references
to the values in it. release() frees the buffer and then retires the frame;
any later access, including a second release(), raises
ReleasedContainerError.
"""
from __future__ import annotations
from typing import Iterator, Optional

from tagbox.internals.errors import ReleasedContainerError
from tagbox.memory import Slots, release_slots
from tagbox.values import Entry


class Frame:
    """Base class for tagbox containers.

    Subclasses set `container_name` (used in error messages) and populate
    `_slots` and `_length` in their constructor.
    """

    container_name = "container"

    def __init__(self) -> None:
        self._slots: Optional[Slots] = None
        self._length = 0
        self._released = False

    def _live_slots(self) -> Slots:
        if self._released or self._slots is None:
            raise ReleasedContainerError("RE2022", container=self.container_name)
        return self._slots

    @property
    def released(self) -> bool:
        return self._released

    @property
    def length(self) -> int:
        """Number of slots in use."""
        self._live_slots()
        return self._length

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Entry]:
        """Linear scan over indices [0, length)."""
        slots = self._live_slots()
        for index in range(self._length):
            yield slots[index]

    def entry(self, index: int) -> Entry:
        """Return the reference stored at `index`, which must lie in [0, length).

        Raises:
            IndexError: If index is negative or not below length.
        """
        slots = self._live_slots()
        if not 0 <= index < self._length:
            raise IndexError(f"{self.container_name} index {index} out of range [0, {self._length})")
        return slots[index]

    def print(self, stream=None) -> None:
        """Write the index-annotated listing to `stream` (default: stdout)."""
        from tagbox.display import print_container
        print_container(self, stream)

    def release(self) -> None:
        """Free the slot buffer, then retire the frame.

        Raises:
            ReleasedContainerError: RE2023 if the container was already released.
        """
        if self._released:
            raise ReleasedContainerError("RE2023", container=self.container_name)
        if self._slots is not None:
            release_slots(self._slots)
        self._slots = None
        self._length = 0
        self._released = True

    def __enter__(self):
        self._live_slots()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()
