"""Slot-buffer management for tagbox containers."""
from tagbox.memory.heap import (
    Slots,
    allocation_site,
    allocate_slots,
    copy_slots,
    reallocate_slots,
    release_slots,
)

__all__ = [
    'Slots',
    'allocation_site',
    'allocate_slots',
    'copy_slots',
    'reallocate_slots',
    'release_slots',
]
