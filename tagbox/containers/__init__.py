"""Container shapes over tagged values: a fixed tuple and a growable list."""
from tagbox.containers.frame import Frame
from tagbox.containers.fixed_tuple import FixedTuple
from tagbox.containers.growable_list import GrowableList, DEFAULT_CAPACITY, GROWTH_FACTOR

__all__ = [
    'Frame',
    'FixedTuple',
    'GrowableList',
    'DEFAULT_CAPACITY',
    'GROWTH_FACTOR',
]
