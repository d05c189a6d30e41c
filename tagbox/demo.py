"""
End-to-end driver: build a tuple and a list over the same values and print both.
"""
from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from tagbox.containers import FixedTuple, GrowableList
from tagbox.values import CharValue, Entry, FloatValue, IntValue

DEFAULT_TUPLE_NAME = "mytuple"


@dataclass(frozen=True)
class DemoResult:
    """Sizes observed while the demo containers were alive."""
    tuple_name: str
    tuple_length: int
    list_length: int
    list_capacity: int


def default_values() -> list[Entry]:
    return [IntValue(42), FloatValue(3.14), CharValue("A")]


def run_demo(values: Optional[Sequence[Entry]] = None,
             name: str = DEFAULT_TUPLE_NAME,
             stream: Optional[TextIO] = None) -> DemoResult:
    """Print `values` through a FixedTuple, then through a GrowableList built by appending.

    Both containers are released before returning; the values are not touched.

    Raises:
        AllocationFailure: If any slot buffer cannot be allocated.
    """
    stream = stream or sys.stdout
    if values is None:
        values = default_values()

    with FixedTuple.construct(name, values) as tup:
        tup.print(stream)
        tuple_length = tup.length

    with GrowableList.from_values(values) as lst:
        lst.print(stream)
        list_length, list_capacity = lst.length, lst.capacity

    return DemoResult(
        tuple_name=name,
        tuple_length=tuple_length,
        list_length=list_length,
        list_capacity=list_capacity,
    )
