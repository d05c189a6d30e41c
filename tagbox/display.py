"""Human-readable rendering of tagged values and container listings."""
from __future__ import annotations
import sys
from typing import List, TextIO, Optional

from tagbox.containers.frame import Frame
from tagbox.internals.errors import raise_internal_error
from tagbox.values import Entry, IntValue, FloatValue, CharValue

INVALID_DATA = "Invalid Data"


def format_value(value: Entry) -> str:
    """Format one slot: 'Type: <KIND>, Value: <payload>', or 'Invalid Data' for None.

    INT prints in decimal, FLOAT with two decimals, CHAR as the literal character.
    """
    match value:
        case None:
            return INVALID_DATA
        case IntValue(value=payload):
            text = f"{payload:d}"
        case FloatValue(value=payload):
            text = f"{payload:.2f}"
        case CharValue(value=payload):
            text = payload
        case _:
            raise_internal_error("IE0001", type=type(value).__name__)
    return f"Type: {value.kind.label}, Value: {text}"


def format_entries(container: Frame) -> List[str]:
    return [f"Index: {index}, {format_value(entry)}" for index, entry in enumerate(container)]


def print_container(container: Frame, stream: Optional[TextIO] = None) -> None:
    """Write one 'Index: i, ...' line per slot in [0, length) to `stream` (default: stdout)."""
    stream = stream or sys.stdout
    for line in format_entries(container):
        print(line, file=stream)
