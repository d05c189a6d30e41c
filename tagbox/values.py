"""
Tagged values: a closed sum type over INT, FLOAT and CHAR.

Each variant is a frozen dataclass whose payload is validated on
construction, so a value's payload always matches its kind. No implicit
conversion is performed between kinds.
"""
from __future__ import annotations
import struct
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from tagbox.internals.errors import ValueKindError
from tagbox.internals.report import Span

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Kind(Enum):
    INT = "INT"
    FLOAT = "FLOAT"
    CHAR = "CHAR"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def _type_name(payload: object) -> str:
    return type(payload).__name__


def _to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass(frozen=True)
class IntValue:
    value: int
    kind: ClassVar[Kind] = Kind.INT

    def __post_init__(self) -> None:
        # bool is an int subclass but not an INT payload
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueKindError("CE2004", kind=self.kind, expected="int", actual=_type_name(self.value))
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueKindError("CE2001", value=self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    """Single-precision payload; the constructor narrows the given float."""
    value: float
    kind: ClassVar[Kind] = Kind.FLOAT

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise ValueKindError("CE2004", kind=self.kind, expected="float", actual=_type_name(self.value))
        try:
            narrowed = _to_float32(self.value)
        except OverflowError:
            raise ValueKindError("CE2002", value=self.value) from None
        object.__setattr__(self, "value", narrowed)

    def __str__(self) -> str:
        return f"{self.value:.2f}"


@dataclass(frozen=True)
class CharValue:
    value: str
    kind: ClassVar[Kind] = Kind.CHAR

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueKindError("CE2004", kind=self.kind, expected="str", actual=_type_name(self.value))
        if len(self.value) != 1:
            raise ValueKindError("CE2003", value=repr(self.value))

    def __str__(self) -> str:
        return self.value


TaggedValue = Union[IntValue, FloatValue, CharValue]

# A container slot: a shared reference to a value, or None for an absent one
Entry = Optional[TaggedValue]


def check_entry(entry: object) -> Entry:
    """Return `entry` unchanged if it may be stored in a container slot.

    Raises:
        ValueKindError: CE2006 for anything other than a TaggedValue or None.
    """
    if entry is None or isinstance(entry, (IntValue, FloatValue, CharValue)):
        return entry
    raise ValueKindError("CE2006", actual=_type_name(entry))


_CONSTRUCTORS = {
    Kind.INT: IntValue,
    Kind.FLOAT: FloatValue,
    Kind.CHAR: CharValue,
}


def make_value(kind: Union[Kind, str], payload: object, span: Optional[Span] = None) -> TaggedValue:
    """Build a TaggedValue from an explicit kind and a matching payload.

    Args:
        kind: A Kind member or its label ("INT", "FLOAT", "CHAR"; case-insensitive).
        payload: The payload; its Python type must match the kind.
        span: Optional source location attached to any ValueKindError.

    Raises:
        ValueKindError: Unknown kind (CE2005) or a payload that does not fit (CE2001-CE2004).
    """
    if not isinstance(kind, Kind):
        try:
            kind = Kind(str(kind).upper())
        except ValueError:
            known = ", ".join(k.label for k in Kind)
            raise ValueKindError("CE2005", span=span, kind=kind, known=known) from None

    try:
        return _CONSTRUCTORS[kind](payload)
    except ValueKindError as exc:
        if span is None:
            raise
        raise ValueKindError(exc.code, span=span, **exc.params) from None
