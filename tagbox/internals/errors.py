# tagbox/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from tagbox.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    VALUE     = "value"
    LITERAL   = "literal"
    RUNTIME   = "runtime"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


#
# --- Exceptions
#

class TagboxError(Exception):
    """Base class for errors raised by tagbox. Carries a catalog code."""

    def __init__(self, code: str, span: Optional[Span] = None, **kwargs) -> None:
        self.code = code
        self.span = span
        self.params = kwargs
        self.text = _fmt(code, **kwargs)
        super().__init__(f"{code}: {self.text}")


class AllocationFailure(TagboxError):
    """A slot buffer or frame could not be allocated (RE2021)."""

    def __init__(self, site: str) -> None:
        super().__init__("RE2021", site=site)
        self.site = site


class ReleasedContainerError(TagboxError):
    """A container was used, or released, after it had been released."""


class ValueKindError(TagboxError):
    """A payload does not fit the kind it was declared with."""


class LiteralSyntaxError(TagboxError):
    """A value literal could not be parsed."""


def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **kwargs) -> None:
    text = _fmt(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)

def emit_exception(r: Reporter, exc: TagboxError) -> None:
    """Record a raised TagboxError on the reporter."""
    emit(r, ERR[exc.code], exc.span, **exc.params)

def format_runtime_error(exc: TagboxError) -> str:
    """Runtime error line as written to stderr: 'Runtime Error RE2021: ...'."""
    return f"Runtime Error {exc.code}: {exc.text}"

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for internal errors.

    Internal errors (IE codes) indicate bugs in tagbox itself, not misuse
    by the caller.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None


#
# --- Value errors (CE20xx) ---
#

_add(ErrorMessage("CE2001", Severity.ERROR,
    "integer value {value} does not fit in 32 bits", Category.VALUE,
    "INT payloads are signed 32-bit integers in [-2147483648, 2147483647]."))

_add(ErrorMessage("CE2002", Severity.ERROR,
    "float value {value} is out of single-precision range", Category.VALUE,
    "FLOAT payloads are stored in single precision; finite values beyond its range are rejected."))

_add(ErrorMessage("CE2003", Severity.ERROR,
    "char value {value} must be exactly one character", Category.VALUE,
    "CHAR payloads hold a single character."))

_add(ErrorMessage("CE2004", Severity.ERROR,
    "{kind} value expects a {expected} payload, got {actual}", Category.VALUE,
    "No implicit conversion is performed between kinds; the payload type must match the kind."))

_add(ErrorMessage("CE2005", Severity.ERROR,
    "unknown value kind '{kind}' (expected one of: {known})", Category.VALUE,
    "Value kinds are INT, FLOAT and CHAR."))

_add(ErrorMessage("CE2006", Severity.ERROR,
    "container entries must be IntValue, FloatValue, CharValue or None, got {actual}", Category.VALUE,
    "Containers store tagged values or absent references; wrap raw payloads with make_value first."))

#
# --- Literal errors (CE201x) ---
#

_add(ErrorMessage("CE2010", Severity.ERROR,
    "malformed value literal: {reason}", Category.LITERAL,
    "Value literals are comma-separated integers, decimals, 'c' characters or null, "
    "optionally enclosed in () or []."))

_add(ErrorMessage("CW2011", Severity.WARNING,
    "null entry at index {index} will display as Invalid Data", Category.LITERAL,
    "A null literal stores an absent reference in the container."))

#
# --- Runtime Error Codes (RExxxx) ---
#

_add(ErrorMessage("RE2021", Severity.ERROR,
    "memory allocation failed ({site})", Category.RUNTIME,
    "The interpreter could not allocate a container frame or slot buffer."))

_add(ErrorMessage("RE2022", Severity.ERROR,
    "use of released {container}", Category.RUNTIME,
    "A container was accessed after release() freed its slot buffer."))

_add(ErrorMessage("RE2023", Severity.ERROR,
    "{container} released twice", Category.RUNTIME,
    "release() may be called at most once per container."))

#
# --- Internal errors (IExxxx) ---
#

_add(ErrorMessage("IE0001", Severity.ERROR,
    "unhandled value variant {type}", Category.INTERNAL,
    "Display reached a value that is not one of IntValue, FloatValue or CharValue."))
