"""Lark parser setup for value literal sequences."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Transformer, UnexpectedInput, UnexpectedCharacters, UnexpectedToken
from lark.exceptions import VisitError

from tagbox.internals.errors import LiteralSyntaxError, TagboxError, ValueKindError
from tagbox.internals.report import Span, span_of
from tagbox.values import Entry, Kind, make_value

GRAMMAR_PATH = Path(__file__).parent.parent / "grammar.lark"

_ESCAPES = {
    "'": "'",
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


@dataclass
class ParsedValues:
    """Values read from a literal, in order, with the shape that enclosed them.

    shape is "tuple" for ( ), "list" for [ ], or "bare" when unenclosed.
    spans runs parallel to values.
    """
    shape: str
    values: List[Entry] = field(default_factory=list)
    spans: List[Optional[Span]] = field(default_factory=list)


class ValueBuilder(Transformer):
    """Turn a literal parse tree into TaggedValues."""

    def int_lit(self, children):
        tok: Token = children[0]
        return make_value(Kind.INT, int(tok.value), span_of(tok)), span_of(tok)

    def float_lit(self, children):
        tok: Token = children[0]
        payload = float(tok.value)
        # No infinity literal exists, so inf here means the decimal overflowed
        if math.isinf(payload):
            raise ValueKindError("CE2002", span=span_of(tok), value=tok.value)
        return make_value(Kind.FLOAT, payload, span_of(tok)), span_of(tok)

    def char_lit(self, children):
        tok: Token = children[0]
        body = tok.value[1:-1]
        if body.startswith("\\"):
            try:
                body = _ESCAPES[body[1]]
            except KeyError:
                raise LiteralSyntaxError("CE2010", span=span_of(tok),
                                         reason=f"unknown escape {body!r}") from None
        return make_value(Kind.CHAR, body, span_of(tok)), span_of(tok)

    def null_lit(self, children):
        return None, span_of(children[0])

    def items(self, children):
        return list(children)

    def _shape(self, shape: str, children) -> ParsedValues:
        pairs = children[0] if children else []
        return ParsedValues(
            shape=shape,
            values=[value for value, _ in pairs],
            spans=[span for _, span in pairs],
        )

    def tuple_shape(self, children):
        return self._shape("tuple", children)

    def list_shape(self, children):
        return self._shape("list", children)

    def bare_shape(self, children):
        return self._shape("bare", children)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark.open(
        str(GRAMMAR_PATH),
        parser="lalr",
        propagate_positions=True,
        maybe_placeholders=False,
        lexer="basic",
    )


def _span_from_error(e: UnexpectedInput) -> Optional[Span]:
    line = getattr(e, "line", None)
    col = getattr(e, "column", None)
    if isinstance(line, int) and isinstance(col, int) and line > 0 and col > 0:
        return Span(line, col, line, col)
    return None


def _describe_error(e: UnexpectedInput) -> str:
    if isinstance(e, UnexpectedCharacters):
        return f"unexpected character {e.char!r}"
    if isinstance(e, UnexpectedToken):
        if e.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {e.token.value!r}"
    return "unexpected input"


def parse_values(src: str, dump_parse: bool = False) -> ParsedValues:
    """Parse a literal such as "42, 3.14, 'A', null" into TaggedValues.

    Raises:
        LiteralSyntaxError: CE2010 when the text does not match the grammar.
        ValueKindError: When a literal does not fit its kind (e.g. a 33-bit integer).
    """
    try:
        tree = _parser().parse(src)
    except UnexpectedInput as e:
        raise LiteralSyntaxError("CE2010", span=_span_from_error(e), reason=_describe_error(e)) from None

    if dump_parse:
        print(tree.pretty())

    try:
        return ValueBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, TagboxError):
            raise e.orig_exc from None
        raise
