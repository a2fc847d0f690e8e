"""Classification of raw value tokens."""

import re

from sql_align.types import Value, ValueKind

NUMERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
STRING_LITERAL = re.compile(r"'(?:[^']|'')*'", re.DOTALL)


def classify(raw: str) -> ValueKind:
    """Return the kind of one raw token.

    Rules apply in order: NULL, numeral, single-quoted literal, anything else.
    """
    token = raw.strip()
    if token.upper() == "NULL":
        return ValueKind.NULL
    if NUMERAL.fullmatch(token):
        return ValueKind.NUMERIC
    if STRING_LITERAL.fullmatch(token):
        return ValueKind.STRING
    return ValueKind.OTHER


def make_value(raw: str) -> Value:
    """Build a classified Value from a raw token."""
    return Value(raw=raw, kind=classify(raw))
