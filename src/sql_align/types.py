"""Data model for aligned INSERT statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ValueKind(Enum):
    """Lexical kind of a literal in a VALUES tuple."""

    NUMERIC = "numeric"
    STRING = "string"
    NULL = "null"
    OTHER = "other"


class Alignment(Enum):
    """Horizontal alignment of a column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Value:
    """One scalar literal of a tuple."""

    raw: str
    kind: ValueKind

    @property
    def display(self) -> str:
        """Text rendered for this value."""
        return self.raw


@dataclass
class Row:
    """One parenthesized tuple of a VALUES clause."""

    values: list[Value]
    offset: int = 0  # of the opening parenthesis, relative to the values region

    @property
    def arity(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Column:
    """Render width and alignment shared by all values at one index."""

    index: int
    width: int
    alignment: Alignment


@dataclass
class Statement:
    """An ``INSERT ... VALUES ...`` statement located in a file.

    Offsets are absolute positions in the source text. ``header_end`` is the
    position right after the last non-space character before ``VALUES``;
    ``end`` is the position right after the terminator (or after the last
    lexeme of the values region when there is no terminator).
    """

    start: int
    header_end: int
    keyword: str
    values_start: int
    values_end: int
    end: int
    terminator: str
    line: int
    indent: str = ""
    newline: str = "\n"
    source: str = field(default="", repr=False)
    rows: list[Row] = field(default_factory=list)

    @property
    def header(self) -> str:
        """Verbatim statement text from INSERT up to VALUES."""
        return self.source[self.start:self.header_end]

    @property
    def values_text(self) -> str:
        """Text between VALUES and the terminator."""
        return self.source[self.values_start:self.values_end]
