"""Lexing and parsing of INSERT VALUES clauses."""

from sql_align.parsing.classifier import classify
from sql_align.parsing.sql_lexer import SqlLexer
from sql_align.parsing.tokenizer import ValueTokenizer, split_values
from sql_align.parsing.tuple_parser import TupleParser

__all__ = [
    "SqlLexer",
    "TupleParser",
    "ValueTokenizer",
    "classify",
    "split_values",
]
