"""Parser for the tuple list of a VALUES clause."""

from __future__ import annotations

from typing import Any

import ply.yacc as yacc

from sql_align.errors import StructureError
from sql_align.parsing.classifier import make_value
from sql_align.parsing.sql_lexer import SqlLexer
from sql_align.parsing.tokenizer import ValueTokenizer
from sql_align.types import Row


class TupleParser:
    """Parser turning a values region into classified rows.

    The grammar only recognizes the tuple structure; each tuple's interior is
    handed to the ValueTokenizer afterwards. Nested parentheses inside a tuple
    are accepted and kept as value text.
    """

    tokens = SqlLexer.tokens

    def __init__(self) -> None:
        self.lexer = SqlLexer()
        self.lexer.build()
        self.tokenizer = ValueTokenizer()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_values(self, p: yacc.YaccProduction) -> None:
        """values : rows"""
        p[0] = p[1]

    def p_rows_single(self, p: yacc.YaccProduction) -> None:
        """rows : row"""
        p[0] = [p[1]]

    def p_rows_multiple(self, p: yacc.YaccProduction) -> None:
        """rows : rows COMMA row"""
        p[0] = p[1]
        p[0].append(p[3])

    def p_row_empty(self, p: yacc.YaccProduction) -> None:
        """row : LPAREN RPAREN"""
        p[0] = (p.lexpos(1), p.lexpos(1) + 1, p.lexpos(2))

    def p_row(self, p: yacc.YaccProduction) -> None:
        """row : LPAREN body RPAREN"""
        # (open paren, interior start, interior end)
        p[0] = (p.lexpos(1), p.lexpos(1) + 1, p.lexpos(3))

    def p_body(self, p: yacc.YaccProduction) -> None:
        """body : piece
                | body piece"""
        p[0] = None

    def p_piece(self, p: yacc.YaccProduction) -> None:
        """piece : STRING
                 | QUOTED
                 | WORD
                 | COMMA
                 | LPAREN RPAREN
                 | LPAREN body RPAREN"""
        p[0] = None

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p is None:
            raise StructureError("unbalanced parentheses: VALUES clause ends inside a tuple")
        if p.type == "RPAREN":
            raise StructureError("unbalanced parentheses: unexpected ')'", offset=p.lexpos)
        if p.type == "COMMENT":
            raise StructureError("comments are not supported inside a VALUES clause", offset=p.lexpos)
        raise StructureError(f"unexpected {p.value!r} in VALUES clause", offset=p.lexpos)

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, start="values", **kwargs)

    def parse(self, data: str) -> list[Row]:
        """Parse a values region into rows of classified values."""
        if self.parser is None:
            self.build(debug=False, write_tables=False, errorlog=yacc.NullLogger())

        if not data.strip():
            raise StructureError("no tuples found after VALUES", offset=0)

        self.lexer.input(data)
        spans = self.parser.parse(data, lexer=self.lexer.lexer)

        rows = []
        for open_pos, start, end in spans:
            raw_values = self.tokenizer.split(data[start:end], base=start)
            if not raw_values:
                raise StructureError("empty tuple", offset=open_pos)
            rows.append(Row(values=[make_value(raw) for raw in raw_values], offset=open_pos))

        arity = rows[0].arity
        for number, row in enumerate(rows, start=1):
            if row.arity != arity:
                raise StructureError(
                    f"tuple {number} has {row.arity} values, expected {arity}",
                    offset=row.offset,
                )
        return rows
