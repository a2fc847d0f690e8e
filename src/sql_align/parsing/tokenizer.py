"""Splitting of one tuple's interior into raw value tokens."""

from __future__ import annotations

from sql_align.errors import FormatError, TokenizeError
from sql_align.parsing.sql_lexer import SqlLexer, token_end


class ValueTokenizer:
    """Split the text between a tuple's parentheses on top-level commas."""

    def __init__(self) -> None:
        self.lexer = SqlLexer()
        self.lexer.build()

    def split(self, interior: str, base: int = 0) -> list[str]:
        """Return the raw tokens of ``interior`` in order.

        Quoted runs are opaque, nested parentheses are kept as token text, and
        whitespace around each token is dropped. Error offsets are shifted by
        ``base`` so the caller can point into its own text.
        """
        try:
            return self._split(interior)
        except FormatError as e:
            raise e.rebase(base)

    def _split(self, interior: str) -> list[str]:
        values: list[str] = []
        depth = 0
        start: int | None = None
        end = 0
        last_comma = 0

        self.lexer.input(interior)
        for tok in self.lexer:
            if tok.type == "COMMENT":
                raise TokenizeError("comment inside a tuple", offset=tok.lexpos)
            if tok.type == "COMMA" and depth == 0:
                if start is None:
                    raise TokenizeError("empty value", offset=tok.lexpos)
                values.append(interior[start:end])
                start = None
                last_comma = tok.lexpos
                continue
            if tok.type == "LPAREN":
                depth += 1
            elif tok.type == "RPAREN":
                depth -= 1
            if start is None:
                start = tok.lexpos
            end = token_end(tok)

        if start is None:
            if values:
                raise TokenizeError("empty value", offset=last_comma)
            return values
        values.append(interior[start:end])
        return values


def split_values(interior: str) -> list[str]:
    """Split one tuple interior with a throwaway tokenizer."""
    return ValueTokenizer().split(interior)
