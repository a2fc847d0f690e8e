"""Lexer for the SQL subset needed to align INSERT statements."""

import ply.lex as lex

from sql_align.errors import TokenizeError


class SqlLexer:
    """Quote- and comment-aware lexer producing offset-carrying tokens.

    Every token keeps its source text as ``value`` so that callers can slice
    the original input with ``lexpos`` and ``len(value)``.
    """

    tokens = [
        "STRING",
        "QUOTED",
        "COMMENT",
        "WORD",
        "LPAREN",
        "RPAREN",
        "COMMA",
        "SEMICOLON",
    ]

    t_LPAREN = r"\("
    t_RPAREN = r"\)"
    t_COMMA = r","
    t_SEMICOLON = r";"

    # Ignored characters (newlines are counted separately)
    t_ignore = " \t\r\f\v"

    _UNTERMINATED = {
        "'": "unterminated quoted literal",
        '"': "unterminated quoted identifier",
        "`": "unterminated quoted identifier",
        "/": "unterminated block comment",
    }

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    def t_COMMENT(self, t: lex.LexToken) -> lex.LexToken:
        r"--[^\r\n]*|/\*(?:.|\n)*?\*/"
        t.lexer.lineno += t.value.count("\n")
        return t

    def t_STRING(self, t: lex.LexToken) -> lex.LexToken:
        r"'(?:[^']|'')*'"
        t.lexer.lineno += t.value.count("\n")
        return t

    def t_QUOTED(self, t: lex.LexToken) -> lex.LexToken:
        r'"(?:[^"]|"")*"|`[^`]*`'
        t.lexer.lineno += t.value.count("\n")
        return t

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r"(?:[^\s(),;'\"`/-]|-(?!-)|/(?!\*))+"
        return t

    def t_NEWLINE(self, t: lex.LexToken) -> None:
        r"\n+"
        t.lexer.lineno += len(t.value)

    def t_error(self, t: lex.LexToken) -> None:
        char = t.value[0]
        message = self._UNTERMINATED.get(char, f"illegal character {char!r}")
        raise TokenizeError(message, offset=t.lexpos)

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        kwargs.setdefault("errorlog", lex.NullLogger())
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.lineno = 1
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def __iter__(self):  # type: ignore
        while True:
            tok = self.token()
            if tok is None:
                return
            yield tok

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        return list(self)


def token_end(tok: lex.LexToken) -> int:
    """Offset right after ``tok`` in the lexed text."""
    return tok.lexpos + len(tok.value)
