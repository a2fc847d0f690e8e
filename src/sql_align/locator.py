"""Location of ``INSERT ... VALUES ...;`` statements in SQL text."""

from __future__ import annotations

import logging

import ply.lex as lex

from sql_align.errors import FormatError
from sql_align.parsing.sql_lexer import SqlLexer, token_end
from sql_align.types import Statement

logger = logging.getLogger(__name__)


def line_of(text: str, offset: int) -> int:
    """1-based line number of ``offset`` in ``text``."""
    return text.count("\n", 0, offset) + 1


def leading_indent(text: str, offset: int) -> str:
    """Whitespace in front of ``offset`` on its line, or "" if other text precedes it."""
    line_start = text.rfind("\n", 0, offset) + 1
    prefix = text[line_start:offset]
    return prefix if not prefix.strip() else ""


def line_ending(text: str, offset: int) -> str:
    """Line break used by the first line ending at or after ``offset``."""
    end = text.find("\n", offset)
    if end > 0 and text[end - 1] == "\r":
        return "\r\n"
    return "\n"


class _Candidate:
    """An INSERT whose VALUES clause has not been closed yet."""

    def __init__(self, start: int, header_end: int) -> None:
        self.start = start
        self.depth = 0
        self.seen_into = False
        self.header_end = header_end
        self.keyword: str | None = None
        self.values_start = 0
        self.values_end = 0


class StatementLocator:
    """Find INSERT statements with a VALUES clause, skipping strings and comments."""

    def __init__(self) -> None:
        self.lexer = SqlLexer()
        self.lexer.build()

    def locate(self, text: str) -> tuple[list[Statement], list[FormatError]]:
        """Return the statements found in ``text`` and any scanning error.

        Scanning stops at the first lexical error. Statements completed before
        it are still returned; the error is attributed to the INSERT being
        scanned when there is one.
        """
        statements: list[Statement] = []
        candidate: _Candidate | None = None

        self.lexer.input(text)
        try:
            for tok in self.lexer:
                if candidate is None:
                    if tok.type == "WORD" and tok.value.upper() == "INSERT":
                        candidate = _Candidate(tok.lexpos, token_end(tok))
                    continue

                if candidate.keyword is None:
                    candidate = self._scan_header(candidate, tok)
                    continue

                if tok.type == "SEMICOLON":
                    statements.append(self._finish(text, candidate, tok.lexpos, ";"))
                    candidate = None
                else:
                    candidate.values_end = token_end(tok)
        except FormatError as e:
            e.line = line_of(text, e.offset or 0)
            if candidate is not None:
                e.statement_line = line_of(text, candidate.start)
            logger.debug("Stopped scanning at line %d: %s", e.line, e.message)
            return statements, [e]

        if candidate is not None and candidate.keyword is not None:
            statements.append(self._finish(text, candidate, candidate.values_end, ""))
        return statements, []

    def _scan_header(self, candidate: _Candidate, tok: lex.LexToken) -> _Candidate | None:
        """Advance through the header; returns None when the INSERT has no VALUES."""
        if tok.type == "SEMICOLON":
            return None
        if tok.type == "LPAREN":
            candidate.depth += 1
        elif tok.type == "RPAREN":
            candidate.depth -= 1
        elif tok.type == "WORD" and candidate.depth == 0:
            word = tok.value.upper()
            if word == "INTO":
                candidate.seen_into = True
            elif word == "VALUES" and candidate.seen_into:
                candidate.keyword = tok.value
                candidate.values_start = token_end(tok)
                candidate.values_end = candidate.values_start
                return candidate
        candidate.header_end = token_end(tok)
        return candidate

    def _finish(self, text: str, candidate: _Candidate, values_end: int, terminator: str) -> Statement:
        end = values_end + len(terminator)
        return Statement(
            start=candidate.start,
            header_end=candidate.header_end,
            keyword=candidate.keyword or "VALUES",
            values_start=candidate.values_start,
            values_end=values_end,
            end=end,
            terminator=terminator,
            line=line_of(text, candidate.start),
            indent=leading_indent(text, candidate.start),
            newline=line_ending(text, candidate.start),
            source=text,
        )
