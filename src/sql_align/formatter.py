"""Rewriting of SQL text with aligned INSERT ... VALUES blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sql_align.config import FormatOptions
from sql_align.errors import FormatError
from sql_align.layout import compute_columns
from sql_align.locator import StatementLocator, line_of
from sql_align.parsing.tuple_parser import TupleParser
from sql_align.render import render_values_block
from sql_align.types import Statement

logger = logging.getLogger(__name__)


@dataclass
class FormatResult:
    """Formatted text plus one error per statement that was left untouched."""

    text: str
    original: str = field(repr=False)
    errors: list[FormatError] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.text != self.original

    @property
    def ok(self) -> bool:
        return not self.errors


class SqlFormatter:
    """Align the VALUES tuples of every INSERT statement in a text.

    A formatter holds built lexers and parsers and is not thread-safe; use
    one instance per thread.
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self.options = options or FormatOptions()
        self.locator = StatementLocator()
        self.parser = TupleParser()

    def format(self, text: str) -> FormatResult:
        """Return ``text`` with each well-formed INSERT statement aligned.

        Statements that fail to parse are copied verbatim and reported in
        ``FormatResult.errors``; text outside statements is never changed.
        """
        statements, errors = self.locator.locate(text)
        logger.debug("Found %d INSERT statement(s)", len(statements))

        pieces = []
        cursor = 0
        for statement in statements:
            try:
                block = self.format_statement(statement)
            except FormatError as e:
                errors.append(self._locate_error(e, statement, text))
                logger.debug("Skipping INSERT at line %d: %s", statement.line, e.message)
                continue
            pieces.append(text[cursor:statement.header_end])
            pieces.append(block)
            cursor = statement.end
        pieces.append(text[cursor:])

        errors.sort(key=lambda e: e.offset or 0)
        return FormatResult(text="".join(pieces), original=text, errors=errors)

    def format_statement(self, statement: Statement) -> str:
        """Render the replacement for one statement's VALUES clause."""
        logger.debug("Formatting INSERT at line %d", statement.line)
        statement.rows = self.parser.parse(statement.values_text)
        columns = compute_columns(statement.rows)
        return render_values_block(statement, columns, self.options.indent_text)

    def _locate_error(self, error: FormatError, statement: Statement, text: str) -> FormatError:
        if error.offset is None:
            error.offset = statement.values_start
        else:
            error.rebase(statement.values_start)
        error.line = line_of(text, error.offset)
        error.statement_line = statement.line
        return error


def format_sql(text: str, options: FormatOptions | None = None) -> FormatResult:
    """Format ``text`` with a fresh SqlFormatter."""
    return SqlFormatter(options).format(text)
