"""Errors raised while aligning INSERT statements."""

from __future__ import annotations


class FormatError(Exception):
    """A statement could not be aligned.

    ``offset`` is relative to the text that was being parsed when the error is
    raised; the rewriter rebases it to an absolute file offset and fills in
    ``line`` and ``statement_line`` before handing the error to its caller.
    """

    kind = "format"

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        line: int | None = None,
        statement_line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.line = line
        self.statement_line = statement_line

    def rebase(self, base: int) -> FormatError:
        """Shift the offset by ``base`` and return self."""
        if self.offset is not None:
            self.offset += base
        return self

    def __str__(self) -> str:
        text = self.message
        if self.line is not None:
            text = f"line {self.line}: {text}"
        if self.statement_line is not None and self.statement_line != self.line:
            text = f"{text} (INSERT at line {self.statement_line})"
        return text


class TokenizeError(FormatError):
    """Unterminated quoted literal or otherwise unsplittable tuple."""

    kind = "tokenize"


class StructureError(FormatError):
    """Unbalanced parentheses, no tuples, or inconsistent tuple arity."""

    kind = "structure"
