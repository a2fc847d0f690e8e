"""Rendering of aligned VALUES blocks."""

from __future__ import annotations

from sql_align.types import Alignment, Column, Row, Statement


def render_row(row: Row, columns: list[Column]) -> str:
    """Render one tuple as ``(v, v, v)`` with every column padded.

    Left-aligned values in the last column are not padded, so no run of
    spaces is left in front of the closing parenthesis.
    """
    last = len(columns) - 1
    cells = []
    for value, column in zip(row.values, columns):
        if column.alignment is Alignment.RIGHT:
            cells.append(value.display.rjust(column.width))
        elif column.index == last:
            cells.append(value.display)
        else:
            cells.append(value.display.ljust(column.width))
    return "(" + ", ".join(cells) + ")"


def render_rows(rows: list[Row], columns: list[Column], terminator: str = ";") -> list[str]:
    """Render every row, ending all but the last with a comma."""
    lines = [render_row(row, columns) + "," for row in rows[:-1]]
    lines.append(render_row(rows[-1], columns) + terminator)
    return lines


def render_values_block(statement: Statement, columns: list[Column], indent: str = "    ") -> str:
    """Render the replacement for a statement's VALUES clause.

    The result starts with the line break that follows the header and ends
    with the statement terminator, if the statement had one.
    """
    lines = [statement.indent + statement.keyword]
    for line in render_rows(statement.rows, columns, statement.terminator):
        lines.append(statement.indent + indent + line)
    return statement.newline + statement.newline.join(lines)
