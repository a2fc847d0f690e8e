"""Per-column width and alignment of a statement's rows."""

from __future__ import annotations

from sql_align.types import Alignment, Column, Row, ValueKind


def compute_columns(rows: list[Row]) -> list[Column]:
    """Reduce a grid of rows to one Column per value index.

    A column is right-aligned only when every value in it is numeric.
    """
    if not rows:
        return []

    columns = []
    for index in range(rows[0].arity):
        values = [row.values[index] for row in rows]
        width = max(len(value.display) for value in values)
        if all(value.kind is ValueKind.NUMERIC for value in values):
            alignment = Alignment.RIGHT
        else:
            alignment = Alignment.LEFT
        columns.append(Column(index=index, width=width, alignment=alignment))
    return columns
