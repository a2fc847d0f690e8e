"""SQL Align - vertical alignment of INSERT ... VALUES tuples."""

from sql_align.config import FormatOptions, RunOptions
from sql_align.errors import FormatError, StructureError, TokenizeError
from sql_align.formatter import FormatResult, SqlFormatter, format_sql
from sql_align.layout import compute_columns
from sql_align.locator import StatementLocator
from sql_align.parsing import TupleParser, ValueTokenizer, classify
from sql_align.render import render_row
from sql_align.runner import FileReport, FileStatus, format_file, format_paths
from sql_align.types import Alignment, Column, Row, Statement, Value, ValueKind

__all__ = [
    # Main API
    "format_sql",
    "SqlFormatter",
    "FormatResult",
    "FormatOptions",
    # Files
    "RunOptions",
    "FileReport",
    "FileStatus",
    "format_file",
    "format_paths",
    # Pipeline
    "StatementLocator",
    "TupleParser",
    "ValueTokenizer",
    "classify",
    "compute_columns",
    "render_row",
    # Data model
    "Alignment",
    "Column",
    "Row",
    "Statement",
    "Value",
    "ValueKind",
    # Errors
    "FormatError",
    "StructureError",
    "TokenizeError",
]

__version__ = "0.1.0"
