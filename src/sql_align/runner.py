"""Formatting of SQL files on disk."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from sql_align.config import FormatOptions, RunOptions
from sql_align.errors import FormatError
from sql_align.formatter import SqlFormatter

logger = logging.getLogger(__name__)

SKIPPED_DIRS = frozenset({"target", ".git"})

_local = threading.local()


class FileStatus(Enum):
    REWRITTEN = "rewritten"
    UNCHANGED = "unchanged"
    ERROR = "error"


@dataclass
class FileReport:
    """Outcome of formatting one file.

    ``changed`` tells whether the formatted content differs from the file;
    in dry-run mode it is set even though nothing was written. ``message``
    holds the reason for a read/write failure.
    """

    path: Path
    status: FileStatus
    changed: bool = False
    errors: list[FormatError] = field(default_factory=list)
    message: str | None = None


def is_sql_file(path: Path) -> bool:
    """Check if a path is an SQL file."""
    return path.is_file() and path.suffix.lower() == ".sql"


def iter_sql_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield the SQL files named by ``paths``, walking directories recursively.

    Hidden directories, ``.git`` and ``target`` are not entered. Files named
    explicitly are yielded even without a ``.sql`` suffix.
    """
    for p in paths:
        if p.is_dir():
            found = []
            for root, dirs, files in os.walk(p):
                dirs[:] = [d for d in dirs if d not in SKIPPED_DIRS and not d.startswith(".")]
                for f in files:
                    fp = Path(root) / f
                    if is_sql_file(fp):
                        logger.debug("Found SQL file: %s", fp)
                        found.append(fp)
            yield from sorted(found)
        else:
            yield p


def _formatter(options: FormatOptions) -> SqlFormatter:
    """Per-thread formatter; built lexers and parsers are not shareable."""
    formatter = getattr(_local, "formatter", None)
    if formatter is None or formatter.options != options:
        formatter = SqlFormatter(options)
        _local.formatter = formatter
    return formatter


def format_file(path: Path, options: RunOptions | None = None) -> FileReport:
    """Format one file in place and report what happened."""
    options = options or RunOptions()
    logger.debug("Reading file: %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return FileReport(path=path, status=FileStatus.ERROR, message=str(e))

    result = _formatter(options.format).format(content)
    status = FileStatus.REWRITTEN if result.changed else FileStatus.UNCHANGED
    if result.errors:
        status = FileStatus.ERROR
    report = FileReport(path=path, status=status, changed=result.changed, errors=result.errors)

    if not result.changed:
        logger.debug("No changes needed for: %s", path)
        return report
    if options.dry_run:
        logger.debug("Dry run - not writing changes to %s", path)
        return report

    try:
        if options.backup:
            backup_path = path.with_name(path.name + ".bak")
            logger.debug("Creating backup: %s", backup_path)
            backup_path.write_text(content, encoding="utf-8")
        path.write_text(result.text, encoding="utf-8")
    except OSError as e:
        report.status = FileStatus.ERROR
        report.changed = False
        report.message = str(e)
    return report


def format_paths(paths: Iterable[Path], options: RunOptions | None = None) -> list[FileReport]:
    """Format every SQL file under ``paths``; reports keep the input order.

    Files are independent, so they are spread over a pool of ``options.jobs``
    threads.
    """
    options = options or RunOptions()
    files = list(iter_sql_files(paths))
    logger.debug("Formatting %d file(s) with %d worker(s)", len(files), options.jobs)
    if options.jobs == 1 or len(files) <= 1:
        return [format_file(path, options) for path in files]

    with ThreadPoolExecutor(max_workers=options.jobs) as executor:
        return list(executor.map(lambda path: format_file(path, options), files))
