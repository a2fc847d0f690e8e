"""Command line entry point for aligning INSERT statements."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sql_align.config import FormatOptions, RunOptions, default_jobs
from sql_align.formatter import SqlFormatter
from sql_align.logtools import configure_logging
from sql_align.runner import FileReport, FileStatus, format_paths


def print_report(report: FileReport, dry_run: bool = False) -> None:
    """Print the outcome of one file."""
    if report.message is not None:
        print(f"Error formatting {report.path}: {report.message}", file=sys.stderr)
    for error in report.errors:
        print(f"{report.path}:{error.line}: {error.kind} error: {error}", file=sys.stderr)
    if report.changed:
        if dry_run:
            print(f"Would format: {report.path}")
        else:
            print(f"Formatted: {report.path}")


def run_stdin(options: FormatOptions) -> int:
    """Format SQL read from stdin and write it to stdout.

    Returns:
        0 on success, 1 if any statement could not be aligned
    """
    result = SqlFormatter(options).format(sys.stdin.read())
    sys.stdout.write(result.text)
    for error in result.errors:
        print(f"<stdin>:{error.line}: {error.kind} error: {error}", file=sys.stderr)
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        prog="sqlalign",
        description="Align the VALUES tuples of SQL INSERT statements into columns",
    )
    arg_parser.add_argument(
        "paths",
        type=Path,
        nargs="*",
        help="SQL files or directories to format (reads stdin when omitted)",
    )
    arg_parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Format all SQL files in the current directory and subdirectories",
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    arg_parser.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help="Show which files would change without modifying them",
    )
    arg_parser.add_argument(
        "-b", "--backup",
        action="store_true",
        help="Create .bak files before formatting",
    )
    arg_parser.add_argument(
        "-j", "--jobs",
        type=int,
        default=default_jobs(),
        help="Number of files formatted in parallel (default: CPU count)",
    )
    arg_parser.add_argument(
        "--indent",
        type=int,
        default=FormatOptions.indent,
        help="Spaces in front of each tuple line (default: 4)",
    )

    args = arg_parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        format_options = FormatOptions(indent=args.indent)
        options = RunOptions(
            dry_run=args.dry_run,
            backup=args.backup,
            jobs=args.jobs,
            format=format_options,
        )
    except ValueError as e:
        arg_parser.error(str(e))

    paths = list(args.paths)
    if args.all:
        paths.append(Path.cwd())
    if not paths:
        return run_stdin(format_options)

    missing = [path for path in paths if not path.exists()]
    for path in missing:
        print(f"Error: File not found: {path}", file=sys.stderr)

    reports = format_paths([path for path in paths if path.exists()], options)
    for report in reports:
        print_report(report, dry_run=args.dry_run)

    if missing or any(report.status is FileStatus.ERROR for report in reports):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
