"""Options for formatting text and files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FormatOptions:
    """Layout options for rendered VALUES blocks."""

    indent: int = 4  # spaces in front of each tuple line

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}")

    @property
    def indent_text(self) -> str:
        return " " * self.indent


def default_jobs() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RunOptions:
    """Options for formatting files on disk."""

    dry_run: bool = False
    backup: bool = False
    jobs: int = field(default_factory=default_jobs)
    format: FormatOptions = field(default_factory=FormatOptions)

    def __post_init__(self) -> None:
        if self.jobs < 1:
            raise ValueError(f"jobs must be at least 1, got {self.jobs}")
