# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/cli/utils.py

"""
CLI utility functions: pattern expansion and error exits.
"""

import glob
import os
from typing import Iterable, Iterator

import typer
from loguru import logger
from rich.console import Console

from normname.system.display import write_path_text


def expand_pattern(pattern: str) -> list[str]:
    """Expand one glob pattern into matching paths, sorted.

    A pattern without matches that names an existing entry literally
    (e.g. a file called "notes[1].txt" already expanded by the shell)
    is returned as-is.
    """
    matches = sorted(glob.glob(pattern, include_hidden=True))
    if not matches and os.path.lexists(pattern):
        matches = [pattern]
    if not matches:
        logger.debug(f"Pattern {pattern!r} matched nothing")
    else:
        logger.debug(f"Pattern {pattern!r} matched {len(matches)} path(s)")
    return matches


def expand_patterns(patterns: Iterable[str]) -> Iterator[str]:
    """Yield the expansion of each pattern in order; no deduplication across patterns."""
    for pattern in patterns:
        yield from expand_pattern(pattern)


def handle_operation_error(console: Console, operation: str, error: Exception) -> None:
    """Handle operation errors with consistent formatting."""
    console.print(f"[red]✗[/red] Error {operation}: ", end="")
    write_path_text(console, str(error))
    raise typer.Exit(1)
