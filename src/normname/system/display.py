# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/system/display.py

# Standard library imports
import os
from enum import Enum
from typing import Optional

# Third-party imports
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Local imports
from normname.core.normalizer import RenameRecord, TraversalContext


class OutputMode(Enum):
    """What to print for each renamed entry."""
    QUIET = "quiet"
    NEW = "new"
    BOTH = "both"

    @classmethod
    def from_flags(cls, quiet: bool = False, both: bool = False) -> "OutputMode":
        if quiet:
            return cls.QUIET
        if both:
            return cls.BOTH
        return cls.NEW


def format_rename(record: RenameRecord, mode: OutputMode) -> Optional[str]:
    """Text printed for one rename, or None in quiet mode."""
    if mode is OutputMode.QUIET:
        return None
    if mode is OutputMode.BOTH:
        return f"{record.original}\n  -> {record.new}"
    return record.new


def printable(text: str) -> str:
    """Replace undecodable filename bytes (lone surrogates) for rich rendering."""
    return os.fsencode(text).decode("utf-8", "replace")


def write_path_text(console: Console, text: str) -> None:
    """Write path text as the raw filesystem bytes, like the names on disk.

    Names that are not valid UTF-8 come back from os.listdir with lone
    surrogates, which a text stream cannot encode.
    """
    stream = console.file
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        # Paths may contain "[...]", so no markup or highlighting.
        console.out(printable(text), highlight=False)
        return
    stream.flush()
    buffer.write(os.fsencode(text) + b"\n")
    buffer.flush()


def print_rename(console: Console, record: RenameRecord, mode: OutputMode) -> None:
    text = format_rename(record, mode)
    if text is not None:
        write_path_text(console, text)


def renames_to_table(context: TraversalContext) -> Table:
    """Convert the renames of a run to a rich Table for display."""
    title = "Renames (dry run)" if context.dry_run else "Renames"
    table = Table(title=f"{title} - {context.form.value}")
    table.add_column("Type")
    table.add_column("Original")
    table.add_column("New")

    for record in context.renames:
        table.add_row("dir" if record.is_dir else "file", Text(printable(record.original)), Text(printable(record.new)))

    return table


def display_summary(console: Console, context: TraversalContext) -> None:
    """Print the rename table and a one-line count."""
    if context.renames:
        console.print(renames_to_table(context))
    verb = "would be renamed" if context.dry_run else "renamed"
    noun = "entry" if context.rename_count == 1 else "entries"
    console.print(f"[bold]{context.rename_count}[/bold] {noun} {verb} ({context.form.value})")
