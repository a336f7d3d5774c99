# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/cli/main.py

"""
Command line entry point for normname.

Expands each pattern, then normalizes every match in order. The first
error aborts the run with exit code 1.
"""

# Standard library imports
from importlib.metadata import version
from typing import Optional

# Third-party imports
import typer
from loguru import logger
from rich.console import Console

# Local imports
from normname.cli.utils import expand_patterns, handle_operation_error
from normname.config.manager import UserConfig, load_merged_user_config, resolve_form
from normname.core.normalizer import TraversalContext, normalize_paths
from normname.system.display import OutputMode, display_summary, print_rename
from normname.system.exceptions import ConfigError, NormNameError
from normname.system.logging_setup import setup_logging

HELP_DETAILS = """Rename files in Unicode normalized form.

Some Unicode characters can be represented by different combinations of code
points. The e-acute character can be either composed (U+00E9) or decomposed
(e + U+0301). macOS typically uses the decomposed NFD form for filenames, while
Windows uses the composed NFC form, so the same filename can look different
across operating systems.

normname renames files to a chosen normalized form. Without --form the host
default is used: NFC on Windows, NFD on macOS, NFC elsewhere.
"""

HELP_EXAMPLES = """[bold]Examples[/bold]

Change filenames in the current directory to Windows-friendly form:
  $ normname --form win '*'

Change filenames to macOS-friendly form, recursing into subdirectories:
  $ normname --form mac -r '*'

Print possible filenames for NFKD form without changing anything:
  $ normname --form NFKD -r --dry-run --both '*'

[bold]Memo[/bold]: NFKC and NFKD may cause irreversible changes. Be careful using them.
"""

app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("normname")
        except Exception as e:
            handle_operation_error(err_console, "retrieving version", e)
        console.print(f"normname version {pkg_version}")
        raise typer.Exit()


@app.command(help=HELP_DETAILS, epilog=HELP_EXAMPLES)
def main(
    ctx: typer.Context,
    patterns: Optional[list[str]] = typer.Argument(
        None, help="Files, directories or glob patterns to normalize", show_default=False
    ),
    form: Optional[str] = typer.Option(
        None, "--form", "-f",
        help="Unicode normalization form: NFC, NFD, NFKC, NFKD, or WIN (=NFC), MAC (=NFD)",
        show_default=False
    ),
    recurse: bool = typer.Option(False, "--recurse", "-r", help="Recurse into subdirectories"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print filenames"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "--dryrun", "-d", help="Do not rename anything; print only"
    ),
    both: bool = typer.Option(False, "--both", "-b", help="Print both original and changed filename"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print a summary of the run"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    show_version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
) -> None:
    if not patterns:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    user_config = _load_user_config()
    setup_logging(debug=debug, user_config=user_config)

    try:
        form_code = resolve_form(form, user_config)
    except ConfigError as e:
        handle_operation_error(err_console, "in configuration", e)

    mode = OutputMode.from_flags(quiet=quiet, both=both)
    context = TraversalContext(
        form=form_code,
        recurse=recurse,
        dry_run=dry_run,
        on_rename=lambda record: print_rename(console, record, mode),
    )
    logger.debug(f"Normalizing to {form_code.value} (recurse={recurse}, dry_run={dry_run})")
    if form_code.is_compatibility and not dry_run:
        logger.warning(f"{form_code.value} renames are not reversible; try --dry-run first")

    try:
        normalize_paths(expand_patterns(patterns), context)
    except NormNameError as e:
        logger.debug(f"Aborting after {context.rename_count} rename(s): {e}")
        handle_operation_error(err_console, "normalizing filenames", e)

    if verbose and not quiet:
        display_summary(console, context)


def _load_user_config() -> UserConfig:
    try:
        return load_merged_user_config()
    except ConfigError as e:
        handle_operation_error(err_console, "loading configuration", e)


def cli_main() -> None:
    """Entry point for the normname console script."""
    app()
