"""Shared CLI helpers: exit codes, console and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Shared console for output
console = Console()

# Log lines go to stderr so stdout stays parseable with --output json
_log_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger with a rich handler.

    Args:
        verbose: Enable DEBUG level.
        quiet: Only show errors. Ignored when verbose is set.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_log_console, show_path=verbose)],
        force=True,
    )


def _error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
