"""Command-line entry point for dirwalk.

Walks a directory tree, prints each directory and file found, then a
summary of file count, subdirectory count, filetypes and empty directories.

Example:
    $ dirwalk ~/Documents
    $ dirwalk ~/Documents --max-count 200 --quiet
    $ dirwalk --config ./dirwalk.yaml --output json

Exit codes:
    0 = traversal finished, or aborted by the entry cap
    1 = filesystem error
    2 = configuration error
"""

import json
import logging
from pathlib import Path

import typer

from dirwalk.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    _error,
    _setup_logging,
    console,
)
from dirwalk.config import load_config
from dirwalk.exceptions import BoundedTraversalExceeded, ConfigurationError, FilesystemError
from dirwalk.traversal.reporter import ConsoleReporter, summary_as_dict
from dirwalk.traversal.walker import Walker

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dirwalk",
    help="Bounded directory traversal with file statistics",
    add_completion=False,
)


@app.command()
def main(
    root: str = typer.Argument(
        None,
        help="Directory to traverse (default: start_directory from config)",
        show_default=False,
    ),
    max_count: int = typer.Option(
        None,
        "--max-count",
        "-m",
        help="Maximum number of visited entries before aborting (default: 1000)",
        show_default=False,
    ),
    config: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ./dirwalk.yaml if present)",
        show_default=False,
    ),
    output: str = typer.Option(
        "text",
        "--output",
        "-o",
        help="Output format: text or json",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the summary",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output with debug logging",
    ),
) -> None:
    """Walk a directory tree and report file statistics."""
    _setup_logging(verbose=verbose, quiet=quiet)

    if output not in ("text", "json"):
        _error(f"Invalid output format: '{output}'. Use 'text' or 'json'.")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    reporter = ConsoleReporter(console, quiet=quiet or output == "json")

    try:
        walker_config = load_config(
            config, overrides={"start_directory": root, "max_count": max_count}
        )
        walker = Walker(max_count=walker_config.max_count, on_event=reporter.handle_event)
        result = walker.traverse(walker_config.start_directory)
    except ConfigurationError as e:
        reporter.report_configuration_error(e)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None
    except BoundedTraversalExceeded as e:
        if output == "json":
            print(json.dumps({"error": "max_count_exceeded", "max_count": e.max_count}, indent=2))
        else:
            reporter.report_cap_exceeded(e)
        raise typer.Exit(code=EXIT_SUCCESS) from None
    except FilesystemError as e:
        logger.debug("Traversal failed", exc_info=True)
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    if output == "json":
        print(json.dumps(summary_as_dict(result), indent=2))
    else:
        reporter.report_summary(result)
