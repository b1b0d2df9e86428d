"""Console rendering of traversal events and summaries."""

import logging
from typing import Any

from rich.console import Console

from dirwalk.exceptions import BoundedTraversalExceeded, ConfigurationError
from dirwalk.traversal.types import EventKind, TraversalEvent, TraversalResult

logger = logging.getLogger(__name__)

# Style per event kind
EVENT_STYLES: dict[EventKind, str] = {
    EventKind.DIRECTORY_ENTERED: "green",
    EventKind.FILE_FOUND: "yellow",
    EventKind.EMPTY_DIRECTORY: "bright_black",
}


def format_event(event: TraversalEvent) -> str:
    """Format a traversal event as a single progress line.

    Args:
        event: Event to format

    Returns:
        Progress line without styling

    """
    if event.kind is EventKind.DIRECTORY_ENTERED:
        return f"+ Found directory: {event.path}"
    if event.kind is EventKind.FILE_FOUND:
        return f"  - Found file: {event.path}"
    return f"  -- No files in {event.path} --"


def summary_as_dict(result: TraversalResult) -> dict[str, Any]:
    """Build a JSON-serializable summary of a traversal result."""
    return {
        "root": result.root,
        "file_count": len(result.files),
        "subdirectory_count": result.subdirectory_count,
        "filetype_count": len(result.extensions),
        "filetypes": list(result.named_extensions),
        "empty_directory_count": len(result.empty_directories),
        "empty_directories": list(result.empty_directories),
        "files": list(result.files),
    }


class ConsoleReporter:
    """Renders traversal events and the final summary on a rich Console.

    Paths are printed with markup and highlighting disabled so that
    brackets in file names are shown verbatim.
    """

    def __init__(self, console: Console | None = None, quiet: bool = False) -> None:
        """Initialize the reporter.

        Args:
            console: Console to print to (default: new stdout console)
            quiet: Suppress per-entry progress lines

        """
        self.console = console if console is not None else Console()
        self.quiet = quiet

    def _print(self, text: str, style: str) -> None:
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)

    def handle_event(self, event: TraversalEvent) -> None:
        """Print a progress line for a traversal event.

        Suitable as the Walker on_event callback.
        """
        if self.quiet:
            return
        self._print(format_event(event), EVENT_STYLES[event.kind])

    def report_summary(self, result: TraversalResult) -> None:
        """Print file, subdirectory, filetype and empty-directory statistics."""
        self._print(
            f"There are {len(result.files)} files and {result.subdirectory_count} "
            f"subdirectories in {result.root}.",
            "cyan",
        )
        self._print(
            f"{len(result.extensions)} filetypes: {', '.join(result.named_extensions)}",
            "blue",
        )
        lines = [f"{len(result.empty_directories)} empty directories:"]
        lines.extend(f" {path}" for path in result.empty_directories)
        self._print("\n".join(lines), "bright_black")

    def report_cap_exceeded(self, error: BoundedTraversalExceeded) -> None:
        """Print the diagnostic for a traversal aborted by the entry cap."""
        logger.debug("Reporting cap exceeded: %s", error)
        self._print(
            f"Max depth of {error.max_count} exceeded. Find a smaller start point.",
            "red",
        )

    def report_configuration_error(self, error: ConfigurationError) -> None:
        """Print a configuration error."""
        self._print(str(error), "red")
