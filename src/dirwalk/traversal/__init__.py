"""Bounded directory traversal with summary telemetry.

Walks a directory tree depth-first, collects files and empty directories,
counts subdirectories against a global cap, and emits events a reporter
can render.

Usage:
    from dirwalk.traversal import ConsoleReporter, Walker

    reporter = ConsoleReporter()
    walker = Walker(max_count=1000, on_event=reporter.handle_event)
    result = walker.traverse("/some/dir")
    reporter.report_summary(result)
"""

from dirwalk.traversal.reporter import ConsoleReporter
from dirwalk.traversal.types import EventKind, TraversalEvent, TraversalResult
from dirwalk.traversal.walker import DEFAULT_MAX_COUNT, RealFilesystem, Walker

__all__ = [
    "ConsoleReporter",
    "DEFAULT_MAX_COUNT",
    "EventKind",
    "RealFilesystem",
    "TraversalEvent",
    "TraversalResult",
    "Walker",
]
