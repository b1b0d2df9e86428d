"""Shared types for the traversal module."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from dirwalk.traversal.paths import distinct_extensions


class EventKind(str, Enum):
    """Kinds of events emitted while walking a tree."""

    DIRECTORY_ENTERED = "directory_entered"
    FILE_FOUND = "file_found"
    EMPTY_DIRECTORY = "empty_directory"


class TraversalEvent(NamedTuple):
    """A single traversal event.

    Attributes:
        kind: What happened
        path: Full path of the directory or file concerned

    """

    kind: EventKind
    path: str


EventListener = Callable[[TraversalEvent], None]


@dataclass(frozen=True)
class TraversalResult:
    """Aggregated result of a completed traversal.

    Attributes:
        root: Root path the traversal started from
        files: Full paths of all files, in visitation order
        subdirectory_count: Number of directories found below the root
        empty_directories: Full paths of directories with no entries
        visited_count: Number of entries counted against the cap

    """

    root: str
    files: tuple[str, ...]
    subdirectory_count: int
    empty_directories: tuple[str, ...]
    visited_count: int

    @property
    def extensions(self) -> tuple[str, ...]:
        """Distinct file extensions in first-seen order, "" included."""
        return distinct_extensions(self.files)

    @property
    def named_extensions(self) -> tuple[str, ...]:
        """Distinct non-empty file extensions in first-seen order."""
        return tuple(ext for ext in self.extensions if ext)
