"""Bounded depth-first walker using an explicit stack."""

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

from dirwalk.exceptions import BoundedTraversalExceeded, ConfigurationError, FilesystemError
from dirwalk.traversal.paths import join_path
from dirwalk.traversal.types import EventKind, EventListener, TraversalEvent, TraversalResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_COUNT = 1000


class FilesystemInterface(Protocol):
    """Protocol for filesystem operations to enable dependency injection."""

    def listdir(self, path: str) -> list[str]:
        """List entry names of a directory.

        Args:
            path: Directory path to list

        Returns:
            Entry names in the order the platform returns them

        Raises:
            OSError: If the directory cannot be read

        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check whether a path is a directory, following symlinks.

        Args:
            path: Path to check

        Returns:
            True if the path (or its symlink target) is a directory

        Raises:
            OSError: If the path cannot be stated

        """
        ...


class RealFilesystem:
    """Real filesystem implementation using os module."""

    def listdir(self, path: str) -> list[str]:
        """List entry names using os.listdir."""
        return os.listdir(path)

    def is_dir(self, path: str) -> bool:
        """Stat the path, following symlinks."""
        return stat.S_ISDIR(os.stat(path).st_mode)


@dataclass
class _TraversalState:
    """Mutable state of a single traversal call."""

    visited_count: int = 0
    subdirectory_count: int = 0
    files: list[str] = field(default_factory=list)
    empty_directories: list[str] = field(default_factory=list)


class Walker:
    """Depth-first walker with a global cap on visited entries.

    Only directories count against the cap; files are collected without
    incrementing any counter. Reaching the cap aborts the whole traversal.
    Uses an explicit stack (not recursion) to avoid RecursionError on deep
    structures while keeping pre-order, listing-order visitation.
    """

    def __init__(
        self,
        max_count: int = DEFAULT_MAX_COUNT,
        filesystem: FilesystemInterface | None = None,
        on_event: EventListener | None = None,
    ) -> None:
        """Initialize the walker.

        Args:
            max_count: Maximum number of visited entries before aborting
            filesystem: Optional filesystem implementation for testing
            on_event: Optional callback receiving traversal events

        """
        self.max_count = max_count
        self.filesystem = filesystem if filesystem is not None else RealFilesystem()
        self.on_event = on_event

    def traverse(self, path: str) -> TraversalResult:
        """Walk the tree below path and aggregate the results.

        Args:
            path: Root directory to start from

        Returns:
            TraversalResult for the whole tree

        Raises:
            ConfigurationError: If path is empty (no filesystem access made)
            BoundedTraversalExceeded: If the visited-entry cap is reached
            FilesystemError: If any directory listing or stat fails

        """
        if not path:
            raise ConfigurationError("You must set the start directory first.")

        logger.debug("Traversing %s (max_count=%d)", path, self.max_count)
        state = _TraversalState()

        stack: list[Iterator[str]] = []
        children = self._open_directory(path, state)
        if children is not None:
            stack.append(children)

        while stack:
            full_path = next(stack[-1], None)
            if full_path is None:
                stack.pop()
                continue

            if state.visited_count >= self.max_count:
                logger.debug("Cap of %d reached at %s", self.max_count, full_path)
                raise BoundedTraversalExceeded(self.max_count)

            if self._is_dir(full_path):
                self._emit(EventKind.DIRECTORY_ENTERED, full_path)
                state.subdirectory_count += 1
                state.visited_count += 1
                nested = self._open_directory(full_path, state)
                if nested is not None:
                    stack.append(nested)
            else:
                self._emit(EventKind.FILE_FOUND, full_path)
                state.files.append(full_path)

        logger.debug(
            "Finished %s: %d files, %d subdirectories, %d empty directories",
            path,
            len(state.files),
            state.subdirectory_count,
            len(state.empty_directories),
        )
        return TraversalResult(
            root=path,
            files=tuple(state.files),
            subdirectory_count=state.subdirectory_count,
            empty_directories=tuple(state.empty_directories),
            visited_count=state.visited_count,
        )

    def _open_directory(self, path: str, state: _TraversalState) -> Iterator[str] | None:
        """List a directory and return an iterator over its children's full paths.

        Empty directories are recorded and yield None.
        """
        try:
            names = self.filesystem.listdir(path)
        except OSError as e:
            raise FilesystemError(path, f"Cannot list directory ({e.strerror or e})") from e

        if not names:
            state.empty_directories.append(path)
            self._emit(EventKind.EMPTY_DIRECTORY, path)
            return None

        return iter([join_path(path, name) for name in names])

    def _is_dir(self, path: str) -> bool:
        try:
            return self.filesystem.is_dir(path)
        except OSError as e:
            raise FilesystemError(path, f"Cannot stat path ({e.strerror or e})") from e

    def _emit(self, kind: EventKind, path: str) -> None:
        if self.on_event is not None:
            self.on_event(TraversalEvent(kind, path))
