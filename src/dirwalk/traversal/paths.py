"""Path helpers used by the walker and the summary."""

import os
from collections.abc import Iterable


def join_path(directory: str, name: str) -> str:
    """Join a directory path and a child name into a full path."""
    return os.path.join(directory, name)


def extension_of(filename: str) -> str:
    """Return the extension of a filename, including the leading dot.

    A leading dot on the basename alone (".bashrc") is not an extension.

    Args:
        filename: File name or full path.

    Returns:
        Extension such as ".txt", or "" when there is none.

    """
    return os.path.splitext(filename)[1]


def distinct_extensions(files: Iterable[str]) -> tuple[str, ...]:
    """Collect distinct extensions in first-seen order.

    Extensions are compared case-sensitively and the empty extension is kept,
    so "a.txt", "b", "c.TXT" give (".txt", "", ".TXT").
    """
    return tuple(dict.fromkeys(extension_of(f) for f in files))
