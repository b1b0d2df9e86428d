"""Exception hierarchy for dirwalk.

All errors raised by the package derive from DirwalkError so callers can
catch the whole family with a single except clause. Traversal failures share
TraversalError; the CLI is the only place that recovers from them.
"""


class DirwalkError(Exception):
    """Base exception for all dirwalk errors."""

    pass


class ConfigurationError(DirwalkError):
    """Configuration is missing or invalid.

    Raised when:
    - The root path to traverse is empty
    - The config file cannot be read or parsed
    - Config values fail validation
    """

    pass


class TraversalError(DirwalkError):
    """Base exception for failures during a traversal."""

    pass


class BoundedTraversalExceeded(TraversalError):
    """The visited-entry cap was reached before the traversal finished.

    Attributes:
        max_count: The cap that was in effect.

    """

    def __init__(self, max_count: int) -> None:
        """Initialize with the cap that was hit.

        Args:
            max_count: Maximum number of visited entries allowed.

        """
        super().__init__(f"Maximum of {max_count} visited entries exceeded")
        self.max_count = max_count


class FilesystemError(TraversalError):
    """Reading or stating a path failed.

    The underlying OSError is chained as __cause__.

    Attributes:
        path: Path that could not be read.

    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize with the failing path.

        Args:
            path: Path that could not be read or stated.
            message: Human-readable description of the failure.

        """
        super().__init__(f"{message}: {path}")
        self.path = path
