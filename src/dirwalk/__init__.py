"""dirwalk - bounded directory traversal and file statistics."""

__version__ = "0.1.0"
