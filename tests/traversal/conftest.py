"""Fixtures for traversal tests."""

import os

import pytest


class FakeFilesystem:
    """In-memory filesystem for walker tests.

    Directories map to a list of child names in listing order; any other
    path is a file. Every call is recorded in ``calls``.
    """

    def __init__(self, tree: dict[str, list[str]]) -> None:
        self.tree = tree
        self.calls: list[tuple[str, str]] = []
        self.unreadable: set[str] = set()

    def listdir(self, path: str) -> list[str]:
        self.calls.append(("listdir", path))
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.tree:
            raise NotADirectoryError(20, "Not a directory", path)
        return list(self.tree[path])

    def is_dir(self, path: str) -> bool:
        self.calls.append(("is_dir", path))
        return path in self.tree


def make_tree(spec: dict[str, list[str]], root: str = "/root") -> dict[str, list[str]]:
    """Build a FakeFilesystem tree from root-relative directory names.

    Keys are directory paths relative to root ("" is the root itself).
    """
    return {
        (os.path.join(root, rel) if rel else root): names for rel, names in spec.items()
    }


@pytest.fixture
def fake_fs():
    """Factory creating a FakeFilesystem from a root-relative spec."""

    def _factory(spec: dict[str, list[str]], root: str = "/root") -> FakeFilesystem:
        return FakeFilesystem(make_tree(spec, root))

    return _factory
