"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest


class FakeTrash:
    """Trash backend that records calls and unlinks the file.

    Paths listed in ``fail_on`` raise PermissionError instead, simulating
    a trash backend that cannot move the file.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.fail_on: set[str] = set()

    def __call__(self, path: str) -> None:
        self.calls.append(path)
        if path in self.fail_on:
            raise PermissionError(13, "Permission denied", path)
        os.unlink(path)


@pytest.fixture
def fake_trash() -> FakeTrash:
    """A recording trash backend that never touches the real trash."""
    return FakeTrash()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree under tmp_path from relative paths.

    Paths ending in '/' become directories, everything else becomes a
    file with a little content. Returns the tree root.
    """

    def _make(*entries: str) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(b"\x00\x00\x00\x01Bud1")
        return root.resolve()

    return _make
