"""Tests for the depth-limited directory walker."""

import errno
import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from dsclean.cleanup.models import EntryType, WalkEntry, WalkError
from dsclean.cleanup.walker import DirectoryWalker, walk
from dsclean.core.config import ScanConfig


def _entries(items: list[WalkEntry | WalkError]) -> list[WalkEntry]:
    return [i for i in items if isinstance(i, WalkEntry)]


def _relative(root: Path, items: list[WalkEntry | WalkError]) -> list[tuple[str, int]]:
    """Map walk output to (relative path, depth) pairs."""
    return [(e.path.relative_to(root).as_posix(), e.depth) for e in _entries(items)]


class TestWalkOrderAndDepth:
    """Tests for traversal order and depth numbering."""

    def test_root_first_at_depth_zero(self, make_tree: Callable[..., Path]) -> None:
        """The root is yielded first as a directory at depth 0."""
        root = make_tree("a.txt")
        items = list(walk(root))

        first = items[0]
        assert isinstance(first, WalkEntry)
        assert first.path == root
        assert first.depth == 0
        assert first.entry_type == EntryType.DIRECTORY

    def test_depth_first_sorted(self, make_tree: Callable[..., Path]) -> None:
        """Subtrees are completed before later siblings, in name order."""
        root = make_tree("b/.DS_Store", "a/x/.DS_Store", "a/y.txt", "c.txt")

        assert _relative(root, list(walk(root))) == [
            (".", 0),
            ("a", 1),
            ("a/x", 2),
            ("a/x/.DS_Store", 3),
            ("a/y.txt", 2),
            ("b", 1),
            ("b/.DS_Store", 2),
            ("c.txt", 1),
        ]

    def test_entry_types(self, make_tree: Callable[..., Path]) -> None:
        """Files and directories are classified."""
        root = make_tree("dir/", "file.txt")
        types = {e.name: e.entry_type for e in _entries(list(walk(root))) if e.depth == 1}

        assert types == {"dir": EntryType.DIRECTORY, "file.txt": EntryType.FILE}

    def test_symlinks_not_followed(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """Symlinks are classified as OTHER and never descended into."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / ".DS_Store").write_text("x")
        root = make_tree("real/")
        (root / "link").symlink_to(outside, target_is_directory=True)
        (root / ".DS_Store").symlink_to(outside / ".DS_Store")

        entries = _entries(list(walk(root)))
        by_name = {e.name: e for e in entries if e.depth == 1}

        assert by_name["link"].entry_type == EntryType.OTHER
        assert by_name[".DS_Store"].entry_type == EntryType.OTHER
        assert all(outside not in e.path.parents for e in entries)


class TestWalkDepthLimit:
    """Tests for max_depth handling."""

    def test_unlimited(self, make_tree: Callable[..., Path]) -> None:
        """No limit walks the whole tree."""
        root = make_tree("a/b/c/d/.DS_Store")
        assert max(e.depth for e in _entries(list(walk(root)))) == 5

    def test_limit_one(self, make_tree: Callable[..., Path]) -> None:
        """A limit of 1 yields only the root and its immediate children."""
        root = make_tree("a/.DS_Store", "a/b/.DS_Store", "top.txt")

        assert _relative(root, list(walk(root, max_depth=1))) == [
            (".", 0),
            ("a", 1),
            ("top.txt", 1),
        ]

    def test_limit_two(self, make_tree: Callable[..., Path]) -> None:
        """Entries deeper than the limit are never yielded."""
        root = make_tree("a/.DS_Store", "a/b/.DS_Store")
        pairs = _relative(root, list(walk(root, max_depth=2)))

        assert ("a/.DS_Store", 2) in pairs
        assert ("a/b", 2) in pairs
        assert all(depth <= 2 for _, depth in pairs)

    def test_limit_zero_yields_root_only(self, make_tree: Callable[..., Path]) -> None:
        """A literal limit of 0 means the root alone."""
        root = make_tree(".DS_Store")
        assert _relative(root, list(walk(root, max_depth=0))) == [(".", 0)]

    def test_directories_at_limit_not_opened(self, make_tree: Callable[..., Path]) -> None:
        """Directories at the depth limit are never listed."""
        root = make_tree("a/b/.DS_Store")
        real_scandir = os.scandir
        opened: list[str] = []

        def tracking_scandir(path: os.PathLike[str]) -> object:
            opened.append(Path(path).name)
            return real_scandir(path)

        with patch("dsclean.cleanup.walker.os.scandir", side_effect=tracking_scandir):
            list(walk(root, max_depth=1))

        assert opened == ["root"]


class TestWalkHiddenDirectories:
    """Tests for hidden directory pruning."""

    def test_hidden_dir_pruned(self, make_tree: Callable[..., Path]) -> None:
        """Hidden directories and their subtrees are skipped."""
        root = make_tree(".hidden/.DS_Store", ".hidden/deep/.DS_Store", "visible/.DS_Store")
        paths = [p for p, _ in _relative(root, list(walk(root, skip_hidden=True)))]

        assert ".hidden" not in paths
        assert ".hidden/.DS_Store" not in paths
        assert ".hidden/deep/.DS_Store" not in paths
        assert "visible/.DS_Store" in paths

    def test_hidden_files_kept(self, make_tree: Callable[..., Path]) -> None:
        """Files are never pruned by name, even when they start with '.'."""
        root = make_tree(".DS_Store", ".env")
        paths = [p for p, _ in _relative(root, list(walk(root, skip_hidden=True)))]

        assert ".DS_Store" in paths
        assert ".env" in paths

    def test_hidden_root_exempt(self, tmp_path: Path) -> None:
        """A hidden scan root is still walked."""
        root = tmp_path / ".root"
        (root / "sub").mkdir(parents=True)
        (root / "sub" / ".DS_Store").write_text("x")

        names = [e.name for e in _entries(list(walk(root, skip_hidden=True)))]
        assert names == [".root", "sub", ".DS_Store"]

    def test_disabled_by_default(self, make_tree: Callable[..., Path]) -> None:
        """Without the flag hidden directories are walked."""
        root = make_tree(".hidden/.DS_Store")
        paths = [p for p, _ in _relative(root, list(walk(root)))]

        assert ".hidden/.DS_Store" in paths


class TestWalkErrors:
    """Tests for per-entry traversal errors."""

    def test_unreadable_directory_reported_and_skipped(
        self, make_tree: Callable[..., Path]
    ) -> None:
        """An unreadable directory yields a WalkError; siblings continue."""
        root = make_tree("a/.DS_Store", "locked/.DS_Store", "z/.DS_Store")
        real_scandir = os.scandir

        def flaky_scandir(path: os.PathLike[str]) -> object:
            if Path(path).name == "locked":
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            return real_scandir(path)

        with patch("dsclean.cleanup.walker.os.scandir", side_effect=flaky_scandir):
            items = list(walk(root))

        errors = [i for i in items if isinstance(i, WalkError)]
        assert len(errors) == 1
        assert errors[0].path == root / "locked"
        assert isinstance(errors[0].error, PermissionError)

        paths = [p for p, _ in _relative(root, items)]
        assert "a/.DS_Store" in paths
        assert "z/.DS_Store" in paths
        assert "locked/.DS_Store" not in paths

    def test_missing_root(self, tmp_path: Path) -> None:
        """A root that vanished yields a single WalkError."""
        items = list(walk(tmp_path / "gone"))

        assert len(items) == 1
        assert isinstance(items[0], WalkError)
        assert items[0].depth == 0


class TestDirectoryWalker:
    """Tests for the DirectoryWalker wrapper."""

    def test_fresh_enumeration_per_call(self, make_tree: Callable[..., Path]) -> None:
        """Each walk() call starts over; an exhausted iterator stays exhausted."""
        root = make_tree("a/.DS_Store")
        walker = DirectoryWalker(root)

        first = walker.walk()
        first_items = list(first)
        assert list(first) == []
        assert list(walker.walk()) == first_items

    def test_lazy(self, make_tree: Callable[..., Path]) -> None:
        """Nothing is listed until the iterator is advanced."""
        root = make_tree("a/.DS_Store")
        with patch("dsclean.cleanup.walker.os.scandir") as mock_scandir:
            iterator = DirectoryWalker(root).walk()
            mock_scandir.assert_not_called()
            del iterator

    def test_negative_depth_rejected(self, tmp_path: Path) -> None:
        """Negative limits are invalid."""
        with pytest.raises(ValueError, match="cannot be negative"):
            DirectoryWalker(tmp_path, max_depth=-1)

    def test_from_config_no_recursive_wins(self, tmp_path: Path) -> None:
        """Disabling recursion forces depth 1 regardless of max_depth."""
        config = ScanConfig(root=tmp_path, recursive=False, max_depth=5)
        assert DirectoryWalker.from_config(config).max_depth == 1

    def test_from_config_counts_directory_levels(self, tmp_path: Path) -> None:
        """max_depth N lets the walker reach files inside level-N directories."""
        config = ScanConfig(root=tmp_path, max_depth=3)
        assert DirectoryWalker.from_config(config).max_depth == 4

    def test_from_config_unlimited(self, tmp_path: Path) -> None:
        """max_depth 0 maps to no limit."""
        config = ScanConfig(root=tmp_path)
        walker = DirectoryWalker.from_config(config)
        assert walker.max_depth is None
        assert walker.root == tmp_path
