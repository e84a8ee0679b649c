"""Depth-limited directory walker.

Walks a directory tree depth-first using an explicit stack, so very deep
trees cannot exhaust the interpreter's recursion limit. Entries are yielded
lazily; unreadable directories are reported as WalkError values and the
walk continues with their siblings.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dsclean.cleanup.models import EntryType, WalkEntry, WalkError
from dsclean.core.config import ScanConfig

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."

WalkItem = WalkEntry | WalkError


def walk(
    root: Path,
    *,
    max_depth: int | None = None,
    skip_hidden: bool = False,
) -> Iterator[WalkItem]:
    """Walk the tree rooted at ``root``.

    The root is yielded first at depth 0. Children of a directory at depth
    ``d`` are at depth ``d + 1``; nothing deeper than ``max_depth`` is
    yielded, and directories at ``max_depth`` are not opened. Siblings are
    visited in sorted-name order. Symlinks are classified as OTHER and
    never followed.

    Args:
        root: Directory to walk.
        max_depth: Deepest level to yield, or None for no limit.
        skip_hidden: Skip directories (not files) whose name starts with
            '.', together with their whole subtree. The root is exempt.

    Yields:
        WalkEntry for each visited entry, or WalkError for entries that
        could not be read or classified.
    """
    try:
        root_type = _classify_path(root)
    except OSError as e:
        logger.debug("Cannot stat scan root %s: %s", root, e)
        yield WalkError(path=root, depth=0, error=e)
        return

    stack: list[WalkEntry] = [WalkEntry(path=root, entry_type=root_type, depth=0)]

    while stack:
        entry = stack.pop()
        yield entry

        if not entry.is_dir:
            continue
        if max_depth is not None and entry.depth >= max_depth:
            continue

        children: list[WalkEntry] = []
        for item in _list_children(entry):
            if isinstance(item, WalkError):
                yield item
                continue
            if skip_hidden and item.is_dir and item.name.startswith(HIDDEN_PREFIX):
                logger.debug("Skipping hidden directory: %s", item.path)
                continue
            children.append(item)

        # Reverse so the smallest name is popped first
        stack.extend(reversed(children))


def _list_children(parent: WalkEntry) -> Iterator[WalkItem]:
    """List and classify the direct children of a directory.

    Args:
        parent: Directory entry to list.

    Yields:
        WalkEntry per child in sorted-name order, or WalkError when the
        directory cannot be listed or a child cannot be classified.
    """
    depth = parent.depth + 1

    try:
        with os.scandir(parent.path) as it:
            dir_entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", parent.path, e)
        yield WalkError(path=parent.path, depth=parent.depth, error=e)
        return

    for dir_entry in dir_entries:
        path = parent.path / dir_entry.name
        try:
            entry_type = _classify_dir_entry(dir_entry)
        except OSError as e:
            logger.debug("Cannot determine type of %s: %s", path, e)
            yield WalkError(path=path, depth=depth, error=e)
            continue
        yield WalkEntry(path=path, entry_type=entry_type, depth=depth)


def _classify_dir_entry(dir_entry: os.DirEntry[str]) -> EntryType:
    """Classify an os.DirEntry without following symlinks."""
    if dir_entry.is_symlink():
        return EntryType.OTHER
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return EntryType.OTHER


def _classify_path(path: Path) -> EntryType:
    """Classify a path without following a final symlink."""
    if path.is_symlink():
        return EntryType.OTHER
    # lstat raises for missing paths, which is_dir/is_file would hide
    path.lstat()
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.is_file():
        return EntryType.FILE
    return EntryType.OTHER


class DirectoryWalker:
    """Reusable walker bound to one root and one set of filters.

    Each call to walk() starts a fresh enumeration; a returned iterator
    is consumed once and cannot be resumed after exhaustion.

    Args:
        root: Directory to walk.
        max_depth: Deepest level to yield, or None for no limit.
        skip_hidden: Prune hidden directories below the root.
    """

    def __init__(
        self,
        root: Path,
        *,
        max_depth: int | None = None,
        skip_hidden: bool = False,
    ) -> None:
        if max_depth is not None and max_depth < 0:
            msg = f"max_depth cannot be negative, got {max_depth}"
            raise ValueError(msg)
        self._root = root
        self._max_depth = max_depth
        self._skip_hidden = skip_hidden

    @classmethod
    def from_config(cls, config: ScanConfig) -> "DirectoryWalker":
        """Create a walker honoring the config's depth and hidden policy."""
        return cls(
            config.root,
            max_depth=config.effective_max_depth,
            skip_hidden=config.skip_hidden,
        )

    @property
    def root(self) -> Path:
        return self._root

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def walk(self) -> Iterator[WalkItem]:
        """Start a new walk over the configured tree."""
        return walk(self._root, max_depth=self._max_depth, skip_hidden=self._skip_hidden)
