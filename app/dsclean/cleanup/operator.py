"""Trash operator for .DS_Store files.

Moves a single target file to the system trash after re-checking, right
before the move, that it is still a genuine .DS_Store regular file. Files
are never permanently deleted through this module.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from send2trash import send2trash

from dsclean.cleanup.identity import TARGET_FILENAME, is_target_file
from dsclean.cleanup.models import RemovalFailure, RemovalResult

logger = logging.getLogger(__name__)

TrashFunc = Callable[[str], None]


class TrashOperator:
    """Moves .DS_Store files to the system trash.

    Every call re-validates its argument independently of any check the
    caller already made. The operator keeps no mutable state, so it may be
    used from several threads on distinct paths.

    Attributes:
        _trash: Backend that moves one path to the trash, raising OSError
            on failure. Defaults to send2trash.
    """

    def __init__(self, trash: TrashFunc | None = None) -> None:
        """Initialize the TrashOperator.

        Args:
            trash: Optional trash backend, mainly for tests.
        """
        self._trash: TrashFunc = trash if trash is not None else send2trash

    def move_to_trash(self, path: str | os.PathLike[str]) -> RemovalResult:
        """Move a single .DS_Store file to the trash.

        Checks, in order:
        1. The final path component is exactly .DS_Store
        2. The path still exists
        3. The path is a regular file (symlinks and directories refused)

        Args:
            path: Path of the file to move.

        Returns:
            RemovalResult indicating success or the reason for failure.
        """
        path_str = os.fspath(path)
        target = Path(path_str)

        if not is_target_file(path_str):
            logger.warning("Refusing to trash non-%s path: %s", TARGET_FILENAME, path_str)
            return RemovalResult(
                path=path_str,
                success=False,
                failure=RemovalFailure.SAFETY_CHECK_FAILED,
                error=f"Safety check failed: filename is not {TARGET_FILENAME}: {path_str}",
            )

        if not target.exists() and not target.is_symlink():
            return RemovalResult(
                path=path_str,
                success=False,
                failure=RemovalFailure.NOT_FOUND,
                error=f"File does not exist: {path_str}",
            )

        if target.is_symlink() or not target.is_file():
            return RemovalResult(
                path=path_str,
                success=False,
                failure=RemovalFailure.NOT_A_FILE,
                error=f"Not a file: {path_str}",
            )

        try:
            self._trash(path_str)
        except OSError as e:
            logger.warning("Trash backend failed for %s: %s", path_str, e)
            return RemovalResult(
                path=path_str,
                success=False,
                failure=RemovalFailure.TRASH_OPERATION_FAILED,
                error=f"Failed to move to trash: {path_str}: {e}",
            )

        logger.debug("Moved to trash: %s", path_str)
        return RemovalResult(path=path_str, success=True)
