"""Cleanup domain models for traversal and removal.

This module defines the data structures produced while walking a
directory tree and while moving target files to the trash.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryType(str, Enum):
    """Type of a directory entry seen during traversal.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory (never a symlink to one).
        OTHER: Symlink, socket, FIFO, device or anything else.
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class RemovalFailure(str, Enum):
    """Reason a single move-to-trash attempt was refused or failed.

    Attributes:
        SAFETY_CHECK_FAILED: The file name is not exactly the target name.
        NOT_FOUND: The path no longer exists.
        NOT_A_FILE: The path is a directory, symlink or other non-regular entry.
        TRASH_OPERATION_FAILED: The trash backend raised an error.
    """

    SAFETY_CHECK_FAILED = "safety_check_failed"
    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    TRASH_OPERATION_FAILED = "trash_operation_failed"


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A filesystem entry yielded by the directory walker.

    Attributes:
        path: Absolute path of the entry.
        entry_type: Classification of the entry (symlinks are OTHER).
        depth: Number of directory levels below the scan root (root is 0).
    """

    path: Path
    entry_type: EntryType
    depth: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if self.depth < 0:
            msg = f"Depth cannot be negative, got {self.depth}"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.name

    @property
    def is_file(self) -> bool:
        """Check if this entry is a regular file."""
        return self.entry_type == EntryType.FILE

    @property
    def is_dir(self) -> bool:
        """Check if this entry is a directory."""
        return self.entry_type == EntryType.DIRECTORY


@dataclass(frozen=True, slots=True)
class WalkError:
    """A per-entry traversal failure that did not stop the walk.

    Attributes:
        path: Path that could not be read or classified.
        depth: Depth of that path below the scan root.
        error: The underlying OS error.
    """

    path: Path
    depth: int
    error: OSError

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        reason = self.error.strerror or str(self.error)
        return f"{self.path}: {reason}"


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single move-to-trash attempt.

    Attributes:
        path: Path that was operated on.
        success: Whether the file was moved to the trash.
        failure: Failure reason, None on success.
        error: Human-readable cause, None on success.
    """

    path: str
    success: bool
    failure: RemovalFailure | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that failures carry a reason and successes do not."""
        if self.success and self.failure is not None:
            msg = "A successful result cannot carry a failure reason"
            raise ValueError(msg)
        if not self.success and self.failure is None:
            msg = "A failed result must carry a failure reason"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return not self.success
