"""Scan configuration for a single cleanup run.

The configuration is built once from command-line options, validated,
and then treated as immutable for the rest of the run.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ScanConfigError(Exception):
    """Base exception for invalid scan configuration."""


class RootNotFoundError(ScanConfigError):
    """Raised when the scan root does not exist or cannot be resolved."""


class RootNotADirectoryError(ScanConfigError):
    """Raised when the scan root is not a directory."""


class ScanConfig(BaseModel):
    """Settings for one cleanup run.

    Attributes:
        root: Resolved absolute path of the directory to scan.
        recursive: Descend into subdirectories. When False, only the
            root's immediate children are visited.
        max_depth: Maximum traversal depth (0 = unlimited). Ignored when
            recursive is False.
        skip_hidden: Prune directories whose name starts with '.' (root exempt).
        dry_run: Report target files without moving them.
        verbose: Report each found file and each successful move.
        workers: Number of threads used to move files to the trash.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path
    recursive: Annotated[
        bool,
        Field(description="Descend into subdirectories"),
    ] = True
    max_depth: Annotated[
        int,
        Field(ge=0, description="Maximum depth (0 = unlimited)"),
    ] = 0
    skip_hidden: bool = False
    dry_run: bool = False
    verbose: bool = False
    workers: Annotated[
        int,
        Field(ge=1, le=64, description="Parallel trash workers (1-64)"),
    ] = 1

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: Path) -> Path:
        """Ensure the root is an absolute path to an existing directory."""
        if not v.is_absolute():
            msg = f"Scan root must be absolute, got {v}"
            raise ValueError(msg)
        if not v.is_dir():
            msg = f"Scan root is not a directory: {v}"
            raise ValueError(msg)
        return v

    @property
    def effective_max_depth(self) -> int | None:
        """Entry depth limit passed to the walker.

        max_depth counts directory levels below the root whose files are
        examined, so files inside a directory at level N sit at entry
        depth N + 1. Disabling recursion takes precedence and limits the
        walk to the root's immediate children.

        Returns:
            1 when recursion is disabled, None for unlimited, else max_depth + 1.
        """
        if not self.recursive:
            return 1
        if self.max_depth == 0:
            return None
        return self.max_depth + 1


def resolve_root(path: Path) -> Path:
    """Resolve a user-supplied scan root to an absolute directory path.

    Args:
        path: Path as given on the command line (may be relative).

    Returns:
        The fully resolved directory path.

    Raises:
        RootNotFoundError: If the path does not exist or cannot be resolved.
        RootNotADirectoryError: If the path is not a directory.
    """
    try:
        resolved = path.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RootNotFoundError(f"Cannot access the specified path: {path} ({e})") from e

    if not resolved.is_dir():
        raise RootNotADirectoryError(f"Path is not a directory: {resolved}")

    return resolved


def build_scan_config(
    path: Path,
    *,
    recursive: bool = True,
    max_depth: int = 0,
    skip_hidden: bool = False,
    dry_run: bool = False,
    verbose: bool = False,
    workers: int = 1,
) -> ScanConfig:
    """Build a validated ScanConfig from raw options.

    Args:
        path: Directory to scan, relative or absolute.
        recursive: Descend into subdirectories.
        max_depth: Maximum depth (0 = unlimited).
        skip_hidden: Prune hidden directories.
        dry_run: Preview only.
        verbose: Report every found file and move.
        workers: Number of trash worker threads.

    Returns:
        Immutable ScanConfig.

    Raises:
        ScanConfigError: If the root or any option is invalid.
    """
    root = resolve_root(path)

    try:
        return ScanConfig(
            root=root,
            recursive=recursive,
            max_depth=max_depth,
            skip_hidden=skip_hidden,
            dry_run=dry_run,
            verbose=verbose,
            workers=workers,
        )
    except ValidationError as e:
        raise ScanConfigError(f"Invalid scan configuration: {e}") from e
