"""Traversal and safe-removal pipeline for .DS_Store files.

This module provides the identity check, the directory walker, the
trash operator, run statistics, and the orchestrator tying them together.
"""

from dsclean.cleanup.identity import TARGET_FILENAME, is_target_file
from dsclean.cleanup.models import (
    EntryType,
    RemovalFailure,
    RemovalResult,
    WalkEntry,
    WalkError,
)
from dsclean.cleanup.operator import TrashOperator
from dsclean.cleanup.orchestrator import CleanupOrchestrator, NullReporter, Reporter, RunState
from dsclean.cleanup.stats import CleanStats, StatsSnapshot
from dsclean.cleanup.walker import DirectoryWalker, walk

__all__ = [
    "TARGET_FILENAME",
    "CleanStats",
    "CleanupOrchestrator",
    "DirectoryWalker",
    "EntryType",
    "NullReporter",
    "RemovalFailure",
    "RemovalResult",
    "Reporter",
    "RunState",
    "StatsSnapshot",
    "TrashOperator",
    "WalkEntry",
    "WalkError",
    "is_target_file",
    "walk",
]
