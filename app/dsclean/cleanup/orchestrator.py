"""Cleanup orchestrator.

Drives the directory walker, filters entries down to .DS_Store files,
moves them to the trash unless running in dry-run mode, and accounts for
every outcome in a CleanStats instance scoped to the run.
"""

import logging
from collections.abc import Iterator
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from enum import Enum
from pathlib import Path
from typing import Protocol

from dsclean.cleanup.identity import is_target_file
from dsclean.cleanup.models import RemovalResult, WalkError
from dsclean.cleanup.operator import TrashOperator
from dsclean.cleanup.stats import CleanStats
from dsclean.cleanup.walker import DirectoryWalker
from dsclean.core.config import ScanConfig

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives progress events from a cleanup run.

    All events are delivered on the thread that called run(). With more
    than one worker, moved() and failed() arrive in completion order
    after traversal has finished.
    """

    def warning(self, error: WalkError) -> None: ...

    def preview(self, path: Path) -> None: ...

    def found(self, path: Path) -> None: ...

    def moved(self, path: Path) -> None: ...

    def failed(self, result: RemovalResult) -> None: ...


class NullReporter:
    """Reporter that discards every event."""

    def warning(self, error: WalkError) -> None:
        pass

    def preview(self, path: Path) -> None:
        pass

    def found(self, path: Path) -> None:
        pass

    def moved(self, path: Path) -> None:
        pass

    def failed(self, result: RemovalResult) -> None:
        pass


class RunState(str, Enum):
    """Lifecycle of an orchestrator. Runs never re-enter."""

    START = "start"
    TRAVERSING = "traversing"
    FINISHED = "finished"


class CleanupOrchestrator:
    """Runs one cleanup pass over a directory tree.

    A single target file's failure never stops the run; only invalid
    configuration (rejected before construction) is fatal.

    Args:
        config: Validated scan configuration.
        operator: Trash operator. Defaults to a send2trash-backed operator.
        walker: Directory walker. Defaults to one built from config.
        reporter: Progress sink. Defaults to NullReporter.
    """

    def __init__(
        self,
        config: ScanConfig,
        *,
        operator: TrashOperator | None = None,
        walker: DirectoryWalker | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config
        self._operator = operator or TrashOperator()
        self._walker = walker or DirectoryWalker.from_config(config)
        self._reporter: Reporter = reporter or NullReporter()
        self._stats = CleanStats()
        self._state = RunState.START

    @property
    def stats(self) -> CleanStats:
        return self._stats

    @property
    def state(self) -> RunState:
        return self._state

    def run(self) -> CleanStats:
        """Walk the tree once and process every .DS_Store file found.

        Returns:
            The counters for this run.

        Raises:
            RuntimeError: If the orchestrator has already been started.
        """
        if self._state != RunState.START:
            msg = f"Cleanup run already {self._state.value}"
            raise RuntimeError(msg)

        self._state = RunState.TRAVERSING
        logger.debug(
            "Starting cleanup of %s (max_depth=%s, skip_hidden=%s, dry_run=%s)",
            self._config.root,
            self._walker.max_depth,
            self._config.skip_hidden,
            self._config.dry_run,
        )

        try:
            if self._config.workers > 1 and not self._config.dry_run:
                self._run_parallel()
            else:
                self._run_sequential()
        finally:
            self._state = RunState.FINISHED

        logger.debug("Cleanup finished: %s", self._stats.snapshot())
        return self._stats

    def _run_sequential(self) -> None:
        """Process entries in traversal order on the calling thread."""
        for path in self._iter_targets():
            if self._config.dry_run:
                self._reporter.preview(path)
                continue
            self._reporter.found(path)
            self._record(self._operator.move_to_trash(path))

    def _run_parallel(self) -> None:
        """Walk on the calling thread and trash files on a worker pool.

        If the calling thread is interrupted, queued removals are
        cancelled and every removal that did complete is still counted
        before the exception propagates.
        """
        pool = ThreadPoolExecutor(
            max_workers=self._config.workers,
            thread_name_prefix="dsclean-trash",
        )
        futures: list[Future[RemovalResult]] = []
        recorded: set[Future[RemovalResult]] = set()
        try:
            for path in self._iter_targets():
                self._reporter.found(path)
                futures.append(pool.submit(self._operator.move_to_trash, path))

            for future in as_completed(futures):
                recorded.add(future)
                self._record(future.result())
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            for future in futures:
                if future in recorded or future.cancelled() or not future.done():
                    continue
                self._count(future.result())
            raise
        finally:
            pool.shutdown(wait=True)

    def _iter_targets(self) -> Iterator[Path]:
        """Yield target file paths, counting each as found.

        Walk errors are reported as warnings; non-files and non-targets
        are skipped silently.
        """
        for item in self._walker.walk():
            if isinstance(item, WalkError):
                self._reporter.warning(item)
                continue
            if not item.is_file:
                continue
            if not is_target_file(item.path):
                continue

            self._stats.increment_found()
            yield item.path

    def _record(self, result: RemovalResult) -> None:
        """Fold a removal result into the counters and report it."""
        self._count(result)
        if result.success:
            self._reporter.moved(Path(result.path))
        else:
            self._reporter.failed(result)

    def _count(self, result: RemovalResult) -> None:
        """Fold a removal result into the counters without reporting it."""
        if result.success:
            self._stats.increment_moved()
        else:
            self._stats.increment_failed()
            logger.debug("Removal failed (%s): %s", result.failure, result.error)
