"""Thread-safe counters for a single cleanup run."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    """Point-in-time copy of the cleanup counters."""

    found: int
    moved: int
    failed: int


class _Counter:
    """Integer counter with locked increment and read."""

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class CleanStats:
    """Found / moved / failed counters for one cleanup run.

    The three counters are independent: each increment is atomic, but no
    consistency is guaranteed across counters while a run is in progress.
    An instance is owned by the orchestrator and passed explicitly to any
    worker that needs it.
    """

    def __init__(self) -> None:
        self._found = _Counter()
        self._moved = _Counter()
        self._failed = _Counter()

    def increment_found(self) -> None:
        """Record a target file discovered during traversal."""
        self._found.increment()

    def increment_moved(self) -> None:
        """Record a target file successfully moved to the trash."""
        self._moved.increment()

    def increment_failed(self) -> None:
        """Record a target file that could not be moved."""
        self._failed.increment()

    @property
    def found(self) -> int:
        return self._found.value

    @property
    def moved(self) -> int:
        return self._moved.value

    @property
    def failed(self) -> int:
        return self._failed.value

    def snapshot(self) -> StatsSnapshot:
        """Return the current counter values."""
        return StatsSnapshot(found=self.found, moved=self.moved, failed=self.failed)
