"""Session counters shared by every task of a runner."""

import threading

from ..host.protocol import Status
from ..messaging.codec import CounterDelta


class Counters:
    """Total/success/failure/error counts; increments only.

    Every update and every snapshot holds the lock, so readers never see a
    half-applied merge.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total = 0
        self._success = 0
        self._failure = 0
        self._error = 0

    def record(self, status: Status) -> None:
        """Count one event. Statuses other than success/error count as failures."""
        with self._lock:
            if status is Status.SUCCESS:
                self._success += 1
            elif status is Status.ERROR:
                self._error += 1
            else:
                self._failure += 1
            self._total += 1

    def merge(self, delta: CounterDelta) -> None:
        """Add a worker's counts."""
        with self._lock:
            self._total += delta.total
            self._success += delta.success
            self._failure += delta.failure
            self._error += delta.error

    def snapshot(self) -> CounterDelta:
        with self._lock:
            return CounterDelta(
                total=self._total,
                success=self._success,
                failure=self._failure,
                error=self._error,
            )

    @property
    def total(self) -> int:
        return self.snapshot().total

    @property
    def success(self) -> int:
        return self.snapshot().success

    @property
    def failure(self) -> int:
        return self.snapshot().failure

    @property
    def error(self) -> int:
        return self.snapshot().error

    def __repr__(self) -> str:
        s = self.snapshot()
        return f"Counters(total={s.total}, success={s.success}, failure={s.failure}, error={s.error})"
