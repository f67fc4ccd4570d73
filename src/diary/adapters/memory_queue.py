"""In-memory command log adapter."""

import threading
from typing import Callable

from diary.clock import now_micros
from diary.core.commands import Command, ScheduledCommand


class MemoryCommandQueue:
    """
    In-memory command log.

    Implements CommandQueue protocol. Useful for tests and for embedding the
    diary in a single process.
    """

    def __init__(self, clock: Callable[[], int] = now_micros):
        self._clock = clock
        self._log: list[ScheduledCommand] = []
        self._cursor = 0
        self._lock = threading.RLock()

    def lock(self) -> threading.RLock:
        return self._lock

    def schedule(self, command: Command, caller: str) -> ScheduledCommand:
        with self._lock:
            scheduled = ScheduledCommand(
                seq=len(self._log) + 1,
                caller=caller,
                submitted_at=self._clock(),
                command=command,
            )
            self._log.append(scheduled)
        return scheduled

    def pending(self) -> list[ScheduledCommand]:
        with self._lock:
            return [s for s in self._log if s.seq > self._cursor]

    def mark_done(self, seq: int) -> None:
        with self._lock:
            self._cursor = max(self._cursor, seq)
