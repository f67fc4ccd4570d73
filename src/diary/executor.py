"""Trusted write path - applies scheduled commands one at a time.

Each command is applied to a copy of the committed state and the copy is
saved only if every business rule passed. Failures are terminal: the command
is consumed, logged, and never retried.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from .clock import now_micros
from .core.commands import ScheduledCommand, command_type
from .core.errors import DiaryError
from .core.processor import apply_command
from .ports import CommandQueue, StateStore

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Outcome of one command, visible only to the host (never to the submitter)."""

    seq: int
    command: str
    success: bool
    message: str = ""
    entry_id: int | None = None


class CommandExecutor:
    """Serialized command processor bound to one state store."""

    def __init__(self, store: StateStore, clock: Callable[[], int] = now_micros):
        self.store = store
        self.clock = clock
        self._lock = threading.Lock()

    def execute(self, scheduled: ScheduledCommand) -> ExecutionResult:
        """Apply one scheduled command atomically."""
        name = command_type(scheduled.command)
        with self._lock:
            working = self.store.load().copy()
            try:
                entry_id = apply_command(working, scheduled.command, scheduled.caller, self.clock())
            except DiaryError as e:
                logger.warning(
                    f"Command #{scheduled.seq} {name} rejected: {type(e).__name__}: {e}"
                )
                return ExecutionResult(scheduled.seq, name, False, str(e))
            self.store.save(working)

        logger.info(f"Command #{scheduled.seq} {name} applied")
        return ExecutionResult(scheduled.seq, name, True, "ok", entry_id)

    def drain(self, queue: CommandQueue) -> list[ExecutionResult]:
        """Apply every pending command in log order.

        Holds the queue lock throughout, so two drains over the same log
        (worker and `diary apply`) never deliver a command twice.
        """
        results = []
        with queue.lock():
            for scheduled in queue.pending():
                results.append(self.execute(scheduled))
                queue.mark_done(scheduled.seq)
        if results:
            applied = sum(1 for r in results if r.success)
            logger.info(f"Drained {len(results)} command(s): {applied} applied, {len(results) - applied} rejected")
        return results
