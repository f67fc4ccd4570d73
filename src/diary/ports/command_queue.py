"""Command log interface."""

from typing import ContextManager, Protocol

from diary.core.commands import Command, ScheduledCommand


class CommandQueue(Protocol):
    """Append-only log of scheduled commands, consumed in order."""

    def lock(self) -> ContextManager:
        """Exclusive, re-entrant access to the log for one consumer at a time."""
        ...

    def schedule(self, command: Command, caller: str) -> ScheduledCommand:
        """Append a command for later execution. Returns the committed envelope."""
        ...

    def pending(self) -> list[ScheduledCommand]:
        """Commands not yet consumed, in sequence order."""
        ...

    def mark_done(self, seq: int) -> None:
        """Record that every command up to and including `seq` was consumed."""
        ...
