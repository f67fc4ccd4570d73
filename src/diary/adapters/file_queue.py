"""File-based command log adapter."""

import fcntl
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from diary.clock import now_micros
from diary.core.commands import Command, ScheduledCommand

logger = logging.getLogger(__name__)


class FileCommandQueue:
    """
    Append-only JSON Lines command log.

    Implements CommandQueue protocol. Each scheduled command is one line in
    `commands.jsonl`; the sequence number of the last consumed command is
    kept in `commands.cursor`. Consumed lines are dropped from the log once
    the cursor moves past them.

    Every read and write happens under an exclusive flock on
    `commands.lock`, so submitters, `diary apply` and the worker can share
    one directory from separate processes.
    """

    def __init__(self, queue_dir: Path | str, clock: Callable[[], int] = now_micros):
        self.queue_dir = Path(queue_dir).expanduser()
        self.queue_dir.mkdir(parents=True, exist_ok=True)
        self.log_path = self.queue_dir / "commands.jsonl"
        self.cursor_path = self.queue_dir / "commands.cursor"
        self.lock_path = self.queue_dir / "commands.lock"
        self._clock = clock
        self._thread_lock = threading.RLock()
        self._lock_depth = 0

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Exclusive access to the log. Re-entrant within this instance."""
        with self._thread_lock:
            if self._lock_depth:
                self._lock_depth += 1
                try:
                    yield
                finally:
                    self._lock_depth -= 1
                return

            fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT, 0o600)
            try:
                fcntl.flock(fd, fcntl.LOCK_EX)
                self._lock_depth = 1
                try:
                    yield
                finally:
                    self._lock_depth = 0
                    fcntl.flock(fd, fcntl.LOCK_UN)
            finally:
                os.close(fd)

    def _read_log(self) -> list[ScheduledCommand]:
        if not self.log_path.exists():
            return []
        commands = []
        for lineno, line in enumerate(self.log_path.read_text().splitlines(), start=1):
            if not line.strip():
                continue
            try:
                commands.append(ScheduledCommand.from_dict(json.loads(line)))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable command at {self.log_path}:{lineno}: {e}")
        return commands

    def _last_seq(self) -> int:
        # The log may have been compacted down to nothing; the cursor still
        # remembers how far numbering got
        commands = self._read_log()
        last = commands[-1].seq if commands else 0
        return max(last, self.cursor())

    def _compact(self, cursor: int) -> None:
        """Rewrite the log without commands at or below `cursor`."""
        remaining = [s for s in self._read_log() if s.seq > cursor]
        fd, tmp_name = tempfile.mkstemp(dir=self.queue_dir, prefix=".commands-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                for scheduled in remaining:
                    f.write(json.dumps(scheduled.to_dict()) + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.log_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def cursor(self) -> int:
        """Sequence number of the last consumed command (0 if none)."""
        if not self.cursor_path.exists():
            return 0
        try:
            return int(self.cursor_path.read_text().strip() or 0)
        except ValueError:
            logger.warning(f"Invalid cursor file {self.cursor_path}, starting from 0")
            return 0

    def schedule(self, command: Command, caller: str) -> ScheduledCommand:
        """Append a command to the log."""
        with self.lock():
            scheduled = ScheduledCommand(
                seq=self._last_seq() + 1,
                caller=caller,
                submitted_at=self._clock(),
                command=command,
            )
            # The log holds secret phrases; keep it private to the owner
            fd = os.open(self.log_path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
            with os.fdopen(fd, "a") as f:
                f.write(json.dumps(scheduled.to_dict()) + "\n")
        return scheduled

    def pending(self) -> list[ScheduledCommand]:
        with self.lock():
            cursor = self.cursor()
            return [s for s in self._read_log() if s.seq > cursor]

    def mark_done(self, seq: int) -> None:
        with self.lock():
            if seq <= self.cursor():
                return
            tmp = self.cursor_path.with_suffix(".tmp")
            tmp.write_text(str(seq))
            os.replace(tmp, self.cursor_path)
            self._compact(seq)
