"""File-based state storage adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path

from diary.core.state import DiaryState

logger = logging.getLogger(__name__)


class FileStateStore:
    """
    JSON file state storage.

    Implements StateStore protocol. The whole aggregate lives in one file
    which is replaced atomically on every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> DiaryState:
        """Load the committed state. Returns an empty state if no file exists."""
        if not self.path.exists():
            return DiaryState()
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Corrupt diary state file {self.path}: {e}") from e
        return DiaryState.from_dict(data)

    def save(self, state: DiaryState) -> None:
        """Write to a temp file in the same directory, then rename over."""
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(state.to_dict(), f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved diary state to {self.path}")
