"""Diary state storage interface."""

from typing import Protocol

from diary.core.state import DiaryState


class StateStore(Protocol):
    """Interface for loading and committing the diary aggregate."""

    def load(self) -> DiaryState:
        """Load the last committed state. Returns an empty state if none."""
        ...

    def save(self, state: DiaryState) -> None:
        """Commit a state as a whole. Readers never see a partial save."""
        ...
