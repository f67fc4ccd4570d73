"""In-memory state storage adapter."""

from diary.core.state import DiaryState


class MemoryStateStore:
    """
    In-memory diary state.

    Implements StateStore protocol. Hands out copies so callers can never
    mutate the committed state in place.
    """

    def __init__(self, state: DiaryState | None = None):
        self._state = state.copy() if state else DiaryState()

    def load(self) -> DiaryState:
        return self._state.copy()

    def save(self, state: DiaryState) -> None:
        self._state = state.copy()
