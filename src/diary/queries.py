"""Read path - query surface over the committed diary state."""

from .core import entries as projection
from .core.entries import DiaryEntry
from .ports import StateStore


class DiaryQueries:
    """
    Read-only views of the diary.

    Every call loads the last committed state, so readers never observe a
    command half way through. Nothing here authenticates or mutates.
    """

    def __init__(self, store: StateStore):
        self.store = store

    def _entries(self) -> list[DiaryEntry]:
        return self.store.load().all_entries()

    def is_initialized(self) -> bool:
        return self.store.load().is_initialized

    def owner(self) -> str:
        return self.store.load().owner

    def entry_count(self) -> int:
        """Number of entries that currently exist."""
        return len(self.store.load().entries)

    def next_entry_id(self) -> int:
        """Id the next added entry will receive."""
        return self.store.load().next_id()

    def entries(self) -> list[DiaryEntry]:
        """All entries, newest first."""
        return projection.sort_newest_first(self._entries())

    def entry(self, entry_id: int) -> DiaryEntry | None:
        return self.store.load().get(entry_id)

    def latest_entries(self, limit: int) -> list[DiaryEntry]:
        return projection.latest(self._entries(), limit)

    def entries_in_range(self, start: int, end: int) -> list[DiaryEntry]:
        return projection.in_range(self._entries(), start, end)

    def search_by_title(self, query: str) -> list[DiaryEntry]:
        return projection.search_by_title(self._entries(), query)

    def search_by_content(self, query: str) -> list[DiaryEntry]:
        return projection.search_by_content(self._entries(), query)
