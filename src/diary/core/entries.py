"""Pure entry projection logic - no I/O dependencies."""

from dataclasses import dataclass

from .errors import InvalidArgument


@dataclass
class DiaryEntry:
    """A single diary entry. Timestamp is microseconds since the epoch."""

    id: int
    title: str
    content: str
    timestamp: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DiaryEntry":
        """Create DiaryEntry from its stored JSON form."""
        return cls(
            id=int(data["id"]),
            title=data.get("title", ""),
            content=data.get("content", ""),
            timestamp=int(data.get("timestamp", 0)),
        )


def sort_newest_first(entries: list[DiaryEntry]) -> list[DiaryEntry]:
    """
    Sort entries by timestamp descending, ties broken by id descending.

    Pure function - no I/O.
    """
    return sorted(entries, key=lambda e: (e.timestamp, e.id), reverse=True)


def latest(entries: list[DiaryEntry], limit: int) -> list[DiaryEntry]:
    """First `limit` entries of the newest-first listing."""
    # bool is an int subclass; reject it explicitly
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgument("Limit must be positive")
    return sort_newest_first(entries)[:limit]


def in_range(entries: list[DiaryEntry], start: int, end: int) -> list[DiaryEntry]:
    """
    Entries with start <= timestamp <= end, newest first.

    Both bounds are inclusive.
    """
    if start < 0 or end < 0:
        raise InvalidArgument("Timestamps must be non-negative")
    if start > end:
        raise InvalidArgument("Start timestamp must be before end timestamp")
    return [e for e in sort_newest_first(entries) if start <= e.timestamp <= end]


def search_by_title(entries: list[DiaryEntry], query: str) -> list[DiaryEntry]:
    """Case-insensitive substring match on title, newest first."""
    needle = query.lower()
    return [e for e in sort_newest_first(entries) if needle in e.title.lower()]


def search_by_content(entries: list[DiaryEntry], query: str) -> list[DiaryEntry]:
    """Case-insensitive substring match on content, newest first."""
    needle = query.lower()
    return [e for e in sort_newest_first(entries) if needle in e.content.lower()]
