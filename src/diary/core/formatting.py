"""Display helpers for entries - no I/O."""

from datetime import datetime

from .entries import DiaryEntry


def timestamp_to_datetime(micros: int) -> datetime:
    """Local datetime for a microsecond epoch timestamp."""
    return datetime.fromtimestamp(micros / 1_000_000)


def format_timestamp(micros: int, now: datetime | None = None) -> str:
    """
    Human-friendly relative date.

    "Today at HH:MM", "Yesterday", "N days ago" inside a week, otherwise
    "Jan 05, 2025".
    """
    when = timestamp_to_datetime(micros)
    now = now or datetime.now()
    diff_days = (now - when).days

    if diff_days <= 0:
        return f"Today at {when.strftime('%H:%M')}"
    elif diff_days == 1:
        return "Yesterday"
    elif diff_days < 7:
        return f"{diff_days} days ago"
    return when.strftime("%b %d, %Y")


def truncate(text: str, max_length: int = 150) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_entry_line(entry: DiaryEntry, now: datetime | None = None) -> str:
    """One-line summary used by list views."""
    return f"[{entry.id:>4}] {format_timestamp(entry.timestamp, now):20} {entry.title}"
