"""Tests for entry display helpers."""

from datetime import datetime, timedelta

import pytest

from diary.core.entries import DiaryEntry
from diary.core.formatting import format_entry_line, format_timestamp, truncate


def _micros(moment: datetime) -> int:
    return int(moment.timestamp() * 1_000_000)


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 18, 30)


class TestFormatTimestamp:
    def test_today(self, now):
        assert format_timestamp(_micros(datetime(2025, 1, 15, 9, 5)), now) == "Today at 09:05"

    def test_yesterday(self, now):
        assert format_timestamp(_micros(now - timedelta(days=1, hours=2)), now) == "Yesterday"

    def test_days_ago(self, now):
        assert format_timestamp(_micros(now - timedelta(days=3)), now) == "3 days ago"

    def test_older_than_a_week(self, now):
        assert format_timestamp(_micros(datetime(2024, 12, 1, 12, 0)), now) == "Dec 01, 2024"

    def test_future_counts_as_today(self, now):
        assert format_timestamp(_micros(now + timedelta(minutes=5)), now).startswith("Today at")


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("hello") == "hello"

    def test_exact_length_unchanged(self):
        assert truncate("x" * 150) == "x" * 150

    def test_long_text_cut(self):
        assert truncate("abcdef", max_length=3) == "abc..."


class TestFormatEntryLine:
    def test_includes_id_and_title(self, now):
        entry = DiaryEntry(12, "Long day", "...", _micros(datetime(2025, 1, 15, 8, 0)))
        line = format_entry_line(entry, now)
        assert line.startswith("[  12]")
        assert "Today at 08:00" in line
        assert line.endswith("Long day")
