"""Tests for the command state machine."""

import pytest

from diary.core.commands import AddEntry, DeleteEntry, Initialize, UpdateEntry
from diary.core.entries import DiaryEntry
from diary.core.errors import (
    AlreadyInitialized,
    EntryNotFound,
    InvalidSecret,
    NotInitialized,
    NotOwner,
)
from diary.core.processor import apply_command
from diary.core.secret import hash_secret
from diary.core.state import DiaryState

SECRET = "correct-horse-battery"
OWNER = "alice"


@pytest.fixture
def state():
    """Initialized diary with one entry."""
    s = DiaryState()
    apply_command(s, Initialize(hash_secret(SECRET)), OWNER, now=1)
    apply_command(s, AddEntry(SECRET, "First", "Hello"), OWNER, now=1_000)
    return s


class TestInitialize:
    def test_sets_digest_owner_and_counter(self):
        s = DiaryState()
        result = apply_command(s, Initialize(hash_secret(SECRET)), OWNER, now=1)
        assert result is None
        assert s.is_initialized
        assert s.secret_digest == hash_secret(SECRET)
        assert s.owner == OWNER
        assert s.entry_counter == 0

    def test_second_initialize_rejected(self, state):
        with pytest.raises(AlreadyInitialized):
            apply_command(state, Initialize(hash_secret("other-secret")), "mallory", now=2)

    def test_second_initialize_keeps_first_owner_and_secret(self):
        s = DiaryState()
        apply_command(s, Initialize(hash_secret(SECRET)), OWNER, now=1)
        with pytest.raises(AlreadyInitialized):
            apply_command(s, Initialize(hash_secret("other-secret")), "mallory", now=2)
        assert s.owner == OWNER
        assert s.secret_digest == hash_secret(SECRET)


class TestAddEntry:
    def test_assigns_next_id_and_timestamp(self, state):
        entry_id = apply_command(state, AddEntry(SECRET, "Second", "World"), OWNER, now=2_000)
        assert entry_id == 1
        assert state.get(1) == DiaryEntry(id=1, title="Second", content="World", timestamp=2_000)
        assert state.entry_counter == 2

    def test_not_initialized(self):
        with pytest.raises(NotInitialized):
            apply_command(DiaryState(), AddEntry(SECRET, "T", "C"), OWNER, now=1)

    def test_invalid_secret(self, state):
        with pytest.raises(InvalidSecret):
            apply_command(state, AddEntry("wrong-secret", "T", "C"), OWNER, now=1)

    def test_not_owner(self, state):
        with pytest.raises(NotOwner):
            apply_command(state, AddEntry(SECRET, "T", "C"), "mallory", now=1)

    def test_secret_checked_before_owner(self, state):
        with pytest.raises(InvalidSecret):
            apply_command(state, AddEntry("wrong-secret", "T", "C"), "mallory", now=1)

    def test_initialized_checked_first(self):
        with pytest.raises(NotInitialized):
            apply_command(DiaryState(), AddEntry("wrong", "T", "C"), "mallory", now=1)

    def test_ids_not_reused_after_delete(self, state):
        apply_command(state, DeleteEntry(SECRET, 0), OWNER, now=2)
        entry_id = apply_command(state, AddEntry(SECRET, "Again", "C"), OWNER, now=3)
        assert entry_id == 1
        assert state.get(0) is None


class TestUpdateEntry:
    def test_title_only_keeps_content(self, state):
        apply_command(state, UpdateEntry(SECRET, 0, title="Renamed"), OWNER, now=5_000)
        entry = state.get(0)
        assert entry.title == "Renamed"
        assert entry.content == "Hello"
        assert entry.timestamp == 5_000

    def test_content_only_keeps_title(self, state):
        apply_command(state, UpdateEntry(SECRET, 0, content="Rewritten"), OWNER, now=5_000)
        entry = state.get(0)
        assert entry.title == "First"
        assert entry.content == "Rewritten"

    def test_preserves_id_and_counter(self, state):
        apply_command(state, UpdateEntry(SECRET, 0, title="X", content="Y"), OWNER, now=5_000)
        assert state.get(0).id == 0
        assert state.entry_counter == 1

    def test_timestamp_never_moves_backwards(self, state):
        apply_command(state, UpdateEntry(SECRET, 0, title="X"), OWNER, now=10)
        assert state.get(0).timestamp == 1_000

    def test_missing_entry(self, state):
        with pytest.raises(EntryNotFound, match="Entry 9 not found"):
            apply_command(state, UpdateEntry(SECRET, 9, title="X"), OWNER, now=2)

    def test_auth_checked_before_existence(self, state):
        with pytest.raises(InvalidSecret):
            apply_command(state, UpdateEntry("wrong-secret", 9, title="X"), OWNER, now=2)

    def test_not_owner(self, state):
        with pytest.raises(NotOwner):
            apply_command(state, UpdateEntry(SECRET, 0, title="X"), "mallory", now=2)


class TestDeleteEntry:
    def test_removes_entry(self, state):
        apply_command(state, DeleteEntry(SECRET, 0), OWNER, now=2)
        assert state.get(0) is None
        assert state.entry_counter == 1

    def test_missing_entry_is_noop(self, state):
        apply_command(state, DeleteEntry(SECRET, 42), OWNER, now=2)
        assert list(state.entries) == [0]
        assert state.entry_counter == 1

    def test_not_initialized(self):
        with pytest.raises(NotInitialized):
            apply_command(DiaryState(), DeleteEntry(SECRET, 0), OWNER, now=1)

    def test_invalid_secret(self, state):
        with pytest.raises(InvalidSecret):
            apply_command(state, DeleteEntry("nope-nope", 0), OWNER, now=1)
        assert state.get(0) is not None


class TestUnknownCommand:
    def test_rejects_unknown_type(self, state):
        with pytest.raises(TypeError):
            apply_command(state, object(), OWNER, now=1)
