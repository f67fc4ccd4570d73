"""Command state machine - pure business rules, no I/O.

The caller hands in a state it owns exclusively for the duration of one
command. Any raised DiaryError means the state must be discarded; the
executor applies commands to a working copy so nothing partial is ever
committed.
"""

import logging

from .commands import AddEntry, Command, DeleteEntry, Initialize, UpdateEntry
from .entries import DiaryEntry
from .errors import AlreadyInitialized, EntryNotFound, InvalidSecret, NotInitialized, NotOwner
from .secret import verify_secret
from .state import DiaryState

logger = logging.getLogger(__name__)


def _authorize(state: DiaryState, secret: str, caller: str) -> None:
    """Initialized, secret matches, caller is owner - checked in that order."""
    if not state.is_initialized:
        raise NotInitialized()
    if not verify_secret(secret, state.secret_digest):
        raise InvalidSecret()
    if caller != state.owner:
        raise NotOwner()


def initialize(state: DiaryState, command: Initialize, caller: str) -> None:
    if state.is_initialized:
        raise AlreadyInitialized()
    state.secret_digest = command.secret_digest
    state.owner = caller
    state.entry_counter = 0


def add_entry(state: DiaryState, command: AddEntry, caller: str, now: int) -> int:
    """Store a new entry and return its id."""
    _authorize(state, command.secret, caller)
    entry_id = state.next_id()
    state.put(
        entry_id,
        DiaryEntry(id=entry_id, title=command.title, content=command.content, timestamp=now),
    )
    state.advance_counter()
    return entry_id


def update_entry(state: DiaryState, command: UpdateEntry, caller: str, now: int) -> None:
    _authorize(state, command.secret, caller)
    entry = state.get(command.entry_id)
    if entry is None:
        raise EntryNotFound(command.entry_id)

    if command.title is not None:
        entry.title = command.title
    if command.content is not None:
        entry.content = command.content
    # Never move an entry's timestamp backwards, even if the clock does
    entry.timestamp = max(now, entry.timestamp)
    state.put(command.entry_id, entry)


def delete_entry(state: DiaryState, command: DeleteEntry, caller: str) -> None:
    """Remove an entry. Deleting an id that does not exist is a no-op."""
    _authorize(state, command.secret, caller)
    if state.get(command.entry_id) is None:
        logger.debug(f"Delete of missing entry {command.entry_id} ignored")
    state.remove(command.entry_id)


def apply_command(state: DiaryState, command: Command, caller: str, now: int) -> int | None:
    """
    Apply one command to `state` in place.

    Returns the new entry id for AddEntry, None otherwise.
    Raises a DiaryError subclass if a business rule fails.
    """
    match command:
        case Initialize():
            initialize(state, command, caller)
        case AddEntry():
            return add_entry(state, command, caller, now)
        case UpdateEntry():
            update_entry(state, command, caller, now)
        case DeleteEntry():
            delete_entry(state, command, caller)
        case _:
            raise TypeError(f"Unsupported command: {command!r}")
    return None
