"""Untrusted request front end - shape checks, then schedule.

Nothing here reads the stored digest or the owner. Secret and ownership
checks happen only when the executor applies the command, so an
acknowledgment means "scheduled", not "will succeed".
"""

import logging
from dataclasses import dataclass

from .core.commands import AddEntry, DeleteEntry, Initialize, UpdateEntry
from .core.errors import ShapeValidationFailed
from .core.secret import hash_secret
from .ports import CommandQueue

logger = logging.getLogger(__name__)

DEFAULT_MIN_SECRET_LENGTH = 8


@dataclass
class OperationResponse:
    """Scheduling outcome returned to the requester."""

    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "OperationResponse":
        return cls(True, message)

    @classmethod
    def err(cls, message: str) -> "OperationResponse":
        return cls(False, message)

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message}


@dataclass
class BatchEntry:
    """One item of an add_entries batch."""

    title: str
    content: str


def _require_secret(secret: str) -> None:
    if not secret:
        raise ShapeValidationFailed("Secret phrase cannot be empty")


def _require_entry_id(entry_id: int) -> None:
    if entry_id < 0:
        raise ShapeValidationFailed("Entry id must be non-negative")


class RequestFrontEnd:
    """
    Accepts mutation requests and hands them to the command log.

    `caller` is the identity established by the host for this session, not
    anything supplied in the request itself.
    """

    def __init__(
        self,
        queue: CommandQueue,
        caller: str,
        min_secret_length: int = DEFAULT_MIN_SECRET_LENGTH,
    ):
        self.queue = queue
        self.caller = caller
        self.min_secret_length = min_secret_length

    def initialize(self, secret_phrase: str) -> OperationResponse:
        _require_secret(secret_phrase)
        if len(secret_phrase.encode("utf-8")) < self.min_secret_length:
            raise ShapeValidationFailed(
                f"Secret phrase must be at least {self.min_secret_length} bytes"
            )

        # Only the digest leaves the front end
        scheduled = self.queue.schedule(Initialize(hash_secret(secret_phrase)), self.caller)
        logger.debug(f"Scheduled initialize as #{scheduled.seq}")
        return OperationResponse.ok(
            "Diary initialization scheduled. Please wait for the operation to be executed."
        )

    def add_entry(self, secret_phrase: str, title: str, content: str) -> OperationResponse:
        _require_secret(secret_phrase)
        if not title:
            raise ShapeValidationFailed("Title cannot be empty")
        if not content:
            raise ShapeValidationFailed("Content cannot be empty")

        scheduled = self.queue.schedule(AddEntry(secret_phrase, title, content), self.caller)
        logger.debug(f"Scheduled add_entry as #{scheduled.seq}")
        return OperationResponse.ok(
            f"Entry '{title}' creation scheduled. Please wait for the operation to be executed."
        )

    def update_entry(
        self,
        secret_phrase: str,
        entry_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> OperationResponse:
        _require_secret(secret_phrase)
        _require_entry_id(entry_id)
        if title is None and content is None:
            raise ShapeValidationFailed("Must provide at least title or content to update")
        if title is not None and not title:
            raise ShapeValidationFailed("Title cannot be empty")
        if content is not None and not content:
            raise ShapeValidationFailed("Content cannot be empty")

        scheduled = self.queue.schedule(
            UpdateEntry(secret_phrase, entry_id, title, content), self.caller
        )
        logger.debug(f"Scheduled update_entry as #{scheduled.seq}")
        return OperationResponse.ok(
            f"Entry {entry_id} update scheduled. Please wait for the operation to be executed."
        )

    def delete_entry(self, secret_phrase: str, entry_id: int) -> OperationResponse:
        _require_secret(secret_phrase)
        _require_entry_id(entry_id)

        scheduled = self.queue.schedule(DeleteEntry(secret_phrase, entry_id), self.caller)
        logger.debug(f"Scheduled delete_entry as #{scheduled.seq}")
        return OperationResponse.ok(
            f"Entry {entry_id} deletion scheduled. Please wait for the operation to be executed."
        )

    def add_entries(self, secret_phrase: str, entries: list[BatchEntry]) -> list[OperationResponse]:
        """
        Schedule several additions.

        Items with an empty title or content are reported as failed and
        skipped; the rest of the batch is still scheduled.
        """
        _require_secret(secret_phrase)
        if not entries:
            raise ShapeValidationFailed("No entries provided")

        responses = []
        for entry in entries:
            if not entry.title or not entry.content:
                responses.append(OperationResponse.err("Title and content cannot be empty"))
                continue
            self.queue.schedule(AddEntry(secret_phrase, entry.title, entry.content), self.caller)
            responses.append(OperationResponse.ok(f"Entry '{entry.title}' scheduled"))
        return responses
