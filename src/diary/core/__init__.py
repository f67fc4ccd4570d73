"""Functional core - pure business logic with no I/O."""

from .commands import (
    AddEntry,
    Command,
    DeleteEntry,
    Initialize,
    ScheduledCommand,
    UpdateEntry,
)
from .entries import (
    DiaryEntry,
    in_range,
    latest,
    search_by_content,
    search_by_title,
    sort_newest_first,
)
from .errors import (
    AlreadyInitialized,
    DiaryError,
    EntryNotFound,
    InvalidArgument,
    InvalidSecret,
    NotInitialized,
    NotOwner,
    ShapeValidationFailed,
)
from .processor import apply_command
from .secret import hash_secret, verify_secret
from .state import DiaryState

__all__ = [
    # Commands
    "AddEntry",
    "Command",
    "DeleteEntry",
    "Initialize",
    "ScheduledCommand",
    "UpdateEntry",
    # Entries
    "DiaryEntry",
    "in_range",
    "latest",
    "search_by_content",
    "search_by_title",
    "sort_newest_first",
    # Errors
    "AlreadyInitialized",
    "DiaryError",
    "EntryNotFound",
    "InvalidArgument",
    "InvalidSecret",
    "NotInitialized",
    "NotOwner",
    "ShapeValidationFailed",
    # Processing
    "apply_command",
    "hash_secret",
    "verify_secret",
    "DiaryState",
]
