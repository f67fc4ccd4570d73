"""Ports - interfaces/protocols for external dependencies."""

from .state_store import StateStore
from .command_queue import CommandQueue

__all__ = [
    "StateStore",
    "CommandQueue",
]
