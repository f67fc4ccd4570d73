"""Adapters - I/O implementations of ports."""

from .memory_store import MemoryStateStore
from .file_store import FileStateStore
from .memory_queue import MemoryCommandQueue
from .file_queue import FileCommandQueue

__all__ = [
    "MemoryStateStore",
    "FileStateStore",
    "MemoryCommandQueue",
    "FileCommandQueue",
]
