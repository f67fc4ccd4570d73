"""Shared wiring between the CLI and the worker.

Each get_* function resolves an adapter or service from config.
"""

from .adapters.file_queue import FileCommandQueue
from .adapters.file_store import FileStateStore
from .config import Config
from .executor import CommandExecutor, ExecutionResult
from .frontend import RequestFrontEnd
from .queries import DiaryQueries


def get_state_store(config: Config) -> FileStateStore:
    """Resolve the committed state file from config."""
    return FileStateStore(config.data_path / "state.json")


def get_command_queue(config: Config) -> FileCommandQueue:
    """Resolve the command log directory from config."""
    return FileCommandQueue(config.data_path / "queue")


def get_front_end(config: Config) -> RequestFrontEnd:
    return RequestFrontEnd(
        get_command_queue(config),
        caller=config.caller,
        min_secret_length=config.min_secret_length,
    )


def get_queries(config: Config) -> DiaryQueries:
    return DiaryQueries(get_state_store(config))


def apply_pending(config: Config) -> list[ExecutionResult]:
    """Run every scheduled command against the state store."""
    executor = CommandExecutor(get_state_store(config))
    return executor.drain(get_command_queue(config))
