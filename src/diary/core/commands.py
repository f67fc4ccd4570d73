"""Diary commands and the envelope they travel in through the command log."""

from dataclasses import asdict, dataclass


@dataclass
class Initialize:
    """Set the secret digest and owner. Carries a digest, never the phrase."""

    secret_digest: str


@dataclass
class AddEntry:
    secret: str
    title: str
    content: str


@dataclass
class UpdateEntry:
    """Update an entry. None fields keep their current value."""

    secret: str
    entry_id: int
    title: str | None = None
    content: str | None = None


@dataclass
class DeleteEntry:
    secret: str
    entry_id: int


Command = Initialize | AddEntry | UpdateEntry | DeleteEntry

COMMAND_TYPES: dict[str, type] = {
    "initialize": Initialize,
    "add_entry": AddEntry,
    "update_entry": UpdateEntry,
    "delete_entry": DeleteEntry,
}

_TYPE_NAMES = {cls: name for name, cls in COMMAND_TYPES.items()}


def command_type(command: Command) -> str:
    """Wire name of a command, e.g. 'add_entry'."""
    return _TYPE_NAMES[type(command)]


def command_to_dict(command: Command) -> dict:
    return {"type": command_type(command), **asdict(command)}


def command_from_dict(data: dict) -> Command:
    """Rebuild a command from its serialized form."""
    fields = dict(data)
    name = fields.pop("type", None)
    if name not in COMMAND_TYPES:
        raise ValueError(f"Unknown command type: {name!r}")
    return COMMAND_TYPES[name](**fields)


@dataclass
class ScheduledCommand:
    """
    A command as committed to the log.

    `seq` orders execution. `caller` is the identity the host authenticated
    at submission; the front end never sets it from request data.
    """

    seq: int
    caller: str
    submitted_at: int
    command: Command

    def to_dict(self) -> dict:
        return {
            "seq": self.seq,
            "caller": self.caller,
            "submitted_at": self.submitted_at,
            "command": command_to_dict(self.command),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduledCommand":
        return cls(
            seq=int(data["seq"]),
            caller=data["caller"],
            submitted_at=int(data.get("submitted_at", 0)),
            command=command_from_dict(data["command"]),
        )
