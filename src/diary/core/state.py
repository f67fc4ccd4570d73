"""Diary aggregate state: secret digest, owner, entry counter and entries."""

from dataclasses import dataclass, field, replace

from .entries import DiaryEntry


@dataclass
class DiaryState:
    """
    The whole mutable diary as one aggregate.

    Entries are keyed by integer id. `entry_counter` is the next id to hand
    out and never goes down, so ids of deleted entries are never reused.
    """

    secret_digest: str = ""
    owner: str = ""
    entry_counter: int = 0
    entries: dict[int, DiaryEntry] = field(default_factory=dict)

    @property
    def is_initialized(self) -> bool:
        return bool(self.secret_digest)

    def get(self, entry_id: int) -> DiaryEntry | None:
        return self.entries.get(entry_id)

    def put(self, entry_id: int, entry: DiaryEntry) -> None:
        self.entries[entry_id] = entry

    def remove(self, entry_id: int) -> None:
        """Remove an entry. Removing an absent id does nothing."""
        self.entries.pop(entry_id, None)

    def next_id(self) -> int:
        """Id the next added entry will get. Does not advance the counter."""
        return self.entry_counter

    def advance_counter(self) -> None:
        self.entry_counter += 1

    def all_entries(self) -> list[DiaryEntry]:
        return list(self.entries.values())

    def copy(self) -> "DiaryState":
        """Independent working copy; entries are copied too."""
        return DiaryState(
            secret_digest=self.secret_digest,
            owner=self.owner,
            entry_counter=self.entry_counter,
            entries={k: replace(v) for k, v in self.entries.items()},
        )

    def to_dict(self) -> dict:
        return {
            "secret_digest": self.secret_digest,
            "owner": self.owner,
            "entry_counter": self.entry_counter,
            # JSON object keys must be strings
            "entries": {str(k): v.to_dict() for k, v in self.entries.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DiaryState":
        entries = {
            int(k): DiaryEntry.from_dict(v) for k, v in data.get("entries", {}).items()
        }
        return cls(
            secret_digest=data.get("secret_digest", ""),
            owner=data.get("owner", ""),
            entry_counter=int(data.get("entry_counter", 0)),
            entries=entries,
        )
