"""
models.py - Domain models
Single responsibility: typed container for a task record.
"""
from dataclasses import asdict, dataclass


@dataclass
class Task:
    id: str
    text: str
    completed: bool = False

    def to_record(self) -> dict:
        return asdict(self)

    @classmethod
    def from_record(cls, record: dict) -> "Task":
        return cls(
            id=str(record["id"]),
            text=str(record.get("text") or ""),
            completed=bool(record.get("completed")),
        )
