"""
filter_service.py - Visibility filter state
Single responsibility: hold the persisted filter value and apply it to tasks.
"""
from tasker.database.task_storage import TaskStorage
from tasker.domain.filters import (
    FILTER_ACTIVE,
    FILTER_ALL,
    FILTER_COMPLETED,
    FILTER_VALUES,
    is_valid_filter,
)
from tasker.domain.models import Task


def apply_filter(tasks: list[Task], value: str) -> list[Task]:
    if value == FILTER_ACTIVE:
        return [t for t in tasks if not t.completed]
    if value == FILTER_COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def shows_new_tasks(value: str) -> bool:
    """A freshly added task is incomplete, so it is visible under all/active only."""
    return value in (FILTER_ALL, FILTER_ACTIVE)


class FilterState:
    """Reads through to storage on every get; writes immediately on set."""

    def __init__(self, storage: TaskStorage):
        self.storage = storage

    def get(self) -> str:
        return self.storage.load_filter()

    def set(self, value: str) -> None:
        if not is_valid_filter(value):
            raise ValueError(f"Unsupported filter: {value!r} (expected one of {FILTER_VALUES})")
        self.storage.save_filter(value)

    def apply(self, tasks: list[Task], value: str | None = None) -> list[Task]:
        return apply_filter(tasks, self.get() if value is None else value)
