"""
tasks.py - Task repository
Single responsibility: read-modify-write operations on the persisted task
collection, including the upgrade of legacy id-less records.
"""
import logging

from tasker.database.task_storage import TaskStorage
from tasker.domain.models import Task
from tasker.utils.ids import new_id

logger = logging.getLogger(__name__)


def _upgrade_records(records: list) -> tuple[list[Task], int, bool]:
    """
    Convert stored records to tasks, giving a fresh id to any record without one.
    Returns (tasks, migrated_count, changed).
    """
    tasks: list[Task] = []
    migrated = 0
    changed = False
    for record in records:
        if isinstance(record, dict) and record.get("id"):
            tasks.append(Task.from_record(record))
            continue
        if isinstance(record, dict):
            text, completed = record.get("text"), record.get("completed")
        elif isinstance(record, str):
            text, completed = record, False
        else:
            logger.warning("Dropping unrecognized stored task: %r", record)
            changed = True
            continue
        tasks.append(Task(id=new_id(), text=str(text or ""), completed=bool(completed)))
        migrated += 1
        changed = True
    return tasks, migrated, changed


class TaskRepository:
    """
    The store is the source of truth: every call re-reads the whole
    collection and writes it back whole. Safe only with a single writer.
    """

    def __init__(self, storage: TaskStorage):
        self.storage = storage

    def _load(self) -> tuple[list[Task], int]:
        tasks, migrated, changed = _upgrade_records(self.storage.load())
        if changed:
            self.storage.save(tasks)
            logger.info("Migrated %d legacy task record(s)", migrated)
        return tasks, migrated

    def migrate_if_needed(self) -> int:
        """Give ids to legacy records and persist once. Returns how many were migrated."""
        _, migrated = self._load()
        return migrated

    def list(self) -> list[Task]:
        tasks, _ = self._load()
        return tasks

    def get(self, task_id: str) -> Task | None:
        return next((t for t in self.list() if t.id == task_id), None)

    def add(self, text: str) -> Task | None:
        text = (text or "").strip()
        if not text:
            return None
        task = Task(id=new_id(), text=text, completed=False)
        tasks = self.list()
        tasks.append(task)
        self.storage.save(tasks)
        logger.debug("Added task %s", task.id)
        return task

    def set_completed(self, task_id: str, completed: bool) -> Task | None:
        tasks = self.list()
        target = next((t for t in tasks if t.id == task_id), None)
        if target is None:
            logger.debug("set_completed: task %s not found", task_id)
            return None
        target.completed = bool(completed)
        self.storage.save(tasks)
        return target

    def remove(self, task_id: str) -> bool:
        tasks = self.list()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            logger.debug("remove: task %s not found", task_id)
            return False
        self.storage.save(remaining)
        return True

    def edit(self, task_id: str, new_text: str) -> Task | None:
        """Replace a task's text. Empty text is rejected and leaves the task as is."""
        new_text = (new_text or "").strip()
        if not new_text:
            return None
        tasks = self.list()
        target = next((t for t in tasks if t.id == task_id), None)
        if target is None:
            logger.debug("edit: task %s not found", task_id)
            return None
        target.text = new_text
        self.storage.save(tasks)
        return target

    def clear_completed(self) -> int:
        tasks = self.list()
        remaining = [t for t in tasks if not t.completed]
        removed = len(tasks) - len(remaining)
        if removed:
            self.storage.save(remaining)
        return removed
