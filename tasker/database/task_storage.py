"""
task_storage.py - Persistent store adapter
Single responsibility: (de)serialize the task collection and the active
filter under their storage keys.
"""
import json
import logging

from tasker.config import FILTER_STORAGE_KEY, STORAGE_KEY
from tasker.domain.filters import DEFAULT_FILTER, is_valid_filter
from tasker.domain.models import Task

logger = logging.getLogger(__name__)


class TaskStorage:
    def __init__(
        self,
        store,
        tasks_key: str = STORAGE_KEY,
        filter_key: str = FILTER_STORAGE_KEY,
    ):
        self.store = store
        self.tasks_key = tasks_key
        self.filter_key = filter_key

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def load(self) -> list:
        """
        Return the raw stored records.

        Absent key, unparsable JSON or a non-array payload all read as an
        empty collection. Entries are returned as stored; shape checks
        belong to the repository's migration.
        """
        raw = self.store.get_item(self.tasks_key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Stored tasks are not valid JSON; treating as empty")
            return []
        if not isinstance(data, list):
            logger.warning(
                "Stored tasks are %s, not a list; treating as empty",
                type(data).__name__,
            )
            return []
        return data

    def save(self, tasks) -> None:
        records = [t.to_record() if isinstance(t, Task) else t for t in tasks]
        self.store.set_item(self.tasks_key, json.dumps(records, ensure_ascii=False))

    # ------------------------------------------------------------------
    # Filter
    # ------------------------------------------------------------------

    def load_filter(self) -> str:
        raw = self.store.get_item(self.filter_key)
        if raw is None:
            return DEFAULT_FILTER
        value = raw
        if raw.startswith('"'):
            try:
                value = json.loads(raw)
            except json.JSONDecodeError:
                value = raw
        if not is_valid_filter(value):
            logger.warning("Ignoring unknown stored filter %r", raw)
            return DEFAULT_FILTER
        return value

    def save_filter(self, value: str) -> None:
        self.store.set_item(self.filter_key, value)
