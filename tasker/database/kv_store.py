"""
kv_store.py - Key-value store backends
Single responsibility: synchronous get/set/remove of string values by key.
"""
import logging

from tasker.config import DB_PATH
from tasker.database.connection import get_connection
from tasker.database.schema import initialize_schema

logger = logging.getLogger(__name__)


class SqliteKeyValueStore:
    """Persistent store backed by the `storage` table. One connection per call."""

    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path
        initialize_schema(db_path)
        logger.info("Key-value store ready db=%s", db_path)

    def get_item(self, key: str) -> str | None:
        with get_connection(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM storage WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with get_connection(self.db_path) as conn:
            conn.execute(
                "INSERT INTO storage (key, value) VALUES (?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with get_connection(self.db_path) as conn:
            conn.execute("DELETE FROM storage WHERE key = ?", (key,))


class MemoryKeyValueStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
