"""
schema.py - Schema creation helpers
Single responsibility: define and apply the key-value table.
"""
import logging
import os

from tasker.config import DB_PATH
from tasker.database.connection import get_connection

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS storage (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


def initialize_schema(db_path: str = DB_PATH) -> None:
    """Create the storage table if missing."""
    parent = os.path.dirname(db_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    try:
        with get_connection(db_path) as conn:
            conn.executescript(SCHEMA_SQL)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
