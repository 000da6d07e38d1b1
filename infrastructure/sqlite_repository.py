import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Union

from application.ports import StoreError, StoreInitError, TaskNotFoundError, TaskRepository
from core import DEFAULT_PRIORITY, TaskRecord

logger = logging.getLogger("tasktree.store")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

SCHEMA = f"""
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    priority INTEGER DEFAULT {DEFAULT_PRIORITY},
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    parent_id INTEGER,
    FOREIGN KEY (parent_id) REFERENCES tasks (id) ON DELETE CASCADE
)
"""

_SUBTREE = """
WITH RECURSIVE subtree(id) AS (
    SELECT id FROM tasks WHERE id = ?
    UNION
    SELECT t.id FROM tasks t JOIN subtree s ON t.parent_id = s.id
)
"""
_COUNT_SUBTREE = _SUBTREE + "SELECT COUNT(*) AS n FROM subtree"
_DELETE_SUBTREE = _SUBTREE + "DELETE FROM tasks WHERE id IN (SELECT id FROM subtree)"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value) -> Optional[datetime]:
    """Read ``created_at`` as written by SQLite (``CURRENT_TIMESTAMP``) or by us."""
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(str(value))
    except ValueError:
        logger.warning("Unreadable created_at value %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SqliteTaskRepository(TaskRepository):
    """SQLite-backed task store holding one connection for its whole lifetime.

    Use as a context manager so the connection is released on every exit path::

        with SqliteTaskRepository.open("tasks.db") as repo:
            ...
    """

    def __init__(self, conn: sqlite3.Connection, path: Path, clock: Callable[[], datetime] = _utcnow):
        self._conn = conn
        self.path = path
        self._clock = clock

    @classmethod
    def open(cls, path: Union[str, Path], clock: Callable[[], datetime] = _utcnow) -> "SqliteTaskRepository":
        db_path = Path(path).expanduser()
        conn = None
        try:
            if db_path.parent and not db_path.parent.exists():
                db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(db_path))
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            conn.execute(SCHEMA)
            conn.commit()
        except (sqlite3.Error, OSError) as exc:
            if conn is not None:
                conn.close()
            raise StoreInitError(str(exc)) from exc
        repo = cls(conn, db_path, clock=clock)
        logger.info("Task store ready db=%s", db_path)
        return repo

    def __enter__(self) -> "SqliteTaskRepository":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.close()
        finally:
            self._conn = None
        logger.info("Task store closed db=%s", self.path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("task store is closed")
        return self._conn

    def _query(self, sql: str, params=()) -> List[sqlite3.Row]:
        conn = self._connection()
        try:
            return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.warning("Store query failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def _execute(self, sql: str, params=()) -> sqlite3.Cursor:
        conn = self._connection()
        try:
            with conn:
                return conn.execute(sql, params)
        except sqlite3.Error as exc:
            logger.warning("Store write failed: %s", exc)
            raise StoreError(str(exc)) from exc

    # ---- store contract ----

    def list_records(self) -> List[TaskRecord]:
        rows = self._query("SELECT id, title, priority, created_at, parent_id FROM tasks")
        return [
            TaskRecord(
                id=int(row["id"]),
                title=str(row["title"]),
                priority=int(row["priority"] if row["priority"] is not None else DEFAULT_PRIORITY),
                created_at=_parse_timestamp(row["created_at"]),
                parent_id=int(row["parent_id"]) if row["parent_id"] is not None else None,
            )
            for row in rows
        ]

    def create(self, title: str, priority: int = DEFAULT_PRIORITY, parent_id: Optional[int] = None) -> int:
        created_at = self._clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
        cur = self._execute(
            "INSERT INTO tasks (title, priority, created_at, parent_id) VALUES (?, ?, ?, ?)",
            (title, priority, created_at, parent_id),
        )
        return int(cur.lastrowid)

    def update(self, task_id: int, title: str, priority: int) -> None:
        cur = self._execute("UPDATE tasks SET title = ?, priority = ? WHERE id = ?", (title, priority, task_id))
        if cur.rowcount == 0:
            raise TaskNotFoundError(task_id)

    def set_priority(self, task_id: int, priority: int) -> None:
        cur = self._execute("UPDATE tasks SET priority = ? WHERE id = ?", (priority, task_id))
        if cur.rowcount == 0:
            raise TaskNotFoundError(task_id)

    def get_priority(self, task_id: int) -> int:
        rows = self._query("SELECT priority FROM tasks WHERE id = ?", (task_id,))
        if not rows:
            raise TaskNotFoundError(task_id)
        row = rows[0]
        return int(row["priority"] if row["priority"] is not None else DEFAULT_PRIORITY)

    def delete(self, task_id: int) -> int:
        """Delete a task and every task whose parent chain leads to it."""
        # rowcount does not include rows removed by the foreign key cascade.
        removed = int(self._query(_COUNT_SUBTREE, (task_id,))[0]["n"])
        if removed == 0:
            raise TaskNotFoundError(task_id)
        self._execute(_DELETE_SUBTREE, (task_id,))
        return removed


__all__ = ["SqliteTaskRepository", "SCHEMA"]
