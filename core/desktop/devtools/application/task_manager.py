"""Application-level task service: one store request per command, full reloads."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from application.ports import TaskRepository
from core import DEFAULT_PRIORITY, Forest, build_forest, clamp_priority

logger = logging.getLogger("tasktree.manager")


class TaskManager:
    """Applies task commands to the store.

    Errors from the repository (``StoreError``) propagate to the caller; the
    manager never patches the in-memory tree, callers reload with
    :meth:`load_forest` after a successful write.
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def load_forest(self, collapsed: Iterable[int] = ()) -> Forest:
        records = self.repository.list_records()
        forest = build_forest(records, collapsed=collapsed)
        logger.debug("Loaded %d tasks (%d roots)", len(forest), len(forest.roots))
        return forest

    def add_task(self, title: str, priority: int = DEFAULT_PRIORITY, parent_id: Optional[int] = None) -> int:
        title = (title or "").strip()
        if not title:
            raise ValueError("task title cannot be empty")
        task_id = self.repository.create(title, clamp_priority(priority), parent_id)
        logger.info("Added task %s parent=%s priority=%s", task_id, parent_id, priority)
        return task_id

    def update_task(self, task_id: int, title: str, priority: int) -> None:
        self.repository.update(task_id, title, clamp_priority(priority))
        logger.info("Updated task %s priority=%s", task_id, priority)

    def delete_task(self, task_id: int) -> int:
        removed = self.repository.delete(task_id)
        logger.info("Deleted task %s (%d records)", task_id, removed)
        return removed

    def adjust_priority(self, task_id: int, delta: int) -> Tuple[int, int]:
        """Read-modify-write of a relative priority change; returns (old, new)."""
        current = self.repository.get_priority(task_id)
        new_priority = clamp_priority(current + delta)
        self.repository.set_priority(task_id, new_priority)
        logger.info("Task %s priority %s -> %s", task_id, current, new_priority)
        return current, new_priority


__all__ = ["TaskManager"]
