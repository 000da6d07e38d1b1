from typing import List, Optional, Protocol

from core import DEFAULT_PRIORITY, TaskRecord


class StoreError(Exception):
    """A task store request failed."""


class StoreInitError(StoreError):
    """The task store could not be opened or its schema created."""


class TaskNotFoundError(StoreError):
    def __init__(self, task_id: int):
        super().__init__(f"task {task_id} does not exist")
        self.task_id = task_id


class TaskRepository(Protocol):
    def list_records(self) -> List[TaskRecord]:
        ...

    def create(self, title: str, priority: int = DEFAULT_PRIORITY, parent_id: Optional[int] = None) -> int:
        ...

    def update(self, task_id: int, title: str, priority: int) -> None:
        ...

    def set_priority(self, task_id: int, priority: int) -> None:
        ...

    def get_priority(self, task_id: int) -> int:
        ...

    def delete(self, task_id: int) -> int:
        ...

    def close(self) -> None:
        ...
