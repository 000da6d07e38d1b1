from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .priority import DEFAULT_PRIORITY

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _aware(value: Optional[datetime]) -> datetime:
    if value is None:
        return EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class TaskRecord:
    """One row as returned by the task store."""

    id: int
    title: str
    priority: int = DEFAULT_PRIORITY
    created_at: Optional[datetime] = None
    parent_id: Optional[int] = None


@dataclass
class Task:
    """Tree node rebuilt from a TaskRecord on every reload."""

    id: int
    title: str
    priority: int
    created_at: datetime
    parent_id: Optional[int] = None
    children: List[int] = field(default_factory=list)
    is_expanded: bool = True

    @classmethod
    def from_record(cls, record: TaskRecord, *, expanded: bool = True) -> "Task":
        return cls(
            id=record.id,
            title=record.title,
            priority=record.priority,
            created_at=_aware(record.created_at),
            parent_id=record.parent_id,
            is_expanded=expanded,
        )

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def sort_key(self) -> Tuple[int, datetime, int]:
        # Higher priority first, then older first; id keeps equal timestamps stable.
        return (-self.priority, self.created_at, self.id)
