from .priority import (
    DEFAULT_PRIORITY,
    PRIORITY_MAX,
    PRIORITY_MIN,
    clamp_priority,
    creation_priority,
    edit_priority,
    parse_int,
)
from .task import Task, TaskRecord
from .tree import FlatEntry, Forest, build_forest, flatten

__all__ = [
    "Task",
    "TaskRecord",
    # Tree
    "Forest",
    "FlatEntry",
    "build_forest",
    "flatten",
    # Priority
    "DEFAULT_PRIORITY",
    "PRIORITY_MAX",
    "PRIORITY_MIN",
    "clamp_priority",
    "creation_priority",
    "edit_priority",
    "parse_int",
]
