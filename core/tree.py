"""Task forest: arena of tasks keyed by id, tree building and flattening."""

import logging
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple

from .task import Task, TaskRecord

logger = logging.getLogger("tasktree.tree")


class Forest:
    """Sorted task forest.

    Children are stored as id lists inside each Task; ``parent_of`` is the
    reverse map, filled only for parents that actually exist.
    """

    def __init__(self, nodes: Dict[int, Task], roots: List[int], parents: Dict[int, int]):
        self._nodes = nodes
        self.roots = roots
        self._parents = parents

    @classmethod
    def empty(cls) -> "Forest":
        return cls({}, [], {})

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._nodes.values())

    def get(self, task_id: int) -> Optional[Task]:
        return self._nodes.get(task_id)

    def root_tasks(self) -> List[Task]:
        return [self._nodes[tid] for tid in self.roots]

    def children_of(self, task: Task) -> List[Task]:
        return [self._nodes[cid] for cid in task.children]

    def parent_of(self, task_id: int) -> Optional[int]:
        return self._parents.get(task_id)

    def depth_of(self, task_id: int) -> int:
        depth = 0
        current = self._parents.get(task_id)
        while current is not None and depth < len(self._nodes):
            depth += 1
            current = self._parents.get(current)
        return depth

    def descendant_count(self, task_id: int) -> int:
        task = self._nodes.get(task_id)
        if task is None:
            return 0
        seen = {task_id}
        stack = self.children_of(task)
        while stack:
            child = stack.pop()
            if child.id in seen:
                continue
            seen.add(child.id)
            stack.extend(self.children_of(child))
        return len(seen) - 1

    def collapsed_ids(self) -> Set[int]:
        return {task.id for task in self._nodes.values() if not task.is_expanded}


def build_forest(records: Iterable[TaskRecord], collapsed: Iterable[int] = ()) -> Forest:
    """Rebuild the forest from an unordered record set.

    Records whose parent id does not resolve become roots. Every sibling list
    is sorted by priority descending, then creation time ascending.
    """
    collapsed_set = set(collapsed)
    nodes: Dict[int, Task] = {}
    for record in records:
        nodes[record.id] = Task.from_record(record, expanded=record.id not in collapsed_set)

    roots: List[int] = []
    parents: Dict[int, int] = {}
    for task in nodes.values():
        if task.parent_id is not None and task.parent_id in nodes and task.parent_id != task.id:
            nodes[task.parent_id].children.append(task.id)
            parents[task.id] = task.parent_id
            continue
        if task.parent_id is not None:
            logger.debug("Task %s references missing parent %s; treating as root", task.id, task.parent_id)
        roots.append(task.id)

    def _key(tid: int):
        return nodes[tid].sort_key()

    roots.sort(key=_key)
    for task in nodes.values():
        task.children.sort(key=_key)
    return Forest(nodes, roots, parents)


class FlatEntry(NamedTuple):
    task: Task
    depth: int


def flatten(forest: Forest) -> List[FlatEntry]:
    """Expansion-aware pre-order walk (iterative, deterministic).

    Collapsed tasks stay in the output; their descendants do not.
    """
    flat: List[FlatEntry] = []
    frames: List[Tuple[List[Task], int, int]] = [(forest.root_tasks(), 0, 0)]
    while frames:
        siblings, depth, idx = frames.pop()
        if idx >= len(siblings):
            continue
        task = siblings[idx]
        flat.append(FlatEntry(task, depth))
        # Siblings resume after this task's subtree.
        frames.append((siblings, depth, idx + 1))
        if task.is_expanded and task.has_children:
            frames.append((forest.children_of(task), depth + 1, 0))
    return flat


__all__ = ["Forest", "FlatEntry", "build_forest", "flatten"]
