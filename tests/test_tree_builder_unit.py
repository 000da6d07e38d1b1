from datetime import datetime, timedelta, timezone

from core import TaskRecord, build_forest

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def rec(task_id, priority=50, minutes=0, parent_id=None, title=None):
    return TaskRecord(
        id=task_id,
        title=title or f"task {task_id}",
        priority=priority,
        created_at=T0 + timedelta(minutes=minutes),
        parent_id=parent_id,
    )


def test_roots_sorted_by_priority_then_creation_time():
    forest = build_forest([rec(1, 50, 0), rec(2, 90, 5), rec(3, 50, -5), rec(4, 10, 0)])
    assert forest.roots == [2, 3, 1, 4]


def test_children_attached_and_sorted():
    forest = build_forest([
        rec(1, 50),
        rec(2, 20, 1, parent_id=1),
        rec(3, 80, 2, parent_id=1),
        rec(4, 80, 0, parent_id=1),
    ])
    assert forest.roots == [1]
    assert forest.get(1).children == [4, 3, 2]
    assert forest.parent_of(3) == 1
    assert forest.parent_of(1) is None


def test_every_task_appears_once():
    records = [rec(i, parent_id=(i - 1 if i > 1 else None)) for i in range(1, 8)]
    forest = build_forest(records)
    seen = list(forest.roots)
    for task in forest:
        seen.extend(task.children)
    assert sorted(seen) == list(range(1, 8))
    assert len(forest) == 7


def test_orphan_becomes_root():
    forest = build_forest([rec(1), rec(2, parent_id=99)])
    assert set(forest.roots) == {1, 2}
    assert forest.parent_of(2) is None
    # parent_id is kept on the task itself
    assert forest.get(2).parent_id == 99


def test_self_parent_is_treated_as_root():
    forest = build_forest([rec(5, parent_id=5)])
    assert forest.roots == [5]
    assert forest.get(5).children == []


def test_collapsed_ids_are_restored():
    forest = build_forest([rec(1), rec(2, parent_id=1), rec(3)], collapsed={1, 42})
    assert forest.get(1).is_expanded is False
    assert forest.get(3).is_expanded is True
    assert forest.collapsed_ids() == {1}


def test_depth_and_descendant_count():
    forest = build_forest([rec(1), rec(2, parent_id=1), rec(3, parent_id=2), rec(4, parent_id=1)])
    assert forest.depth_of(1) == 0
    assert forest.depth_of(3) == 2
    assert forest.descendant_count(1) == 3
    assert forest.descendant_count(3) == 0
    assert forest.descendant_count(404) == 0


def test_missing_created_at_sorts_first_among_equals():
    forest = build_forest([rec(1, 50, 0), TaskRecord(id=2, title="legacy", priority=50)])
    assert forest.roots == [2, 1]


def test_naive_timestamps_compare_with_aware_ones():
    naive = TaskRecord(id=1, title="naive", priority=50, created_at=datetime(2023, 1, 1))
    forest = build_forest([naive, rec(2, 50)])
    assert forest.roots == [1, 2]
    assert forest.get(1).created_at.tzinfo is not None


def test_empty_input_gives_empty_forest():
    forest = build_forest([])
    assert len(forest) == 0
    assert forest.roots == []


def test_root_tasks_and_children_of_follow_sorted_order():
    forest = build_forest([rec(1, 10), rec(2, 90), rec(3, 20, parent_id=2), rec(4, 70, parent_id=2)])
    assert [task.id for task in forest.root_tasks()] == [2, 1]
    parent = forest.get(2)
    assert [task.id for task in forest.children_of(parent)] == [4, 3]
    assert forest.children_of(forest.get(1)) == []
