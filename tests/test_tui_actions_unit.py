from datetime import datetime, timezone

import pytest

from application.ports import StoreError
from core import TaskRecord, build_forest
from core.desktop.devtools.application.task_manager import TaskManager
from core.desktop.devtools.interface.tui_actions import execute_command, reload_view
from core.desktop.devtools.interface.tui_commands import (
    AddTask,
    AdjustPriority,
    DeleteTask,
    HalfPage,
    JumpCursor,
    MoveCursor,
    Quit,
    ToggleExpansion,
    UpdateTask,
)
from core.desktop.devtools.interface.tui_modes import CreationMode, CreationVariant, NormalMode
from core.desktop.devtools.interface.tui_state import AppState
from infrastructure.sqlite_repository import SqliteTaskRepository


@pytest.fixture
def manager(tmp_path):
    with SqliteTaskRepository.open(tmp_path / "tasks.db") as repo:
        yield TaskManager(repo)


def loaded_state(manager, window=20):
    state = AppState()
    state.set_window_height(window)
    assert reload_view(state, manager) is True
    return state


def titles(state):
    return [entry.task.title for entry in state.flat]


class FailingManager:
    """Every store call fails; load_forest returns a prepared forest."""

    def __init__(self, forest):
        self.forest = forest
        self.fail_loads = False

    def load_forest(self, collapsed=()):
        if self.fail_loads:
            raise StoreError("disk I/O error")
        return self.forest

    def _fail(self, *args, **kwargs):
        raise StoreError("database is locked")

    add_task = update_task = delete_task = adjust_priority = _fail


def test_quit_and_none():
    state = AppState()
    assert execute_command(state, None, Quit()) is True
    assert execute_command(state, None, None) is False


def test_add_task_reloads_and_reports(manager):
    state = loaded_state(manager)
    assert execute_command(state, manager, AddTask("Buy milk", 75)) is False
    assert titles(state) == ["Buy milk"]
    assert state.flat[0].task.priority == 75
    assert state.status_message == "Added task: Buy milk (ID: 1)"


def test_add_subtask_appears_under_parent(manager):
    parent = manager.add_task("Parent", 50)
    manager.add_task("Other", 10)
    state = loaded_state(manager)
    execute_command(state, manager, AddTask("Child", 90, parent_id=parent))
    assert titles(state) == ["Parent", "Child", "Other"]
    assert state.flat[1].depth == 1


def test_delete_with_two_children_removes_three_rows(manager):
    root = manager.add_task("Root", 60)
    manager.add_task("a", parent_id=root)
    manager.add_task("b", parent_id=root)
    manager.add_task("Keep", 10)
    state = loaded_state(manager)
    before = len(state.flat)
    execute_command(state, manager, DeleteTask(root))
    assert len(state.flat) == before - 3
    assert titles(state) == ["Keep"]
    assert state.current_index == 0
    assert state.status_message == f"Deleted task ID: {root}"


def test_delete_last_row_clamps_cursor(manager):
    manager.add_task("a", 90)
    last = manager.add_task("b", 10)
    state = loaded_state(manager)
    state.set_cursor(1)
    execute_command(state, manager, DeleteTask(last))
    assert state.current_index == 0


def test_adjust_priority_reorders_and_reports(manager):
    manager.add_task("a", 50)
    b = manager.add_task("b", 50)
    state = loaded_state(manager)
    assert titles(state) == ["a", "b"]
    execute_command(state, manager, AdjustPriority(b, 1))
    assert titles(state) == ["b", "a"]
    assert state.status_message == "Updated task priority: 50 -> 51"


def test_update_task(manager):
    task_id = manager.add_task("Old", 20)
    state = loaded_state(manager)
    execute_command(state, manager, UpdateTask(task_id, "New", 100))
    assert state.flat[0].task.title == "New"
    assert state.flat[0].task.priority == 100


def test_store_failure_keeps_view_and_sets_status():
    forest = build_forest([TaskRecord(id=1, title="only", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))])
    failing = FailingManager(forest)
    state = AppState()
    reload_view(state, failing)
    flat_before = state.flat
    state.mode = CreationMode(variant=CreationVariant.ROOT)
    failing.forest = build_forest([])
    execute_command(state, failing, AddTask("x", 50))
    assert state.flat is flat_before
    assert isinstance(state.mode, NormalMode)
    assert state.status_message == "Error adding task: database is locked"

    for command, prefix in [
        (UpdateTask(1, "y", 1), "Error updating task:"),
        (DeleteTask(1), "Error deleting task:"),
        (AdjustPriority(1, 1), "Error updating priority:"),
    ]:
        execute_command(state, failing, command)
        assert state.status_message.startswith(prefix)
        assert state.flat is flat_before


def test_reload_failure_keeps_previous_view():
    forest = build_forest([TaskRecord(id=1, title="only")])
    failing = FailingManager(forest)
    state = AppState()
    reload_view(state, failing)
    failing.fail_loads = True
    assert reload_view(state, failing) is False
    assert titles(state) == ["only"]
    assert state.status_message == "Error loading tasks: disk I/O error"


def test_navigation_moves_and_clamps(manager):
    for i in range(10):
        manager.add_task(f"t{i}", 90 - i)
    state = loaded_state(manager, window=4)
    execute_command(state, manager, MoveCursor(-1))
    assert state.current_index == 0
    execute_command(state, manager, JumpCursor(to_end=True))
    assert state.current_index == 9
    assert state.scroll_offset == 6
    execute_command(state, manager, MoveCursor(1))
    assert state.current_index == 9
    execute_command(state, manager, HalfPage(-1))
    assert state.current_index == 7
    execute_command(state, manager, JumpCursor(to_end=False))
    assert (state.current_index, state.scroll_offset) == (0, 0)


def test_toggle_expansion_survives_reload(manager):
    parent = manager.add_task("Parent", 90)
    manager.add_task("Child", parent_id=parent)
    manager.add_task("Other", 10)
    state = loaded_state(manager)
    execute_command(state, manager, ToggleExpansion(parent))
    assert titles(state) == ["Parent", "Other"]
    execute_command(state, manager, AddTask("Another", 5))
    assert titles(state) == ["Parent", "Other", "Another"]
    assert state.forest.get(parent).is_expanded is False
    execute_command(state, manager, ToggleExpansion(parent))
    assert titles(state) == ["Parent", "Child", "Other", "Another"]


def test_collapse_keeps_cursor_index_in_range(manager):
    parent = manager.add_task("Parent", 90)
    for i in range(3):
        manager.add_task(f"c{i}", parent_id=parent)
    state = loaded_state(manager)
    state.set_cursor(3)
    execute_command(state, manager, ToggleExpansion(parent))
    assert len(state.flat) == 1
    assert state.current_index == 0


def test_toggle_on_leaf_is_noop(manager):
    leaf = manager.add_task("Leaf")
    state = loaded_state(manager)
    flat = state.flat
    execute_command(state, manager, ToggleExpansion(leaf))
    assert state.flat is flat
