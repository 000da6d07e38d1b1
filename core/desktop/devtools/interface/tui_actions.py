"""Apply commands from the key handler to AppState and the task store."""

import logging
from typing import Optional

from application.ports import StoreError
from core.desktop.devtools.application.task_manager import TaskManager

from .i18n import translate
from .tui_commands import (
    AddTask,
    AdjustPriority,
    Command,
    DeleteTask,
    HalfPage,
    JumpCursor,
    MoveCursor,
    Quit,
    ToggleExpansion,
    UpdateTask,
)
from .tui_modes import NORMAL
from .tui_state import AppState
from .tui_viewport import half_page_jump

logger = logging.getLogger("tasktree.tui")


def reload_view(state: AppState, manager: TaskManager) -> bool:
    """Rebuild forest and flat view from the store, then swap them in.

    On failure the previous view stays in place and the status line says why.
    """
    try:
        forest = manager.load_forest(collapsed=state.forest.collapsed_ids())
    except StoreError as exc:
        logger.warning("Reload failed: %s", exc)
        state.set_status(translate("ERR_RELOAD", error=exc))
        return False
    state.install(forest)
    return True


def _apply_navigation(state: AppState, command: Command) -> None:
    if isinstance(command, MoveCursor):
        state.set_cursor(state.current_index + command.delta)
    elif isinstance(command, JumpCursor):
        state.set_cursor(len(state.flat) - 1 if command.to_end else 0)
    elif isinstance(command, HalfPage):
        state.set_cursor(half_page_jump(len(state.flat), state.current_index, state.window_height, command.direction))
    elif isinstance(command, ToggleExpansion):
        task = state.forest.get(command.task_id)
        if task is None or not task.has_children:
            return
        task.is_expanded = not task.is_expanded
        state.reflatten()


def _apply_store_command(state: AppState, manager: TaskManager, command: Command) -> None:
    if isinstance(command, AddTask):
        error_key = "ERR_ADD"
    elif isinstance(command, UpdateTask):
        error_key = "ERR_UPDATE"
    elif isinstance(command, DeleteTask):
        error_key = "ERR_DELETE"
    else:
        error_key = "ERR_PRIORITY"

    try:
        if isinstance(command, AddTask):
            task_id = manager.add_task(command.title, command.priority, command.parent_id)
            message = translate("STATUS_ADDED", title=command.title, task_id=task_id)
        elif isinstance(command, UpdateTask):
            manager.update_task(command.task_id, command.title, command.priority)
            message = translate("STATUS_UPDATED", task_id=command.task_id)
        elif isinstance(command, DeleteTask):
            manager.delete_task(command.task_id)
            message = translate("STATUS_DELETED", task_id=command.task_id)
        else:
            old, new = manager.adjust_priority(command.task_id, command.delta)
            message = translate("STATUS_PRIORITY", old=old, new=new)
    except (StoreError, ValueError) as exc:
        logger.warning("Command %r failed: %s", command, exc)
        state.mode = NORMAL
        state.set_status(translate(error_key, error=exc))
        return

    state.set_status(message)
    reload_view(state, manager)


def execute_command(state: AppState, manager: TaskManager, command: Optional[Command]) -> bool:
    """Apply ``command``; returns True when the application should quit."""
    if command is None:
        return False
    if isinstance(command, Quit):
        return True
    if isinstance(command, (AddTask, UpdateTask, DeleteTask, AdjustPriority)):
        _apply_store_command(state, manager, command)
    else:
        _apply_navigation(state, command)
    return False


__all__ = ["execute_command", "reload_view"]
