"""Modal key handling: classifies key events against the active mode.

``handle_key`` updates the mode and its buffers in place and returns the
command to apply (or None). It never touches the store, the forest or the
cursor; tui_actions does that.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from core import creation_priority, edit_priority

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
from .tui_modes import (
    NORMAL,
    PRIORITY_STEP,
    TITLE_STEP,
    CreationMode,
    CreationVariant,
    EditMode,
    NormalMode,
)
from .tui_state import AppState


class Key(Enum):
    CHAR = "char"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    BACKSPACE = "backspace"
    SPACE = "space"
    HALF_PAGE_DOWN = "half_page_down"
    HALF_PAGE_UP = "half_page_up"
    INTERRUPT = "interrupt"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        if char == " ":
            return cls(Key.SPACE, " ")
        return cls(Key.CHAR, char)


def _typed_text(event: KeyEvent) -> Optional[str]:
    if event.key is Key.SPACE:
        return " "
    if event.key is Key.CHAR and event.char:
        return event.char
    return None


# ---- normal mode ----

def _start_creation(state: AppState, variant: CreationVariant) -> None:
    parent_id = None
    if variant is CreationVariant.SUBTASK:
        parent_id = state.selected().id
    state.mode = CreationMode(variant=variant, parent_id=parent_id)


def _start_edit(state: AppState) -> None:
    task = state.selected()
    state.mode = EditMode(target_id=task.id, buffer=f"{task.title}:{task.priority}", original_priority=task.priority)


def _handle_normal(state: AppState, event: KeyEvent) -> Optional[Command]:
    state.clear_status()
    key = event.key
    if key is Key.INTERRUPT:
        return Quit()
    if key is Key.DOWN:
        return MoveCursor(1)
    if key is Key.UP:
        return MoveCursor(-1)
    if key is Key.HALF_PAGE_DOWN:
        return HalfPage(1)
    if key is Key.HALF_PAGE_UP:
        return HalfPage(-1)

    task = state.selected()
    if key is Key.SPACE:
        if task is not None and task.has_children:
            return ToggleExpansion(task.id)
        return None
    if key is not Key.CHAR:
        return None

    ch = event.char
    if ch == "q":
        return Quit()
    if ch == "j":
        return MoveCursor(1)
    if ch == "k":
        return MoveCursor(-1)
    if ch == "g":
        return JumpCursor(to_end=False)
    if ch == "G":
        return JumpCursor(to_end=True)
    if ch == "a":
        _start_creation(state, CreationVariant.ROOT)
        return None
    if task is None:
        return None
    if ch == "J":
        return AdjustPriority(task.id, -1)
    if ch == "K":
        return AdjustPriority(task.id, 1)
    if ch == "s":
        _start_creation(state, CreationVariant.SUBTASK)
    elif ch == "e":
        _start_edit(state)
    elif ch == "d":
        return DeleteTask(task.id)
    return None


# ---- creation mode ----

def _handle_creation(state: AppState, event: KeyEvent) -> Optional[Command]:
    mode: CreationMode = state.mode
    key = event.key
    if key is Key.INTERRUPT:
        return Quit()
    if key is Key.CANCEL:
        state.mode = NORMAL
        return None
    if key is Key.BACKSPACE:
        mode.set_active_buffer(mode.active_buffer[:-1])
        return None
    if key is Key.CONFIRM:
        if mode.step == TITLE_STEP:
            if not mode.title_buffer.strip():
                state.set_status(translate("ERR_EMPTY_TITLE"))
                return None
            mode.step = PRIORITY_STEP
            return None
        state.mode = NORMAL
        return AddTask(
            title=mode.title_buffer.strip(),
            priority=creation_priority(mode.priority_buffer),
            parent_id=mode.parent_id if mode.variant is CreationVariant.SUBTASK else None,
        )
    text = _typed_text(event)
    if text is not None:
        mode.set_active_buffer(mode.active_buffer + text)
    return None


# ---- edit mode ----

def _parse_edit(mode: EditMode):
    parts = mode.buffer.split(":", 1)
    if len(parts) != 2:
        return None
    title = parts[0].strip()
    priority = edit_priority(parts[1], mode.original_priority)
    return title, priority


def _handle_edit(state: AppState, event: KeyEvent) -> Optional[Command]:
    mode: EditMode = state.mode
    key = event.key
    if key is Key.INTERRUPT:
        return Quit()
    if key is Key.CANCEL:
        state.mode = NORMAL
        return None
    if key is Key.BACKSPACE:
        mode.buffer = mode.buffer[:-1]
        return None
    if key is Key.CONFIRM:
        state.mode = NORMAL
        parsed = _parse_edit(mode)
        if parsed is None:
            return None
        title, priority = parsed
        if not title:
            state.set_status(translate("ERR_EMPTY_TITLE"))
            return None
        return UpdateTask(mode.target_id, title, priority)
    text = _typed_text(event)
    if text is not None:
        mode.buffer += text
    return None


_HANDLERS: Dict[type, Callable[[AppState, KeyEvent], Optional[Command]]] = {
    NormalMode: _handle_normal,
    CreationMode: _handle_creation,
    EditMode: _handle_edit,
}


def handle_key(state: AppState, event: KeyEvent) -> Optional[Command]:
    return _HANDLERS[type(state.mode)](state, event)


__all__ = ["Key", "KeyEvent", "handle_key"]
