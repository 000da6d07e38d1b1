"""Task list renderer: one row per visible flat entry, read-only over AppState."""

from datetime import datetime, timedelta
from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import FlatEntry

from .constants import (
    COLLAPSED_MARKER,
    EXPANDED_MARKER,
    INDENT,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    RIGHT_INFO_RESERVE,
    SUBTASK_PREFIX,
)
from .i18n import translate
from .tui_viewport import visible_range


def format_time_ago(delta: timedelta) -> str:
    if delta < timedelta(minutes=1):
        return translate("TIME_JUST_NOW")
    if delta < timedelta(hours=1):
        return translate("TIME_MINUTES", count=int(delta.total_seconds() // 60))
    if delta < timedelta(days=1):
        return translate("TIME_HOURS", count=int(delta.total_seconds() // 3600))
    return translate("TIME_DAYS", count=delta.days)


def priority_style(priority: int) -> str:
    if priority >= PRIORITY_HIGH:
        return "class:priority.high"
    if priority >= PRIORITY_MEDIUM:
        return "class:priority.medium"
    if priority <= PRIORITY_LOW:
        return "class:priority.low"
    return "class:text"


def task_line(entry: FlatEntry) -> str:
    """Left part of a row: indentation, expansion marker, subtask prefix, title."""
    task = entry.task
    marker = ""
    if task.has_children:
        marker = EXPANDED_MARKER if task.is_expanded else COLLAPSED_MARKER
    prefix = SUBTASK_PREFIX if task.parent_id is not None else ""
    return f"{INDENT * entry.depth}{marker}{prefix}{task.title}"


def _render_row(tui, entry: FlatEntry, width: int, now: datetime, selected: bool) -> List[Tuple[str, str]]:
    task = entry.task
    row_style = "class:selected" if selected else "class:text"
    priority_text = translate("PRIORITY_LABEL", priority=task.priority)
    time_text = format_time_ago(now - task.created_at)
    right_width = tui._display_width(priority_text) + 1 + tui._display_width(time_text)

    left = tui._trim_display(task_line(entry), max(0, width - RIGHT_INFO_RESERVE))
    if width - right_width <= 0:
        return [(row_style, tui._pad_display(left, width))]
    fragments = [(row_style, tui._pad_display(left, width - right_width))]
    fragments.append((row_style if selected else priority_style(task.priority), priority_text))
    fragments.append((row_style, " "))
    fragments.append((row_style if selected else "class:time", time_text))
    return fragments


def render_task_list_text(tui) -> FormattedText:
    state = tui.state
    width = max(1, tui.get_terminal_width())
    if not state.flat:
        return FormattedText([("class:text.dim", translate("TASK_LIST_EMPTY"))])

    now = tui.now()
    start, end = visible_range(len(state.flat), state.scroll_offset, state.window_height)
    result: List[Tuple[str, str]] = []
    for idx in range(start, end):
        if idx > start:
            result.append(("", "\n"))
        result.extend(_render_row(tui, state.flat[idx], width, now, idx == state.current_index))
    return FormattedText(result)


__all__ = ["format_time_ago", "priority_style", "task_line", "render_task_list_text"]
