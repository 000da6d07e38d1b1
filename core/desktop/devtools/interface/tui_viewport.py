"""Viewport/scroll helpers for the task list.

Pure functions over (total rows, cursor, window height, offset) so the same
rules serve navigation, expand/collapse, reloads and terminal resizes.
"""

from typing import Tuple


def window_height(terminal_rows: int, chrome_rows: int) -> int:
    """Rows left for the task list once header/status/footer are drawn."""
    return max(1, terminal_rows - chrome_rows)


def clamp_index(index: int, total: int) -> int:
    if total <= 0:
        return 0
    return max(0, min(index, total - 1))


def adjust_scroll(total: int, current: int, window: int, offset: int) -> int:
    """Return the scroll offset that keeps ``current`` inside the window."""
    window = max(1, window)
    if current < offset:
        offset = current
    elif current >= offset + window:
        offset = current - window + 1
    max_offset = max(0, total - window)
    return max(0, min(offset, max_offset))


def half_page_jump(total: int, current: int, window: int, direction: int) -> int:
    """Move the cursor half a window up (direction < 0) or down (> 0)."""
    step = max(1, window) // 2
    if direction < 0:
        step = -step
    return clamp_index(current + step, total)


def visible_range(total: int, offset: int, window: int) -> Tuple[int, int]:
    start = max(0, min(offset, max(0, total - max(1, window))))
    end = min(total, start + max(1, window))
    return start, end


__all__ = ["window_height", "clamp_index", "adjust_scroll", "half_page_jump", "visible_range"]
