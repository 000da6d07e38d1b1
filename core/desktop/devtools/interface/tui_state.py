"""Explicit application state shared by the key loop and the renderer."""

from dataclasses import dataclass, field
from typing import List, Optional

from core import FlatEntry, Forest, Task, flatten

from .tui_modes import NORMAL, Mode, NormalMode
from .tui_viewport import adjust_scroll, clamp_index

DEFAULT_WINDOW_HEIGHT = 20


@dataclass
class AppState:
    """Everything the UI needs between two key events.

    The renderer only reads these fields. Mutations go through the key
    handler (mode and buffers) and tui_actions (cursor, scroll, forest).
    """

    forest: Forest = field(default_factory=Forest.empty)
    flat: List[FlatEntry] = field(default_factory=list)
    current_index: int = 0
    scroll_offset: int = 0
    window_height: int = DEFAULT_WINDOW_HEIGHT
    mode: Mode = NORMAL
    status_message: str = ""

    @property
    def is_normal(self) -> bool:
        return isinstance(self.mode, NormalMode)

    def selected(self) -> Optional[Task]:
        if not self.flat:
            return None
        return self.flat[clamp_index(self.current_index, len(self.flat))].task

    def install(self, forest: Forest, flat: Optional[List[FlatEntry]] = None) -> None:
        """Swap in a fully built forest (and its flat view) in one step."""
        new_flat = flatten(forest) if flat is None else flat
        self.forest, self.flat = forest, new_flat
        self.current_index = clamp_index(self.current_index, len(self.flat))
        self.rescroll()

    def reflatten(self) -> None:
        self.install(self.forest)

    def set_cursor(self, index: int) -> None:
        self.current_index = clamp_index(index, len(self.flat))
        self.rescroll()

    def set_window_height(self, height: int) -> None:
        self.window_height = max(1, height)
        self.rescroll()

    def rescroll(self) -> None:
        self.scroll_offset = adjust_scroll(len(self.flat), self.current_index, self.window_height, self.scroll_offset)

    def set_status(self, message: str) -> None:
        self.status_message = message

    def clear_status(self) -> None:
        self.status_message = ""


__all__ = ["AppState", "DEFAULT_WINDOW_HEIGHT"]
