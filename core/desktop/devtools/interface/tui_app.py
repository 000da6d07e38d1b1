#!/usr/bin/env python3
"""TUI application - TaskTreeTUI class wiring key events, state and layout."""

import logging
import os
from datetime import datetime, timezone
from typing import Callable, Dict

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from core.desktop.devtools.application.task_manager import TaskManager

from .constants import CHROME_ROWS
from .tui_actions import execute_command, reload_view
from .tui_display import DisplayMixin
from .tui_footer import build_footer_text
from .tui_input import Key, KeyEvent, handle_key
from .tui_render import render_task_list_text
from .tui_state import AppState
from .tui_status import build_header_text, build_status_text
from .tui_themes import DEFAULT_THEME, build_style, get_theme_palette
from .tui_viewport import window_height

logger = logging.getLogger("tasktree.tui")

FOOTER_HEIGHT = 2

_SPECIAL_KEYS: Dict[str, Key] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "enter": Key.CONFIRM,
    "escape": Key.CANCEL,
    "backspace": Key.BACKSPACE,
    "c-d": Key.HALF_PAGE_DOWN,
    "c-u": Key.HALF_PAGE_UP,
    "c-c": Key.INTERRUPT,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskTreeTUI(DisplayMixin):
    @staticmethod
    def get_theme_palette(theme: str) -> Dict[str, str]:
        return get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        manager: TaskManager,
        theme: str = DEFAULT_THEME,
        *,
        clock: Callable[[], datetime] = _utcnow,
        output=None,
        input=None,
    ):
        self.manager = manager
        self.theme_name = theme or DEFAULT_THEME
        self.style = self.build_style(self.theme_name)
        self.clock = clock
        self.state = AppState()

        kb = KeyBindings()
        kb.timeout = 0

        for name, key in _SPECIAL_KEYS.items():
            self._bind(kb, name, key)

        @kb.add(Keys.Any)
        def _(event):
            data = event.data or ""
            if len(data) != 1 or not data.isprintable():
                return
            self._dispatch(event, KeyEvent.of(data))

        self.header = Window(content=FormattedTextControl(self.get_header_text), height=1, always_hide_cursor=True)
        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.task_list = Window(content=FormattedTextControl(self.get_task_list_text), always_hide_cursor=True, wrap_lines=False)
        self.footer = Window(
            content=FormattedTextControl(self.get_footer_text),
            height=Dimension(min=FOOTER_HEIGHT, max=FOOTER_HEIGHT),
            always_hide_cursor=True,
        )
        root = HSplit([self.header, self.status_bar, self.task_list, self.footer])

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            before_render=self._sync_window_height,
            output=output,
            input=input,
        )
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKTREE_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

        self.state.set_window_height(window_height(self.get_terminal_height(), CHROME_ROWS))
        reload_view(self.state, self.manager)

    def _bind(self, kb: KeyBindings, name: str, key: Key) -> None:
        @kb.add(name, eager=True)
        def _(event):
            self._dispatch(event, KeyEvent(key))

    def _dispatch(self, event, key_event: KeyEvent) -> None:
        if self.process(key_event):
            event.app.exit()

    def process(self, key_event: KeyEvent) -> bool:
        """Run one key through the mode machine; True means quit."""
        command = handle_key(self.state, key_event)
        if command is not None:
            logger.debug("Key %s -> %r", key_event.key.value, command)
        return execute_command(self.state, self.manager, command)

    def _sync_window_height(self, app=None) -> None:
        self.state.set_window_height(window_height(self.get_terminal_height(), CHROME_ROWS))

    def get_terminal_width(self) -> int:
        try:
            return self.app.output.get_size().columns
        except (AttributeError, ValueError, OSError):
            return 80

    def get_terminal_height(self) -> int:
        try:
            return self.app.output.get_size().rows
        except (AttributeError, ValueError, OSError):
            return 24

    def now(self) -> datetime:
        return self.clock()

    def get_header_text(self) -> FormattedText:
        return build_header_text(self)

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_task_list_text(self) -> FormattedText:
        return render_task_list_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def run(self):
        self.app.run()


__all__ = ["TaskTreeTUI", "FOOTER_HEIGHT"]
