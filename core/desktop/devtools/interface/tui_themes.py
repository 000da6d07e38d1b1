#!/usr/bin/env python3
"""Colour themes for the task list: style classes used by the renderers."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "bg:#1f4e79 #ffffff bold",
        "status": "bg:#9ad974 #000000",
        "selected": "bg:#d7dfe6 #000000 bold",
        "priority.high": "#e06c75 bold",
        "priority.medium": "#e5c07b",
        "priority.low": "#61afef",
        "time": "#56b6c2",
        "prompt": "bg:#e5c07b #000000",
        "help": "bg:#1f4e79 #ffffff",
        "scroll": "bg:#1f4e79 #ffffff",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "bg:#0000aa #ffffff bold",
        "status": "bg:#00aa00 #000000",
        "selected": "bg:#ffffff #000000 bold",
        "priority.high": "#ff6b6b bold",
        "priority.medium": "#f0c674",
        "priority.low": "#5c9dff",
        "time": "#00d7d7",
        "prompt": "bg:#f0c674 #000000",
        "help": "bg:#0000aa #ffffff",
        "scroll": "bg:#0000aa #ffffff",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Copy of the named palette; unknown names get the default one."""
    return dict(THEMES.get(theme) or THEMES[DEFAULT_THEME])


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
