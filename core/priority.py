"""Priority bounds and the parsing rules used by the creation and edit prompts."""

import re
from typing import Optional

PRIORITY_MIN = 1
PRIORITY_MAX = 100
DEFAULT_PRIORITY = 50

_INT_RE = re.compile(r"[+-]?[0-9]+")


def clamp_priority(value: int) -> int:
    return max(PRIORITY_MIN, min(PRIORITY_MAX, int(value)))


def parse_int(text: str) -> Optional[int]:
    """Parse a plain ASCII decimal integer, tolerating surrounding whitespace.

    Returns None for anything else (empty input, words, ``1_0``, ``4.5``,
    full-width or Arabic-Indic digits).
    """
    token = (text or "").strip()
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def creation_priority(text: str) -> int:
    """Priority typed in the creation prompt; empty, invalid or out of range → default."""
    value = parse_int(text)
    if value is None or not PRIORITY_MIN <= value <= PRIORITY_MAX:
        return DEFAULT_PRIORITY
    return value


def edit_priority(text: str, previous: int) -> int:
    """Priority typed in the edit buffer; unparseable keeps ``previous``, result is clamped."""
    value = parse_int(text)
    if value is None:
        value = previous
    return clamp_priority(value)


__all__ = [
    "PRIORITY_MIN",
    "PRIORITY_MAX",
    "DEFAULT_PRIORITY",
    "clamp_priority",
    "parse_int",
    "creation_priority",
    "edit_priority",
]
