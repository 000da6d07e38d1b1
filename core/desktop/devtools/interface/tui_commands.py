"""Commands emitted by the key handler and applied by tui_actions."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class MoveCursor:
    delta: int


@dataclass(frozen=True)
class JumpCursor:
    to_end: bool


@dataclass(frozen=True)
class HalfPage:
    direction: int


@dataclass(frozen=True)
class ToggleExpansion:
    task_id: int


@dataclass(frozen=True)
class AddTask:
    title: str
    priority: int
    parent_id: Optional[int] = None


@dataclass(frozen=True)
class UpdateTask:
    task_id: int
    title: str
    priority: int


@dataclass(frozen=True)
class DeleteTask:
    task_id: int


@dataclass(frozen=True)
class AdjustPriority:
    task_id: int
    delta: int


NavigationCommand = Union[MoveCursor, JumpCursor, HalfPage, ToggleExpansion]
StoreCommand = Union[AddTask, UpdateTask, DeleteTask, AdjustPriority]
Command = Union[Quit, NavigationCommand, StoreCommand]


__all__ = [
    "Quit",
    "MoveCursor",
    "JumpCursor",
    "HalfPage",
    "ToggleExpansion",
    "AddTask",
    "UpdateTask",
    "DeleteTask",
    "AdjustPriority",
    "NavigationCommand",
    "StoreCommand",
    "Command",
]
