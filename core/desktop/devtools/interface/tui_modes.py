"""Input modes: exactly one is active and each carries only its own buffers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class CreationVariant(Enum):
    ROOT = "add"
    SUBTASK = "addsubtask"


TITLE_STEP = 0
PRIORITY_STEP = 1


@dataclass(frozen=True)
class NormalMode:
    pass


@dataclass
class CreationMode:
    variant: CreationVariant
    step: int = TITLE_STEP
    title_buffer: str = ""
    priority_buffer: str = ""
    parent_id: Optional[int] = None

    @property
    def active_buffer(self) -> str:
        return self.title_buffer if self.step == TITLE_STEP else self.priority_buffer

    def set_active_buffer(self, value: str) -> None:
        if self.step == TITLE_STEP:
            self.title_buffer = value
        else:
            self.priority_buffer = value


@dataclass
class EditMode:
    target_id: int
    buffer: str
    original_priority: int


Mode = Union[NormalMode, CreationMode, EditMode]

NORMAL = NormalMode()


__all__ = [
    "CreationVariant",
    "TITLE_STEP",
    "PRIORITY_STEP",
    "NormalMode",
    "CreationMode",
    "EditMode",
    "Mode",
    "NORMAL",
]
