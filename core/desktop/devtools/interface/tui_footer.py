"""Footer renderer for TaskTreeTUI: input prompts or the scroll indicator."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from .i18n import translate
from .tui_modes import CreationMode, CreationVariant, EditMode, TITLE_STEP
from .tui_viewport import visible_range


def prompt_text(mode) -> str:
    if isinstance(mode, EditMode):
        return translate("PROMPT_EDIT", buffer=mode.buffer)
    if isinstance(mode, CreationMode):
        subtask = mode.variant is CreationVariant.SUBTASK
        if mode.step == TITLE_STEP:
            key = "PROMPT_SUBTASK_TITLE" if subtask else "PROMPT_ADD_TITLE"
        else:
            key = "PROMPT_SUBTASK_PRIORITY" if subtask else "PROMPT_ADD_PRIORITY"
        return translate(key, title=mode.title_buffer, priority=mode.priority_buffer)
    return ""


def scroll_info_text(state) -> str:
    total = len(state.flat)
    if total <= state.window_height:
        return ""
    start, end = visible_range(total, state.scroll_offset, state.window_height)
    return translate("SCROLL_INFO", start=start + 1, end=end, total=total)


def build_footer_text(tui) -> FormattedText:
    state = tui.state
    width = max(1, tui.get_terminal_width())
    parts: List[Tuple[str, str]] = []
    if not state.is_normal:
        prompt = prompt_text(state.mode)
        parts.append(("class:prompt", tui._pad_display(prompt, width)))
        parts.append(("", "\n"))
        parts.append(("class:help", tui._pad_display(translate("HELP_CONFIRM"), width)))
        return FormattedText(parts)

    info = scroll_info_text(state)
    if info:
        parts.append(("class:scroll", tui._trim_display(info, width)))
    return FormattedText(parts)


__all__ = ["prompt_text", "scroll_info_text", "build_footer_text"]
