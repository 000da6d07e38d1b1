"""Header and status line builders for TaskTreeTUI."""

from prompt_toolkit.formatted_text import FormattedText

from .i18n import translate


def build_header_text(tui) -> FormattedText:
    width = max(1, tui.get_terminal_width())
    return FormattedText([("class:header", tui._pad_display(translate("HEADER_HELP"), width))])


def build_status_text(tui) -> FormattedText:
    message = tui.state.status_message
    if not message:
        return FormattedText([])
    width = max(1, tui.get_terminal_width())
    return FormattedText([("class:status", tui._trim_display(message, width))])


__all__ = ["build_header_text", "build_status_text"]
