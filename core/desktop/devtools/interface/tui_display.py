"""Column-width helpers for the TUI: wide glyphs count double, combining marks zero."""

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    # wcwidth returns -1 for control characters
    return max(0, wcwidth(ch) or 0)


class DisplayMixin:
    """Terminal-column aware trimming and padding used by every renderer."""

    @staticmethod
    def _display_width(text: str) -> int:
        return sum(char_width(ch) for ch in text)

    def _trim_display(self, text: str, width: int) -> str:
        """Longest prefix of ``text`` that fits in ``width`` columns."""
        used = 0
        for pos, ch in enumerate(text):
            used += char_width(ch)
            if used > width:
                return text[:pos]
        return text

    def _pad_display(self, text: str, width: int) -> str:
        trimmed = self._trim_display(text, width)
        return trimmed + " " * max(0, width - self._display_width(trimmed))


__all__ = ["DisplayMixin", "char_width"]
