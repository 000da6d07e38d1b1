from core.desktop.devtools.interface.constants import MESSAGES


def translate(key: str, **kwargs) -> str:
    """Look up a user-visible message and fill in its fields; unknown keys come back as-is."""
    template = MESSAGES.get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError):
        return template


__all__ = ["translate"]
