"""Escape codec for separator tokens."""

import re

DEFAULT_ESCAPE = "\\"


def add_escape(text: str, marker: str, escape: str = DEFAULT_ESCAPE) -> str:
    """
    Insert ``escape`` before every literal occurrence of ``marker``.

    Occurrences are found by plain substring scan; markers that contain the
    escape token themselves get no special treatment.

    Examples:
        >>> add_escape("Hello: World", ":")
        'Hello\\\\: World'
        >>> add_escape("a||b", "||", "~")
        'a~||b'
    """
    if not text or not marker or not escape:
        return text
    return text.replace(marker, escape + marker)


def remove_escape(text: str, escape: str = DEFAULT_ESCAPE) -> str:
    """
    Drop each escape token and keep the character that follows it verbatim.

    The following character is copied even when it is not a separator. A
    trailing escape token with nothing after it is left in place.

    Examples:
        >>> remove_escape("Hello\\\\: World")
        'Hello: World'
        >>> remove_escape("end\\\\")
        'end\\\\'
    """
    if not text or not escape:
        return text
    return re.sub(re.escape(escape) + r"(.)", r"\1", text, flags=re.DOTALL)
