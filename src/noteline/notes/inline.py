"""Inline note splitting: ``Title: short note``."""

from typing import NamedTuple

from ..core.escape import DEFAULT_ESCAPE, remove_escape

DEFAULT_NOTE_SEPARATOR = ":"


class InlineSplit(NamedTuple):
    main: str
    note: str | None  # None: no separator; "": separator with nothing after it


def find_unescaped(text: str, token: str, escape: str = DEFAULT_ESCAPE) -> int:
    """
    Index of the first occurrence of ``token`` not directly preceded by
    ``escape``, or -1.

    Escaped occurrences are skipped as whole tokens, so a multi-character
    separator is never matched halfway through an escaped one.
    """
    if not token:
        return -1
    i = 0
    n = len(token)
    while i < len(text):
        if text.startswith(token, i):
            if escape and i > 0 and text[i - len(escape):i] == escape:
                i += n
                continue
            return i
        i += 1
    return -1


def parse_inline_note(
    content: str,
    separator: str = DEFAULT_NOTE_SEPARATOR,
    escape: str = DEFAULT_ESCAPE,
) -> InlineSplit:
    """Split ``content`` at the first unescaped ``separator``.

    Both halves are trimmed, then unescaped independently. Without a split
    point the whole content (unescaped) is the main part and ``note`` is None.
    An empty separator disables splitting and returns ``content`` unchanged.

    Examples:
        >>> parse_inline_note("Title: Note")
        InlineSplit(main='Title', note='Note')
        >>> parse_inline_note("A: B: C")
        InlineSplit(main='A', note='B: C')
        >>> parse_inline_note("Title:")
        InlineSplit(main='Title', note='')
    """
    if not content or not separator:
        return InlineSplit(content, None)

    idx = find_unescaped(content, separator, escape)
    if idx == -1:
        return InlineSplit(remove_escape(content, escape), None)

    main = content[:idx]
    note = content[idx + len(separator):]
    return InlineSplit(
        remove_escape(main.strip(), escape),
        remove_escape(note.strip(), escape),
    )
