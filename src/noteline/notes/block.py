"""Detailed notes carried by leading quote-block children."""

import html
import logging
import re
from typing import Any, NamedTuple, Sequence, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_NOTE_BLOCK_TAG = "blockquote"

_P_OPEN = re.compile(r"<p[^>]*>", re.IGNORECASE)
_P_CLOSE = re.compile(r"</p>", re.IGNORECASE)
_BR = re.compile(r"<br\s*/?>", re.IGNORECASE)
_LI_OPEN = re.compile(r"<li[^>]*>", re.IGNORECASE)
_LI_CLOSE = re.compile(r"</li>", re.IGNORECASE)
_LIST = re.compile(r"</?[uo]l[^>]*>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]+>")

C = TypeVar("C")


class DetailedSplit(NamedTuple):
    note: str | None  # None: no leading quote child
    children: list[Any]


def block_open_re(tag: str = DEFAULT_NOTE_BLOCK_TAG) -> re.Pattern[str]:
    return re.compile(rf"^<{re.escape(tag)}(?:\s[^>]*)?>", re.IGNORECASE)


def block_wrapper_re(tag: str = DEFAULT_NOTE_BLOCK_TAG) -> re.Pattern[str]:
    """Matches a whole ``<tag ...>...</tag>`` wrapper anywhere in a string."""
    t = re.escape(tag)
    return re.compile(rf"<{t}(?:\s[^>]*)?>.*?</{t}>", re.IGNORECASE | re.DOTALL)


def extract_block_content(markup: str, tag: str = DEFAULT_NOTE_BLOCK_TAG) -> str:
    """Flatten a quote block to plain text.

    Paragraph, line-break and list-item boundaries become newlines, list
    containers and every other tag are dropped, entities are decoded. Lines
    are trimmed and blank lines removed.
    """
    t = re.escape(tag)
    text = re.sub(rf"<{t}(?:\s[^>]*)?>", "", markup, flags=re.IGNORECASE)
    text = re.sub(rf"</{t}>", "", text, flags=re.IGNORECASE)

    text = _P_CLOSE.sub("\n", _P_OPEN.sub("", text))
    text = _BR.sub("\n", text)
    text = _LI_CLOSE.sub("\n", _LI_OPEN.sub("", text))
    text = _LIST.sub("", text)
    text = _ANY_TAG.sub("", text)

    text = html.unescape(text).replace("\xa0", " ")

    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def parse_detailed_note(
    children: Sequence[C],
    tag: str = DEFAULT_NOTE_BLOCK_TAG,
) -> DetailedSplit:
    """
    Consume the leading, contiguous run of quote-block children.

    Children are anything with a ``content`` attribute. The scan stops at the
    first child whose trimmed content does not open with ``<tag>`` (or whose
    content is not a string); later quote blocks stay ordinary children.

    Returns the joined, trimmed note text ("" when every consumed block was
    empty) and the remaining children. With nothing consumed, the note is None
    and the children come back unchanged.
    """
    remaining = list(children)
    if not remaining or not tag:
        return DetailedSplit(None, remaining)

    opener = block_open_re(tag)
    parts: list[str] = []
    consumed = 0
    for child in remaining:
        content = getattr(child, "content", None)
        if not isinstance(content, str):
            break
        trimmed = content.strip()
        if not opener.match(trimmed):
            break
        parts.append(extract_block_content(trimmed, tag))
        consumed += 1

    if not consumed:
        return DetailedSplit(None, remaining)

    logger.debug("consumed %d leading <%s> children", consumed, tag)
    return DetailedSplit("\n".join(parts).strip(), remaining[consumed:])
