"""Walks a built outline tree and attaches inline and detailed notes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..core.markup import DEFAULT_ALLOWED_TAGS, foreign_markup_re
from ..core.model import DEFAULT_SEPARATORS, AnnotatedNode, PureNode, SeparatorConfig
from ..core.ports import Annotator
from .block import (
    DEFAULT_NOTE_BLOCK_TAG,
    block_wrapper_re,
    extract_block_content,
    parse_detailed_note,
)
from .inline import parse_inline_note

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    content: str
    inline_note: str | None
    detailed_note: str | None
    pending: list[PureNode]
    built: list[AnnotatedNode] = field(default_factory=list)
    index: int = 0


class NodeAnnotator(Annotator):
    def __init__(
        self,
        separators: SeparatorConfig = DEFAULT_SEPARATORS,
        allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS,
        note_block_tag: str = DEFAULT_NOTE_BLOCK_TAG,
    ):
        self.separators = separators
        self.allowed_tags = frozenset(t.lower() for t in allowed_tags)
        self.note_block_tag = note_block_tag
        self._foreign = foreign_markup_re(self.allowed_tags | {note_block_tag})
        self._wrapper = block_wrapper_re(note_block_tag)

    @property
    def blocks_enabled(self) -> bool:
        return bool(self.separators.note_block and self.note_block_tag)

    def annotate(self, node: PureNode) -> AnnotatedNode:
        """Annotate ``node`` and its whole subtree.

        Uses an explicit stack: children are annotated after their parent's
        own notes are extracted, and a node is assembled once all of its
        remaining children are done.
        """
        stack = [self._open(node)]
        while True:
            frame = stack[-1]
            if frame.index < len(frame.pending):
                child = frame.pending[frame.index]
                frame.index += 1
                stack.append(self._open(child))
                continue

            stack.pop()
            done = AnnotatedNode(
                content=frame.content,
                inline_note=frame.inline_note,
                detailed_note=frame.detailed_note,
                children=tuple(frame.built),
            )
            if not stack:
                return done
            stack[-1].built.append(done)

    def _open(self, node: PureNode) -> _Frame:
        content = node.content or ""
        children = list(node.children)
        sep = self.separators

        if self._foreign.search(content):
            logger.debug("skipping note parsing for markup content %.40r", content)
            return _Frame(content, None, None, children)

        detailed: str | None = None
        if self.blocks_enabled and self._wrapper.search(content):
            blocks = self._wrapper.findall(content)
            content = self._wrapper.sub("", content).strip()
            detailed = "\n".join(
                extract_block_content(b, self.note_block_tag) for b in blocks
            ).strip()

        main, inline = parse_inline_note(content, sep.note, sep.escape)

        if self.blocks_enabled:
            lead = parse_detailed_note(children, self.note_block_tag)
            if lead.note is not None:
                detailed = lead.note if detailed is None else _join(detailed, lead.note)
                children = lead.children

        return _Frame(main, inline, detailed, children)


def _join(*parts: str) -> str:
    return "\n".join(p for p in parts if p)


def annotate_tree(
    root: PureNode, separators: SeparatorConfig | None = None
) -> AnnotatedNode:
    """Annotate ``root`` with a one-off annotator."""
    return NodeAnnotator(separators or DEFAULT_SEPARATORS).annotate(root)
