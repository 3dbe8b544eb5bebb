"""Serialize annotated trees back to outline text."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.escape import add_escape
from ..core.markup import DEFAULT_ALLOWED_TAGS, foreign_markup_re
from ..core.model import DEFAULT_SEPARATORS, AnnotatedNode, PureNode, SeparatorConfig
from ..core.ports import Exporter

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "  "


class MarkdownExporter(Exporter):
    """
    Emits one ``<indent><marker> <content>`` line per node, with the inline
    note on the same line and the detailed note as quote lines one level
    deeper, followed by the children.

    Re-parsing the output with the same separators gives back an equivalent
    annotated tree. Content holding tags outside ``allowed_tags`` was never
    unescaped by the annotator and is written back verbatim.
    """

    def __init__(
        self,
        separators: SeparatorConfig = DEFAULT_SEPARATORS,
        indent: str = DEFAULT_INDENT,
        allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS,
        note_block_tag: str = "blockquote",
    ):
        self.separators = separators
        self.indent = indent
        allowed = frozenset(t.lower() for t in allowed_tags)
        self._foreign = foreign_markup_re(allowed | {note_block_tag})

    def export(self, node: AnnotatedNode | PureNode) -> str:
        lines: list[str] = []
        stack: list[tuple[AnnotatedNode | PureNode, int]] = [(node, 0)]
        while stack:
            current, depth = stack.pop()
            child_depth = depth + 1
            if self._is_blank(current):
                # promote the children of an empty wrapper
                child_depth = depth
            else:
                lines.extend(self._node_lines(current, depth))
            for child in reversed(current.children):
                stack.append((child, child_depth))

        logger.debug("exported %d lines", len(lines))
        return "\n".join(lines)

    def _is_blank(self, node: AnnotatedNode | PureNode) -> bool:
        return (
            not (node.content or "").strip()
            and getattr(node, "inline_note", None) is None
            and getattr(node, "detailed_note", None) is None
        )

    def _escape(self, text: str) -> str:
        # escape tokens first, so the ones added for separators stay single
        sep = self.separators
        text = add_escape(text, sep.escape, sep.escape)
        return add_escape(text, sep.note, sep.escape)

    def _content(self, content: str) -> str:
        if self._foreign.search(content):
            return content
        return self._escape(content)

    def _node_lines(self, node: AnnotatedNode | PureNode, depth: int) -> list[str]:
        sep = self.separators
        prefix = self.indent * depth
        if sep.node:
            prefix += sep.node + " "

        line = prefix + self._content(node.content or "")
        inline = getattr(node, "inline_note", None)
        if inline is not None and sep.note:
            if sep.escape and line.endswith(sep.escape):
                # keep a trailing escaped escape from swallowing the separator
                line += " "
            line += sep.note
            if inline:
                line += " " + self._escape(inline)
        out = [line]

        detailed = getattr(node, "detailed_note", None)
        if detailed is not None and sep.note_block:
            note_prefix = self.indent * (depth + 1) + sep.note_block
            for note_line in detailed.split("\n"):
                note_line = note_line.strip()
                out.append(f"{note_prefix} {note_line}" if note_line else note_prefix)
        return out


def export_to_markdown(
    node: AnnotatedNode | PureNode,
    separators: SeparatorConfig | None = None,
    indent: str = DEFAULT_INDENT,
) -> str:
    return MarkdownExporter(separators or DEFAULT_SEPARATORS, indent).export(node)
