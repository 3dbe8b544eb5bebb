import logging
from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from ..core.model import DEFAULT_SEPARATORS, PureNode, SeparatorConfig
from ..core.ports import TreeBuilder
from ..core.tree import clean_node
from .yaml_codec import YamlFrontmatter

logger = logging.getLogger(__name__)

_NATIVE_BULLETS = ("-", "*", "+")
_NATIVE_QUOTE = ">"
_LIST_TYPES = ("bullet_list", "ordered_list")


@dataclass
class _Draft:
    content: str
    children: list["_Draft"] = field(default_factory=list)

    def freeze(self) -> PureNode:
        return PureNode(self.content, tuple(c.freeze() for c in self.children))


def create_markdown() -> MarkdownIt:
    """CommonMark renderer that leaves backslash escapes in the text.

    Note separators are escaped with a configurable token; Markdown's own
    backslash escaping would strip it before the annotator sees it.
    """
    md = MarkdownIt("commonmark")
    md.disable("escape")
    return md


class OutlineBuilder(TreeBuilder):
    """
    Outline text -> PureNode tree.

    Headings nest by level, list items become nodes holding their first
    paragraph's inline HTML, quote blocks become child nodes holding their
    rendered ``<blockquote>`` HTML. Custom node/block markers from the
    separator config are mapped onto Markdown bullets and quotes first.
    """

    def __init__(
        self,
        separators: SeparatorConfig = DEFAULT_SEPARATORS,
        frontmatter: YamlFrontmatter | None = None,
    ):
        self.separators = separators
        self.frontmatter = frontmatter or YamlFrontmatter()
        self.md = create_markdown()

    def build(self, text: str) -> PureNode:
        meta, body = self.frontmatter.decode(text)
        body = self.normalize_markers(body)

        tree = SyntaxTreeNode(self.md.parse(body))
        root = _Draft("")
        # (heading level, draft); the root sits below every heading level
        headings: list[tuple[int, _Draft]] = [(0, root)]
        for block in tree.children:
            if block.type == "heading":
                level = int(block.tag[1:])
                while headings[-1][0] >= level:
                    headings.pop()
                draft = _Draft(self._inline(block))
                headings[-1][1].children.append(draft)
                headings.append((level, draft))
            else:
                self._add_block(block, headings[-1][1])

        node = clean_node(root.freeze())
        if not node.content and meta.get("title"):
            node = PureNode(f"{meta['title']}", node.children)
        logger.debug("built outline with %d top-level nodes", len(node.children))
        return node

    def normalize_markers(self, text: str) -> str:
        """Rewrite custom node/block markers into Markdown list and quote syntax."""
        sep = self.separators
        node_marker = sep.node if sep.node and sep.node not in _NATIVE_BULLETS else ""
        block_marker = sep.note_block if sep.note_block and sep.note_block != _NATIVE_QUOTE else ""
        if not node_marker and not block_marker:
            return text

        out = []
        for line in text.split("\n"):
            stripped = line.lstrip(" ")
            lead = line[: len(line) - len(stripped)]
            if block_marker and _starts_token(stripped, block_marker):
                line = lead + _NATIVE_QUOTE + stripped[len(block_marker):]
            elif node_marker and stripped.startswith(node_marker + " "):
                line = lead + "-" + stripped[len(node_marker):]
            out.append(line)
        return "\n".join(out)

    def _add_block(self, block: SyntaxTreeNode, parent: _Draft) -> None:
        if block.type in _LIST_TYPES:
            for item in block.children:
                parent.children.append(self._list_item(item))
        elif block.type == "paragraph":
            parent.children.append(_Draft(self._inline(block)))
        elif block.type == "hr":
            return
        else:
            # quote blocks, code, raw html, nested headings: keep rendered markup
            parent.children.append(_Draft(self._render(block)))

    def _list_item(self, item: SyntaxTreeNode) -> _Draft:
        draft = _Draft("")
        blocks = list(item.children)
        if blocks and blocks[0].type == "paragraph":
            draft.content = self._inline(blocks.pop(0))
        for block in blocks:
            self._add_block(block, draft)
        return draft

    def _inline(self, block: SyntaxTreeNode) -> str:
        inline = next((c for c in block.children if c.type == "inline"), None)
        if inline is None or inline.token is None:
            return ""
        return self.md.renderer.renderInline(
            inline.token.children or [], self.md.options, {}
        ).strip()

    def _render(self, block: SyntaxTreeNode) -> str:
        return self.md.renderer.render(block.to_tokens(), self.md.options, {}).strip()


def _starts_token(line: str, token: str) -> bool:
    if not line.startswith(token):
        return False
    rest = line[len(token):]
    return not rest or rest[0] in " \t"
