"""noteline - escape-aware note annotations for outline trees."""

from .core.escape import add_escape, remove_escape
from .core.model import DEFAULT_SEPARATORS, AnnotatedNode, PureNode, SeparatorConfig
from .export.markdown import MarkdownExporter, export_to_markdown
from .notes import NodeAnnotator, parse_detailed_note, parse_inline_note

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "add_escape",
    "remove_escape",
    "DEFAULT_SEPARATORS",
    "AnnotatedNode",
    "PureNode",
    "SeparatorConfig",
    "MarkdownExporter",
    "export_to_markdown",
    "NodeAnnotator",
    "parse_detailed_note",
    "parse_inline_note",
]
