"""Note extraction for outline trees."""

from .annotator import DEFAULT_ALLOWED_TAGS, NodeAnnotator, annotate_tree
from .block import DetailedSplit, extract_block_content, parse_detailed_note
from .inline import InlineSplit, parse_inline_note

__all__ = [
    "DEFAULT_ALLOWED_TAGS",
    "NodeAnnotator",
    "annotate_tree",
    "DetailedSplit",
    "extract_block_content",
    "parse_detailed_note",
    "InlineSplit",
    "parse_inline_note",
]
