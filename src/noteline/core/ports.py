from typing import Protocol

from .model import AnnotatedNode, PureNode


class TreeBuilder(Protocol):
    """
    Turn outline text into a content/children tree. Content may carry a
    restricted HTML subset; notes are not interpreted at this stage.
    """

    def build(self, text: str) -> PureNode:
        pass


class Annotator(Protocol):
    """
    Extract inline and detailed notes from a built tree. MUST be total:
    ambiguous input degrades to "no note", never to an exception.
    """

    def annotate(self, node: PureNode) -> AnnotatedNode:
        pass


class Exporter(Protocol):
    """
    Inverse of TreeBuilder + Annotator: re-parsing the output yields an
    equivalent annotated tree.
    """

    def export(self, node: AnnotatedNode | PureNode) -> str:
        pass
