"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.markdown_builder import OutlineBuilder
from .config import NotelineConfig, load_config
from .core.model import AnnotatedNode, PureNode
from .core.tree import count_nodes, node_depths
from .export.markdown import MarkdownExporter
from .notes.annotator import NodeAnnotator


@dataclass
class RoundTripReport:
    """Outcome of parse -> export -> parse on one outline."""
    original: AnnotatedNode
    exported: str
    reparsed: AnnotatedNode

    @property
    def trees_equal(self) -> bool:
        return self.original == self.reparsed

    @property
    def counts_equal(self) -> bool:
        return count_nodes(self.original) == count_nodes(self.reparsed)

    @property
    def depths_equal(self) -> bool:
        return node_depths(self.original) == node_depths(self.reparsed)

    @property
    def ok(self) -> bool:
        return self.trees_equal and self.counts_equal and self.depths_equal


@dataclass
class Runtime:
    """Container for all wired components."""
    builder: OutlineBuilder
    annotator: NodeAnnotator
    exporter: MarkdownExporter
    config: NotelineConfig

    def parse(self, text: str) -> AnnotatedNode:
        return self.annotator.annotate(self.builder.build(text))

    def export(self, root: AnnotatedNode | PureNode) -> str:
        return self.exporter.export(root)

    def round_trip(self, text: str) -> RoundTripReport:
        original = self.parse(text)
        exported = self.export(original)
        return RoundTripReport(original, exported, self.parse(exported))


def runtime_from_config(config: NotelineConfig) -> Runtime:
    separators = config.separators
    return Runtime(
        builder=OutlineBuilder(separators),
        annotator=NodeAnnotator(separators, allowed_tags=config.annotate.allowed_tags),
        exporter=MarkdownExporter(
            separators,
            indent=" " * config.export.indent,
            allowed_tags=config.annotate.allowed_tags,
        ),
        config=config,
    )


def build_runtime(
    config_path: Path | None = None,
    search_dir: Path | None = None,
    overrides: dict[str, str | None] | None = None,
) -> Runtime:
    """Build and wire all components from configuration."""
    config = load_config(
        config_path=config_path, search_dir=search_dir, overrides=overrides
    )
    return runtime_from_config(config)
