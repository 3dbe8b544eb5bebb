from .markdown import MarkdownExporter, export_to_markdown

__all__ = ["MarkdownExporter", "export_to_markdown"]
