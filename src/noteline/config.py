"""Configuration loader for noteline.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .core.model import DEFAULT_SEPARATORS, SeparatorConfig
from .core.markup import DEFAULT_ALLOWED_TAGS

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_FILENAME = "noteline.toml"


@dataclass
class AnnotateConfig:
    """Annotator configuration."""
    allowed_tags: frozenset[str] = DEFAULT_ALLOWED_TAGS


@dataclass
class ExportConfig:
    """Markdown export configuration."""
    indent: int = 2


@dataclass
class NotelineConfig:
    """Complete noteline configuration."""
    separators: SeparatorConfig = DEFAULT_SEPARATORS
    annotate: AnnotateConfig = field(default_factory=AnnotateConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    source: Path | None = None


def _string_field(data: dict[str, Any], key: str, section: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"[{section}] {key} must be a string, got {type(value).__name__}")
    return value


def load_config(
    config_path: Path | None = None,
    search_dir: Path | None = None,
    overrides: dict[str, str | None] | None = None,
) -> NotelineConfig:
    """
    Load configuration from noteline.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/noteline.toml
    3. search_dir/noteline.toml

    Args:
        config_path: Explicit path to config file
        search_dir: Directory of the outline being processed, for fallback search
        overrides: Separator values that win over the file (e.g. CLI flags)

    Returns:
        NotelineConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}
    source = None

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)
    if search_dir:
        search_paths.append(search_dir / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            source = path
            break

    # Parse separators
    sep_data = toml_data.get("separators", {})
    file_values = {
        "node": _string_field(sep_data, "node", "separators"),
        "note": _string_field(sep_data, "note", "separators"),
        "note_block": _string_field(sep_data, "note_block", "separators"),
        "escape": _string_field(sep_data, "escape", "separators"),
    }
    separators = SeparatorConfig.from_overrides(file_values)
    if overrides:
        separators = separators.with_overrides(**overrides)

    # Parse annotate config; listed tags extend the defaults
    annotate_data = toml_data.get("annotate", {})
    extra_tags = annotate_data.get("allowed_tags", [])
    if not isinstance(extra_tags, list) or not all(isinstance(t, str) for t in extra_tags):
        raise ValueError("[annotate] allowed_tags must be a list of strings")
    annotate_config = AnnotateConfig(
        allowed_tags=DEFAULT_ALLOWED_TAGS | {t.lower() for t in extra_tags}
    )

    # Parse export config
    export_data = toml_data.get("export", {})
    indent = export_data.get("indent", 2)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 2:
        raise ValueError("[export] indent must be an integer of at least 2")
    export_config = ExportConfig(indent=indent)

    return NotelineConfig(
        separators=separators,
        annotate=annotate_config,
        export=export_config,
        source=source,
    )
