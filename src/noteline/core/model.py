from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class SeparatorConfig:
    node: str = "-"  # outline item marker
    note: str = ":"  # splits main content from inline note
    note_block: str = ">"  # prefixes detailed-note lines
    escape: str = "\\"

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> SeparatorConfig:
        """
        Merge caller overrides over the defaults.

        Missing or None fields keep their default; an empty string is kept and
        disables the corresponding feature. Both ``note_block`` and the
        camel-cased ``noteBlock`` key are accepted.
        """
        if not overrides:
            return DEFAULT_SEPARATORS
        values: dict[str, str] = {}
        for key, value in overrides.items():
            if key == "noteBlock":
                key = "note_block"
            if key in _SEPARATOR_FIELDS and value is not None:
                values[key] = value
        return replace(DEFAULT_SEPARATORS, **values)

    def with_overrides(self, **overrides: str | None) -> SeparatorConfig:
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_SEPARATOR_FIELDS = ("node", "note", "note_block", "escape")

DEFAULT_SEPARATORS = SeparatorConfig()


@dataclass(frozen=True)
class PureNode:
    content: str
    children: tuple[PureNode, ...] = ()


@dataclass(frozen=True)
class AnnotatedNode:
    content: str
    inline_note: str | None = None  # "" means separator present, note empty
    detailed_note: str | None = None
    children: tuple[AnnotatedNode, ...] = field(default_factory=tuple)

    @property
    def has_note(self) -> bool:
        return self.inline_note is not None or self.detailed_note is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the field names rendering collaborators expect."""
        out: dict[str, Any] = {"content": self.content}
        if self.has_note:
            out["inlineNote"] = self.inline_note
            out["detailedNote"] = self.detailed_note
            out["hasNote"] = True
        out["children"] = [child.to_dict() for child in self.children]
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnnotatedNode:
        # hasNote is ignored on input; it is always derived from the notes
        return cls(
            content=data.get("content") or "",
            inline_note=data.get("inlineNote"),
            detailed_note=data.get("detailedNote"),
            children=tuple(cls.from_dict(c) for c in data.get("children") or ()),
        )
