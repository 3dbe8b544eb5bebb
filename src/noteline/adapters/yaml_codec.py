import io
import json
import re
from typing import Any

import yaml

from ..core.model import AnnotatedNode

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter:
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        m = _FM.match(text)
        if not m:
            return {}, text
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError:
            # not frontmatter after all; leave the text to the outline parser
            return {}, text
        if not isinstance(fm, dict):
            return {}, text
        return fm, text[m.end():]

    def encode(self, meta: dict[str, Any]) -> str:
        if not meta:
            return ""
        buf = io.StringIO()
        yaml.safe_dump(meta, buf, sort_keys=False, allow_unicode=True)
        return f"---\n{buf.getvalue()}---\n"


def dump_tree(root: AnnotatedNode, fmt: str = "json") -> str:
    """Render an annotated tree as JSON or YAML for other tools to consume."""
    data = root.to_dict()
    if fmt == "yaml":
        buf = io.StringIO()
        yaml.safe_dump(data, buf, sort_keys=False, allow_unicode=True)
        return buf.getvalue()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown tree format: {fmt}")


def load_tree(text: str) -> AnnotatedNode:
    """Inverse of dump_tree; YAML is a superset of JSON so one loader serves both."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Tree document must be a mapping")
    return AnnotatedNode.from_dict(data)
