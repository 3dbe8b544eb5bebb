"""Restricted HTML subset that note parsing tolerates inside node content."""

import re
from typing import Iterable

# Tags that may appear in content without suppressing note parsing.
DEFAULT_ALLOWED_TAGS = frozenset(
    {"blockquote", "p", "br", "ul", "ol", "li", "strong", "em", "b", "i"}
)


def foreign_markup_re(allowed_tags: Iterable[str]) -> re.Pattern[str]:
    """Matches an opening tag whose name is not in ``allowed_tags``."""
    names = "|".join(sorted(re.escape(t) for t in allowed_tags if t))
    if not names:
        return re.compile(r"<[a-z][^>]*>", re.IGNORECASE)
    return re.compile(rf"<(?!/?(?:{names})\b)[a-z][^>]*>", re.IGNORECASE)
