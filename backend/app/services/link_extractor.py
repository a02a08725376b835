"""
Markdown link extraction for `/docs/`-rooted links.

Only links of the exact shape `[display](/docs/<target>)` are candidates.
The grammar is strict: the display text cannot contain brackets or a newline
and the target cannot contain parentheses or a newline, so a link missing a
closing bracket or paren never partially matches.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional

from ..models.links import LinkMatch, TextSpan
from .locale_classifier import looks_localized

DOCS_LINK_PATTERN = r"\[([^\[\]\n]*)\]\(/docs/([^()\n]*)\)"


def extract_links(text: str, skip: Callable[[str], bool] = looks_localized) -> List[LinkMatch]:
    """
    Return every locale-missing `/docs/` link in document order.

    Args:
        text: full document text
        skip: predicate on the raw target; matching candidates are left out.
            Defaults to dropping targets that already start with a locale segment.
    """
    # Fresh iterator per call: no cursor state survives between calls.
    links: List[LinkMatch] = []
    for match in re.finditer(DOCS_LINK_PATTERN, text):
        raw_target = match.group(2)
        if skip(raw_target):
            continue
        links.append(
            LinkMatch(
                display_text=match.group(1),
                raw_target=raw_target,
                span=TextSpan.from_offsets(text, match.start(), match.end()),
            )
        )
    return links


def parse_link(fragment: str) -> Optional[re.Match]:
    """Match `fragment` in full against the link grammar, or return None."""
    return re.fullmatch(DOCS_LINK_PATTERN, fragment)
