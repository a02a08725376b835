"""
Localized path resolution.

Given the path of the document being validated and a link's base path
(fragment already stripped), compute where the localized copy of the link
target would live on disk:

    <root>/content/<current>/docs/page.md  +  concepts/overview  +  ko
        -> <root>/content/ko/docs/concepts/overview.md

Rules:
- A base path ending in `/` is a folder link and is returned as-is (with the
  trailing separator) so the caller checks for a directory.
- Any other base path gets the markdown extension appended unless it already
  ends with it.
"""

from __future__ import annotations

import logging
import posixpath
import re
from typing import Optional, Tuple

from .locale_classifier import normalize_path

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"

_CONTENT_ROOT_RE = re.compile(r"^(.*)/content/[^/]+/docs/")


def split_fragment(raw_target: str) -> Tuple[str, Optional[str]]:
    """Split `path#fragment` into (`path`, `fragment`); fragment is None when absent."""
    base, separator, fragment = raw_target.partition("#")
    return base, (fragment if separator else None)


def content_root(document_path: str) -> Optional[str]:
    """Everything before `/content/` in a `.../content/<locale>/docs/...` path."""
    match = _CONTENT_ROOT_RE.match(normalize_path(document_path))
    return match.group(1) if match else None


def resolve_expected_path(document_path: Optional[str], base_path: Optional[str], locale: Optional[str]) -> Optional[str]:
    """
    Compute the expected localized path for a link, or None if it cannot be resolved.

    Args:
        document_path: filesystem path of the document containing the link
        base_path: link target after `/docs/`, without any `#fragment`
        locale: locale whose tree the link should point into
    """
    if not document_path or not base_path or not locale:
        return None

    try:
        root = content_root(document_path)
        if root is None:
            return None

        is_folder = base_path.endswith("/")
        base_path = base_path.lstrip("/")
        if not base_path:
            return None
        joined = posixpath.normpath(
            posixpath.join(f"{root}/content", locale.lower(), "docs", base_path)
        )
        if is_folder:
            return joined + "/"

        if not joined.endswith(MARKDOWN_EXTENSION):
            joined += MARKDOWN_EXTENSION
        return joined
    except Exception as e:
        logger.warning(f"Failed to build expected translation path for {base_path!r} in {document_path!r}: {e}")
        return None


def folder_fallback_file(expected_folder_path: str) -> str:
    """`.../docs/tutorials/` -> `.../docs/tutorials.md`."""
    return expected_folder_path.rstrip("/") + MARKDOWN_EXTENSION
