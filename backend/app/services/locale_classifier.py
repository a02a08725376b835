"""
Locale classification for document paths and link targets.

Two questions are answered here, both from configuration alone (no I/O):
- Is a document a translation document (`.../content/<locale>/docs/...` with a
  non-neutral locale)?
- Does a link target already carry a locale segment?
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..models.locale import LocaleInfo, LocaleSettings

# `<anything>/content/<locale>/docs/` with the locale captured
CONTENT_DOCS_RE = re.compile(r"/content/([^/]+)/docs/")
_TWO_LETTER_SEGMENT_RE = re.compile(r"^[a-z]{2}/")

LANGUAGE_NAMES = {
    "en": "English",
    "ko": "한국어",
    "ja": "日本語",
    "zh-cn": "中文(简体)",
    "zh": "中文(繁体)",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "it": "Italiano",
    "pt-br": "Português",
    "ru": "Русский",
    "uk": "Українська",
    "pl": "Polski",
    "hi": "हिन्दी",
    "vi": "Việt Nam",
    "id": "Indonesia",
}


def normalize_path(path: str) -> str:
    """Use forward slashes regardless of the host OS."""
    return path.replace("\\", "/")


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code.lower(), code.upper())


def looks_localized(raw_path: str, neutral: str = "en", known: Iterable[str] = ()) -> bool:
    """
    True if a link target starts with a locale-looking segment.

    Two lowercase letters, the neutral code, or any of `known` (which covers
    region-qualified codes such as `zh-cn/`), followed by `/`.
    """
    if _TWO_LETTER_SEGMENT_RE.match(raw_path):
        return True
    first_segment, separator, _ = raw_path.partition("/")
    if not separator:
        return False
    return first_segment == neutral or first_segment in known


class LocaleClassifier:
    """Locale decisions backed by a `LocaleSettings` configuration."""

    def __init__(self, settings: LocaleSettings):
        self.settings = settings

    @property
    def neutral(self) -> str:
        return self.settings.neutral

    def is_supported(self, code: Optional[str]) -> bool:
        return bool(code) and self.settings.is_supported(code)

    def document_locale(self, document_path: Optional[str]) -> Optional[str]:
        """Return the `<locale>` segment of a content-tree path, if any."""
        if not document_path:
            return None
        match = CONTENT_DOCS_RE.search(normalize_path(document_path))
        return match.group(1) if match else None

    def is_translation_document(self, document_path: Optional[str]) -> bool:
        locale = self.document_locale(document_path)
        return locale is not None and locale.lower() != self.neutral

    def is_already_localized(self, raw_path: str) -> bool:
        # Whether the locale is actually supported does not matter here.
        return looks_localized(raw_path, neutral=self.neutral, known=self.settings.supported)

    def supported_locales(self) -> List[LocaleInfo]:
        return [
            LocaleInfo(code=code, name=language_name(code), label=f"{language_name(code)} ({code})")
            for code in self.settings.supported
        ]
