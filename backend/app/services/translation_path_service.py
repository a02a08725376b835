"""
Translation path pairing.

Maps a document in the neutral tree (`content/en/...`) to its translation in
`content/<locale>/...` and back, and compares line counts between the two so
translators can spot sections that drifted.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from ..models.locale import LocaleSettings
from ..models.translation import LineComparison, TranslationPathResult
from .locale_classifier import normalize_path

logger = logging.getLogger(__name__)

_CONTENT_LOCALE_RE = re.compile(r"/content/([^/]+)/")


def _line_count(text: str) -> int:
    # Every "\n" starts a new line, so a trailing newline counts an empty last line
    return text.count("\n") + 1


class TranslationPathError(ValueError):
    """Raised when a path cannot be paired with a translation counterpart."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class TranslationPathService:
    """Pair source and translation documents by swapping the locale segment."""

    def __init__(self, settings: Optional[LocaleSettings] = None):
        if settings is None:
            from ..config import config
            settings = config.get_locale_settings()
        self.settings = settings

    def extract_locale(self, path: str) -> Optional[str]:
        match = _CONTENT_LOCALE_RE.search(normalize_path(path))
        return match.group(1) if match else None

    def translation_path(self, source_path: str, target_locale: str) -> str:
        """`.../content/en/docs/a.md` -> `.../content/<target>/docs/a.md`."""
        normalized = self._validated(source_path)
        neutral_segment = f"/content/{self.settings.neutral}/"
        if neutral_segment not in normalized:
            raise TranslationPathError(f"Not a {self.settings.neutral} source path: {source_path}", "UNSUPPORTED_STRUCTURE")
        if not self.settings.is_supported(target_locale):
            raise TranslationPathError(f"Unsupported language: {target_locale}", "UNSUPPORTED_LANGUAGE")
        return normalized.replace(neutral_segment, f"/content/{target_locale.lower()}/", 1)

    def source_path(self, translation_path: str) -> str:
        """`.../content/<locale>/docs/a.md` -> `.../content/en/docs/a.md`."""
        normalized = self._validated(translation_path)
        locale = self.extract_locale(normalized)
        if not locale or locale == self.settings.neutral:
            raise TranslationPathError(f"Not a translation path: {translation_path}", "UNSUPPORTED_STRUCTURE")
        if not self.settings.is_supported(locale):
            raise TranslationPathError(f"Unsupported language: {locale}", "UNSUPPORTED_LANGUAGE")
        return normalized.replace(f"/content/{locale}/", f"/content/{self.settings.neutral}/", 1)

    def counterpart_path(self, path: str, target_locale: Optional[str] = None) -> TranslationPathResult:
        """
        Resolve the other side of a source/translation pair.

        A neutral-locale path needs `target_locale`; a translated path maps
        back to the neutral tree and ignores it.
        """
        normalized = self._validated(path)
        locale = self.extract_locale(normalized)
        if locale is None:
            raise TranslationPathError(f"Not a content path: {path}", "NOT_CONTENT_PATH")

        if locale == self.settings.neutral:
            if not target_locale:
                raise TranslationPathError("A target locale is required for a source document", "UNSUPPORTED_LANGUAGE")
            return TranslationPathResult(
                original_path=normalized,
                translation_path=self.translation_path(normalized, target_locale),
                is_reverse_translation=False,
            )

        return TranslationPathResult(
            original_path=self.source_path(normalized),
            translation_path=normalized,
            is_reverse_translation=True,
        )

    def compare_line_counts(self, original_path: str, translation_path: str) -> Optional[LineComparison]:
        """Compare line counts; None when either file is missing or unreadable."""
        original = Path(original_path)
        translation = Path(translation_path)
        if not original.is_file() or not translation.is_file():
            return None

        try:
            original_lines = _line_count(original.read_text(encoding="utf-8"))
            translation_lines = _line_count(translation.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to compare line counts for {original_path} / {translation_path}: {e}")
            return None

        # Round half up (Python's round() would round half to even)
        percentage = int(translation_lines * 100 / original_lines + 0.5) if original_lines else 0
        return LineComparison(
            original_lines=original_lines,
            translation_lines=translation_lines,
            is_equal=original_lines == translation_lines,
            percentage=percentage,
        )

    @staticmethod
    def _validated(path: str) -> str:
        if not isinstance(path, str) or not path.strip():
            raise TranslationPathError("Invalid file path", "INVALID_PATH")
        normalized = normalize_path(path)
        if "/content/" not in normalized:
            raise TranslationPathError(f"Not a content path: {path}", "NOT_CONTENT_PATH")
        return normalized
