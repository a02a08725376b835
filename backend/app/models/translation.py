"""Translation file pairing models."""

from __future__ import annotations

from pydantic import BaseModel


class TranslationPathResult(BaseModel):
    """Source/translation path pair for one document."""

    original_path: str
    translation_path: str
    is_reverse_translation: bool = False  # True when resolved from the translation side


class LineComparison(BaseModel):
    """Line count comparison between a source document and its translation."""

    original_lines: int
    translation_lines: int
    is_equal: bool
    percentage: int
