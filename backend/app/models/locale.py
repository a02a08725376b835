"""
Locale models.

The supported locale list is configuration, not code: the engine only ever
reads it through `LocaleSettings`.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class LocaleSettings(BaseModel):
    """Read-only locale configuration consumed by the link engine."""

    supported: List[str] = Field(default_factory=list)
    neutral: str = "en"
    message_language: str = "en"

    @field_validator("supported")
    @classmethod
    def _normalize_supported(cls, value: List[str]) -> List[str]:
        seen: List[str] = []
        for code in value:
            normalized = code.strip().lower()
            if normalized and normalized not in seen:
                seen.append(normalized)
        return seen

    @field_validator("neutral", "message_language")
    @classmethod
    def _normalize_code(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("locale code must not be empty")
        return normalized

    def is_supported(self, code: str) -> bool:
        return code.lower() in self.supported


class LocaleInfo(BaseModel):
    """A supported locale with its native display name."""

    code: str
    name: str
    label: str
