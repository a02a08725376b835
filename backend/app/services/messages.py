"""
Diagnostic message templates.

Messages are available in English, Korean and Japanese; unknown languages fall
back to English.
"""

from __future__ import annotations

from typing import Dict

from ..models.links import ResourceKind

DEFAULT_LANGUAGE = "en"

_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "resource.file": "file",
        "resource.folder": "folder",
        "warning": (
            "A translated {resource} exists but the link is missing its locale path.\n"
            "Current: {current}\n"
            "Suggested: {suggested}"
        ),
        "action.title": "Add locale path: /{locale}/docs/...",
    },
    "ko": {
        "resource.file": "파일",
        "resource.folder": "폴더",
        "warning": (
            "⚠️ 번역 {resource}이 존재하는데 언어 경로가 누락되었습니다.\n"
            "현재: {current}\n"
            "권장: {suggested}"
        ),
        "action.title": "언어 경로 추가: /{locale}/docs/...",
    },
    "ja": {
        "resource.file": "ファイル",
        "resource.folder": "フォルダ",
        "warning": (
            "翻訳済みの{resource}が存在しますが、リンクに言語パスがありません。\n"
            "現在: {current}\n"
            "推奨: {suggested}"
        ),
        "action.title": "言語パスを追加: /{locale}/docs/...",
    },
}


def _catalog(language: str) -> Dict[str, str]:
    return _MESSAGES.get((language or DEFAULT_LANGUAGE).lower(), _MESSAGES[DEFAULT_LANGUAGE])


def resource_label(kind: ResourceKind, language: str = DEFAULT_LANGUAGE) -> str:
    return _catalog(language)[f"resource.{kind.value}"]


def missing_locale_message(
    kind: ResourceKind,
    current: str,
    suggested: str,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    return _catalog(language)["warning"].format(
        resource=resource_label(kind, language),
        current=current,
        suggested=suggested,
    )


def fix_action_title(locale: str, language: str = DEFAULT_LANGUAGE) -> str:
    return _catalog(language)["action.title"].format(locale=locale.lower())
