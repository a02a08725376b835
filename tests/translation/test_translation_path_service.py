from __future__ import annotations

from pathlib import Path

import pytest

from backend.app.services.translation_path_service import TranslationPathError, TranslationPathService


@pytest.fixture()
def service(locale_settings) -> TranslationPathService:
    return TranslationPathService(locale_settings)


def test_source_to_translation(service) -> None:
    assert service.translation_path("/site/content/en/docs/a.md", "ko") == "/site/content/ko/docs/a.md"


def test_translation_to_source(service) -> None:
    assert service.source_path("/site/content/zh-cn/docs/a.md") == "/site/content/en/docs/a.md"


def test_counterpart_from_source_needs_target_locale(service) -> None:
    result = service.counterpart_path("/site/content/en/docs/a.md", "ja")

    assert result.original_path == "/site/content/en/docs/a.md"
    assert result.translation_path == "/site/content/ja/docs/a.md"
    assert result.is_reverse_translation is False

    with pytest.raises(TranslationPathError) as exc_info:
        service.counterpart_path("/site/content/en/docs/a.md")
    assert exc_info.value.code == "UNSUPPORTED_LANGUAGE"


def test_counterpart_from_translation_is_reverse(service) -> None:
    result = service.counterpart_path("C:\\site\\content\\ko\\docs\\a.md")

    assert result.original_path == "C:/site/content/en/docs/a.md"
    assert result.translation_path == "C:/site/content/ko/docs/a.md"
    assert result.is_reverse_translation is True


@pytest.mark.parametrize(
    "path, target, code",
    [
        ("", None, "INVALID_PATH"),
        ("/other/a.md", None, "NOT_CONTENT_PATH"),
        ("/site/content/a.md", None, "NOT_CONTENT_PATH"),
        ("/site/content/fr/docs/a.md", None, "UNSUPPORTED_LANGUAGE"),
        ("/site/content/en/docs/a.md", "fr", "UNSUPPORTED_LANGUAGE"),
    ],
)
def test_counterpart_errors_carry_codes(service, path, target, code) -> None:
    with pytest.raises(TranslationPathError) as exc_info:
        service.counterpart_path(path, target)
    assert exc_info.value.code == code


def test_compare_line_counts(service, tmp_path: Path) -> None:
    original = tmp_path / "en.md"
    translation = tmp_path / "ko.md"
    original.write_text("a\nb\nc\nd", encoding="utf-8")
    translation.write_text("가\n나\n다", encoding="utf-8")

    comparison = service.compare_line_counts(str(original), str(translation))

    assert comparison.original_lines == 4
    assert comparison.translation_lines == 3
    assert comparison.is_equal is False
    assert comparison.percentage == 75


def test_trailing_newline_counts_as_a_line(service, tmp_path: Path) -> None:
    original = tmp_path / "en.md"
    translation = tmp_path / "ko.md"
    original.write_text("a\nb\n", encoding="utf-8")
    translation.write_text("가\n나", encoding="utf-8")

    comparison = service.compare_line_counts(str(original), str(translation))

    assert (comparison.original_lines, comparison.translation_lines) == (3, 2)
    assert comparison.is_equal is False
    assert comparison.percentage == 67


def test_compare_line_counts_edge_cases(service, tmp_path: Path) -> None:
    empty = tmp_path / "empty.md"
    empty.write_text("", encoding="utf-8")
    other = tmp_path / "other.md"
    other.write_text("x\n", encoding="utf-8")

    comparison = service.compare_line_counts(str(empty), str(other))
    assert (comparison.original_lines, comparison.translation_lines) == (1, 2)
    assert comparison.percentage == 200
    assert service.compare_line_counts(str(tmp_path / "missing.md"), str(other)) is None
