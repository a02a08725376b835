from __future__ import annotations

import json
from pathlib import Path

from backend.app.config import DEFAULT_SUPPORTED_LOCALES, Config


def test_defaults_without_config_file(tmp_path: Path, monkeypatch) -> None:
    for name in ("LINGOASSIST_LOCALES", "LINGOASSIST_NEUTRAL_LOCALE", "LINGOASSIST_MESSAGE_LANGUAGE", "LINGOASSIST_CONTENT_ROOT"):
        monkeypatch.delenv(name, raising=False)

    cfg = Config(config_file=tmp_path / "config.json")

    assert cfg.get_supported_locales() == DEFAULT_SUPPORTED_LOCALES
    assert cfg.get_neutral_locale() == "en"
    assert cfg.get_message_language() == "en"
    assert cfg.get_content_root() == "content"


def test_config_file_values(tmp_path: Path, monkeypatch) -> None:
    for name in ("LINGOASSIST_LOCALES", "LINGOASSIST_NEUTRAL_LOCALE", "LINGOASSIST_MESSAGE_LANGUAGE", "LINGOASSIST_CONTENT_ROOT"):
        monkeypatch.delenv(name, raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({
            "locales": {"supported": ["ko", "JA"], "neutral": "en"},
            "messages": {"language": "ko"},
            "paths": {"content_root": "/srv/site/content"},
        }),
        encoding="utf-8",
    )

    settings = Config(config_file=config_file).get_locale_settings()

    assert settings.supported == ["ko", "ja"]
    assert settings.message_language == "ko"
    assert Config(config_file=config_file).get_content_root() == "/srv/site/content"


def test_env_overrides_config_file(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"locales": {"supported": ["ko"]}}), encoding="utf-8")
    monkeypatch.setenv("LINGOASSIST_LOCALES", "fr, de ,")
    monkeypatch.setenv("LINGOASSIST_NEUTRAL_LOCALE", "ja")

    cfg = Config(config_file=config_file)

    assert cfg.get_supported_locales() == ["fr", "de"]
    assert cfg.get_locale_settings().neutral == "ja"


def test_unreadable_config_falls_back_to_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("LINGOASSIST_LOCALES", raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")

    assert Config(config_file=config_file).get_supported_locales() == DEFAULT_SUPPORTED_LOCALES
