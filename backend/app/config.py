"""
Configuration management for LingoAssist.

Handles loading project-level configuration: supported locales, the neutral
(source) locale, the language used for diagnostic messages and the default
content root scanned by the CLI and API.

Configuration priority (highest to lowest):
1. Environment variables (for CI and container deployments)
2. config.json file (for local development)
3. Built-in defaults
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .models.locale import LocaleSettings

logger = logging.getLogger(__name__)

# Config file path at project root
CONFIG_FILE = Path(__file__).parent.parent.parent / "config.json"

# Default values (used when neither env var nor config.json specifies)
DEFAULT_NEUTRAL_LOCALE = "en"
DEFAULT_SUPPORTED_LOCALES = [
    "ko", "ja", "zh-cn", "zh", "fr", "de", "es", "it",
    "pt-br", "ru", "uk", "pl", "hi", "vi", "id",
]
DEFAULT_MESSAGE_LANGUAGE = "en"
DEFAULT_CONTENT_ROOT = "content"


class Config:
    """
    Project-level configuration manager.

    Priority: ENV > config.json > defaults

    Environment variables:
      - LINGOASSIST_LOCALES: comma separated list of supported locale codes
      - LINGOASSIST_NEUTRAL_LOCALE: the untranslated source locale
      - LINGOASSIST_MESSAGE_LANGUAGE: language of diagnostic messages (en, ko, ja)
      - LINGOASSIST_CONTENT_ROOT: content directory holding <locale>/docs trees
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.data = self.load()

    def load(self) -> Dict[str, Any]:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_file}: {e}")
                return self._default_config()
        else:
            return self._default_config()

    def _default_config(self) -> Dict[str, Any]:
        """Return default configuration."""
        return {
            "locales": {
                "supported": list(DEFAULT_SUPPORTED_LOCALES),
                "neutral": DEFAULT_NEUTRAL_LOCALE,
            },
            "messages": {
                "language": DEFAULT_MESSAGE_LANGUAGE,
            },
        }

    def get_supported_locales(self) -> List[str]:
        """
        Get the ordered list of supported locale codes.

        Priority: LINGOASSIST_LOCALES env var > config.json > default
        """
        env_locales = os.getenv('LINGOASSIST_LOCALES')
        if env_locales:
            return [code.strip() for code in env_locales.split(",") if code.strip()]

        configured = self.data.get("locales", {}).get("supported")
        if configured:
            return list(configured)

        return list(DEFAULT_SUPPORTED_LOCALES)

    def get_neutral_locale(self) -> str:
        """Get the neutral locale (ENV > config.json > default)."""
        env_neutral = os.getenv('LINGOASSIST_NEUTRAL_LOCALE')
        if env_neutral:
            return env_neutral

        return self.data.get("locales", {}).get("neutral", DEFAULT_NEUTRAL_LOCALE)

    def get_message_language(self) -> str:
        """Get the language diagnostic messages are rendered in (ENV > config.json > default)."""
        env_language = os.getenv('LINGOASSIST_MESSAGE_LANGUAGE')
        if env_language:
            return env_language

        return self.data.get("messages", {}).get("language", DEFAULT_MESSAGE_LANGUAGE)

    def get_content_root(self) -> str:
        """Get the content root directory (ENV > config.json > default)."""
        env_path = os.getenv('LINGOASSIST_CONTENT_ROOT')
        if env_path:
            return env_path

        config_path = self.data.get('paths', {}).get('content_root')
        if config_path:
            return config_path

        return DEFAULT_CONTENT_ROOT

    def get_locale_settings(self) -> LocaleSettings:
        """Build the validated locale settings consumed by the link engine."""
        return LocaleSettings(
            supported=self.get_supported_locales(),
            neutral=self.get_neutral_locale(),
            message_language=self.get_message_language(),
        )


# Global config instance
config = Config()
