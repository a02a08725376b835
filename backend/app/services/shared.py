"""
Shared service instances to ensure consistency across API endpoints.

The link validation service owns the per-document diagnostic table, so every
endpoint must talk to the same instance.
"""

from ..config import config
from .link_fix_service import LinkFixService
from .link_validation_service import LinkValidationService
from .translation_path_service import TranslationPathService

locale_settings = config.get_locale_settings()

link_validation_service = LinkValidationService(settings=locale_settings)
link_fix_service = LinkFixService(message_language=locale_settings.message_language)
translation_path_service = TranslationPathService(settings=locale_settings)

__all__ = ["link_validation_service", "link_fix_service", "translation_path_service"]
