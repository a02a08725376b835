"""Services for the LingoAssist link engine."""

from .link_fix_service import LinkFixService
from .link_validation_service import InvalidDocumentError, LinkValidationService
from .translation_path_service import TranslationPathError, TranslationPathService

__all__ = [
    "InvalidDocumentError",
    "LinkFixService",
    "LinkValidationService",
    "TranslationPathError",
    "TranslationPathService",
]
