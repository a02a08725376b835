"""
Locale link validation service.

Flags `/docs/` links in translated documents when a localized copy of the
link target already exists, so the link can be rewritten to `/<locale>/docs/`.

Design intent:
- Advisory only: every diagnostic is a warning, never an error.
- Conservative: a link is flagged only when the localized target exists. An
  unresolvable path, an unsupported locale or a filesystem failure drops the
  candidate silently.
- Replace semantics: each pass rebuilds a document's diagnostic list from
  scratch and swaps it into the table in one step.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from ..models.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSeverity
from ..models.links import LinkMatch, ValidationOutcome
from ..models.locale import LocaleSettings
from .existence_oracle import (
    CachingExistenceOracle,
    ExistenceOracle,
    FileSystemOracle,
    localized_resource_exists,
)
from .link_extractor import extract_links
from .locale_classifier import LocaleClassifier, normalize_path
from .messages import missing_locale_message
from .path_resolver import resolve_expected_path

logger = logging.getLogger(__name__)


class InvalidDocumentError(ValueError):
    """Raised when a document path or text is missing or not a string."""


class DiagnosticTable:
    """
    Per-document diagnostic lists keyed by normalized document path.

    Entries are only ever replaced or deleted as a whole.
    """

    def __init__(self):
        self._entries: Dict[str, List[Diagnostic]] = {}
        self._lock = threading.Lock()

    def replace(self, document_path: str, diagnostics: List[Diagnostic]) -> None:
        with self._lock:
            self._entries[normalize_path(document_path)] = list(diagnostics)

    def delete(self, document_path: str) -> None:
        with self._lock:
            self._entries.pop(normalize_path(document_path), None)

    def get(self, document_path: str) -> List[Diagnostic]:
        with self._lock:
            return list(self._entries.get(normalize_path(document_path), []))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def documents(self) -> List[str]:
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, document_path: object) -> bool:
        if not isinstance(document_path, str):
            return False
        with self._lock:
            return normalize_path(document_path) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class LinkValidationService:
    """Validate locale-missing links and own the resulting diagnostic table."""

    def __init__(
        self,
        settings: Optional[LocaleSettings] = None,
        oracle: Optional[ExistenceOracle] = None,
    ):
        if settings is None:
            from ..config import config
            settings = config.get_locale_settings()

        self.settings = settings
        self.classifier = LocaleClassifier(settings)
        self.oracle: ExistenceOracle = oracle or FileSystemOracle()
        self.diagnostics = DiagnosticTable()
        self._disposed = False

    def validate(self, document_path: str, text: str) -> int:
        """
        Validate one document and commit its diagnostics.

        Returns:
            Number of diagnostics now stored for the document.

        Raises:
            InvalidDocumentError: if `document_path` or `text` is missing.
        """
        return len(self.validate_document(document_path, text))

    def validate_document(self, document_path: str, text: str) -> List[Diagnostic]:
        """Validate one document and return the committed diagnostic list."""
        self._ensure_open()
        if not isinstance(document_path, str) or not document_path.strip():
            raise InvalidDocumentError("document path must be a non-empty string")
        if not isinstance(text, str):
            raise InvalidDocumentError(f"document text for {document_path} must be a string")

        if not self.classifier.is_translation_document(document_path):
            self.diagnostics.delete(document_path)
            return []

        locale = self.classifier.document_locale(document_path).lower()
        if not self.classifier.is_supported(locale):
            logger.debug(f"Skipping {document_path}: locale {locale!r} is not supported")
            self.diagnostics.delete(document_path)
            return []

        oracle = CachingExistenceOracle(self.oracle)
        diagnostics: List[Diagnostic] = []
        links = extract_links(text, skip=self.classifier.is_already_localized)
        for link in links:
            outcome = self.evaluate(document_path, link, locale, oracle)
            if outcome.exists:
                diagnostics.append(self._build_diagnostic(document_path, link, locale, outcome))

        self.diagnostics.replace(document_path, diagnostics)
        logger.debug(
            f"Validated {document_path}: {len(links)} candidate link(s), {len(diagnostics)} diagnostic(s)"
        )
        return list(diagnostics)

    def evaluate(
        self,
        document_path: str,
        link: LinkMatch,
        locale: str,
        oracle: Optional[ExistenceOracle] = None,
    ) -> ValidationOutcome:
        """Resolve a link's localized path and check whether it exists."""
        oracle = oracle or self.oracle
        expected_path = resolve_expected_path(document_path, link.base_path, locale)
        if expected_path is None:
            return ValidationOutcome(expected_path=None, resource_kind=link.resource_kind, exists=False)

        return ValidationOutcome(
            expected_path=expected_path,
            resource_kind=link.resource_kind,
            exists=localized_resource_exists(oracle, expected_path, link.resource_kind),
        )

    def get_diagnostics(self, document_path: str) -> List[Diagnostic]:
        return self.diagnostics.get(document_path)

    def clear(self, document_path: str) -> None:
        self.diagnostics.delete(document_path)

    def dispose(self) -> None:
        """Drop every stored diagnostic; the service cannot be used afterwards."""
        self.diagnostics.clear()
        self._disposed = True

    def _ensure_open(self) -> None:
        if self._disposed:
            raise RuntimeError("LinkValidationService has been disposed")

    def _build_diagnostic(
        self,
        document_path: str,
        link: LinkMatch,
        locale: str,
        outcome: ValidationOutcome,
    ) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.MISSING_LOCALE_PATH,
            severity=DiagnosticSeverity.WARNING,
            span=link.span,
            message=missing_locale_message(
                outcome.resource_kind,
                current=link.original_markdown,
                suggested=link.localized_markdown(locale),
                language=self.settings.message_language,
            ),
            document_path=normalize_path(document_path),
            locale=locale,
            resource_kind=outcome.resource_kind,
            expected_path=outcome.expected_path,
            link=link,
        )
