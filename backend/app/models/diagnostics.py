"""
Diagnostic models (advisory link findings and their quick-fixes).

These models are the API surface between the link engine and whatever publishes
diagnostics (CLI output, HTTP API, an editor host).
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .links import LinkMatch, ResourceKind, TextSpan

DIAGNOSTIC_SOURCE = "LingoAssist"


class DiagnosticSeverity(str, Enum):
    """Severity level for diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticKind(str, Enum):
    """Closed set of diagnostic families produced by this engine."""

    MISSING_LOCALE_PATH = "missing-locale-path"

    @property
    def source(self) -> str:
        return DIAGNOSTIC_SOURCE

    @property
    def code(self) -> str:
        return self.value


class Diagnostic(BaseModel):
    """A locale-missing link whose localized target exists."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind = DiagnosticKind.MISSING_LOCALE_PATH
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    span: TextSpan
    message: str

    document_path: str
    locale: str
    resource_kind: ResourceKind
    expected_path: str
    link: LinkMatch

    @property
    def source(self) -> str:
        return self.kind.source

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def suggestion(self) -> str:
        return self.link.localized_markdown(self.locale)


class LinkFix(BaseModel):
    """A single text edit applied to the same document the diagnostic belongs to."""

    model_config = ConfigDict(frozen=True)

    span: TextSpan
    replacement_text: str


class CodeAction(BaseModel):
    """A quick-fix offered for one diagnostic."""

    title: str
    fix: LinkFix
    is_preferred: bool = True
    diagnostics: List[Diagnostic] = Field(default_factory=list)
