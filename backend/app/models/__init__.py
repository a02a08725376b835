"""Data models for the LingoAssist link engine."""

from .diagnostics import CodeAction, Diagnostic, DiagnosticKind, DiagnosticSeverity, LinkFix
from .links import LinkMatch, ResourceKind, TextSpan, ValidationOutcome
from .locale import LocaleInfo, LocaleSettings

__all__ = [
    "CodeAction",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSeverity",
    "LinkFix",
    "LinkMatch",
    "ResourceKind",
    "TextSpan",
    "ValidationOutcome",
    "LocaleInfo",
    "LocaleSettings",
]
