"""
Quick-fix generation for locale-missing link diagnostics.

Fixes are rebuilt from the document text at the diagnostic's span rather than
from the cached link: if the text there no longer parses as a `/docs/` link
(the user edited it since validation), no fix is produced.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..models.diagnostics import CodeAction, Diagnostic, DiagnosticKind, LinkFix
from .link_extractor import parse_link
from .messages import DEFAULT_LANGUAGE, fix_action_title

logger = logging.getLogger(__name__)


def filter_link_diagnostics(diagnostics: Iterable[object]) -> List[Diagnostic]:
    """Keep only the diagnostics this engine knows how to fix."""
    return [
        d for d in diagnostics
        if isinstance(d, Diagnostic) and d.kind is DiagnosticKind.MISSING_LOCALE_PATH
    ]


class LinkFixService:
    """Build and apply locale-path quick-fixes."""

    def __init__(self, message_language: str = DEFAULT_LANGUAGE):
        self.message_language = message_language

    def build_fix(self, document_text: str, diagnostic: Diagnostic) -> Optional[LinkFix]:
        """
        Rebuild the replacement for one diagnostic.

        Returns:
            The edit `[text](/<locale>/docs/<target>)` over the diagnostic span,
            or None when the span no longer holds a matching link.
        """
        if not isinstance(document_text, str) or not diagnostic.locale:
            return None

        span = diagnostic.span
        if span.start > span.end or span.end > len(document_text):
            return None

        match = parse_link(document_text[span.start:span.end])
        if match is None:
            logger.debug(f"Stale diagnostic span {span.start}-{span.end} in {diagnostic.document_path}")
            return None

        display_text, raw_target = match.group(1), match.group(2)
        return LinkFix(
            span=span,
            replacement_text=f"[{display_text}](/{diagnostic.locale.lower()}/docs/{raw_target})",
        )

    def code_actions(self, document_text: str, diagnostics: Iterable[object]) -> List[CodeAction]:
        """One preferred quick-fix per fixable diagnostic."""
        actions: List[CodeAction] = []
        for diagnostic in filter_link_diagnostics(diagnostics):
            fix = self.build_fix(document_text, diagnostic)
            if fix is None:
                continue
            actions.append(
                CodeAction(
                    title=fix_action_title(diagnostic.locale, self.message_language),
                    fix=fix,
                    is_preferred=True,
                    diagnostics=[diagnostic],
                )
            )
        return actions

    @staticmethod
    def apply_fixes(document_text: str, fixes: Iterable[LinkFix]) -> str:
        """
        Apply non-overlapping fixes to the text.

        Raises:
            ValueError: if two fixes overlap or a span is out of range.
        """
        ordered = sorted(fixes, key=lambda f: f.span.start, reverse=True)
        for later, earlier in zip(ordered, ordered[1:]):
            if earlier.span.overlaps(later.span):
                raise ValueError(
                    f"Overlapping fixes at {earlier.span.start}-{earlier.span.end} "
                    f"and {later.span.start}-{later.span.end}"
                )

        fixed = document_text
        for fix in ordered:
            if fix.span.end > len(fixed):
                raise ValueError(f"Fix span {fix.span.start}-{fix.span.end} is outside the document")
            fixed = fixed[:fix.span.start] + fix.replacement_text + fixed[fix.span.end:]
        return fixed
