"""
Check translated docs for `/docs/` links that should carry a locale segment.

Walks `<root>/<locale>/docs/**/*.md` for every supported locale (or just the
ones given with --locale) and reports each link whose localized target exists:

    lingoassist-links --root content
    lingoassist-links --root content --locale ko --fix

The root must be the `content` directory itself, since document locales are
read from the `.../content/<locale>/docs/...` part of each path. Files that
cannot be read as UTF-8 are skipped with a warning.

Exit status is 1 when diagnostics remain, 2 for an unsupported --locale or
a root that is not a `content` directory, 0 otherwise.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from backend.app.config import config
from backend.app.models.diagnostics import Diagnostic
from backend.app.services.link_fix_service import LinkFixService
from backend.app.services.link_validation_service import LinkValidationService

logger = logging.getLogger(__name__)


def iter_translation_files(content_root: Path, locales: Iterable[str]) -> List[Path]:
    files: List[Path] = []
    for locale in locales:
        docs_dir = content_root / locale / "docs"
        if docs_dir.is_dir():
            files.extend(sorted(docs_dir.rglob("*.md")))
    return files


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    summary = diagnostic.message.replace("\n", " | ")
    return f"{path}:{diagnostic.span.start_line}:{diagnostic.span.start_column + 1}: {summary}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingoassist-links",
        description="Flag /docs/ links in translated docs whose localized target exists.",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="content directory holding <locale>/docs trees (default: configured content root)",
    )
    parser.add_argument(
        "--locale",
        action="append",
        default=None,
        help="only check this locale (repeatable)",
    )
    parser.add_argument("--fix", action="store_true", help="rewrite flagged links in place")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = config.get_locale_settings()
    content_root = Path(args.root or config.get_content_root()).resolve()
    if content_root.name != "content":
        print(f"Content root must be a directory named 'content': {content_root}")
        return 2

    locales = [code.lower() for code in args.locale] if args.locale else settings.supported

    unsupported = [code for code in locales if not settings.is_supported(code)]
    if unsupported:
        print(f"Unsupported locale(s): {', '.join(unsupported)}")
        return 2

    validator = LinkValidationService(settings=settings)
    fixer = LinkFixService(message_language=settings.message_language)

    remaining = 0
    fixed_files = 0
    skipped = 0
    for md in iter_translation_files(content_root, locales):
        try:
            text = md.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable file {md}: {e}")
            skipped += 1
            continue

        diagnostics = validator.validate_document(md.as_posix(), text)
        if not diagnostics:
            continue

        if args.fix:
            actions = fixer.code_actions(text, diagnostics)
            if actions:
                md.write_text(fixer.apply_fixes(text, [a.fix for a in actions]), encoding="utf-8")
                fixed_files += 1
                logger.info(f"Fixed {len(actions)} link(s) in {md}")
            diagnostics = validator.validate_document(md.as_posix(), md.read_text(encoding="utf-8"))

        for diagnostic in diagnostics:
            print(format_diagnostic(md.relative_to(content_root), diagnostic))
        remaining += len(diagnostics)

    validator.dispose()

    if skipped:
        print(f"Skipped {skipped} unreadable file(s).")
    if args.fix and fixed_files:
        print(f"Fixed links in {fixed_files} file(s).")
    if remaining:
        print(f"Found {remaining} link(s) missing a locale path.")
        return 1

    print("OK: no locale-missing links with existing translations.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
