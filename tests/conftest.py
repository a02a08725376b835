"""
Pytest configuration for LingoAssist.

Why this exists:
- The test suite imports backend modules using `backend.app.*`.
- Depending on pytest import mode / environment, the repository root may not be on `sys.path`,
  which makes `import backend...` fail during collection.

This file ensures the repo root is available on `sys.path` for all tests in a deterministic way,
and provides the shared locale settings / fake filesystem used by the link engine tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Set, Tuple

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Ensure the repository root is importable (so `import backend.app...` works).
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.app.models.links import ResourceKind  # noqa: E402
from backend.app.models.locale import LocaleSettings  # noqa: E402


class FakeOracle:
    """In-memory existence oracle that records every query."""

    def __init__(self, files=(), folders=()):
        self.files: Set[str] = set(files)
        self.folders: Set[str] = set(folders)
        self.queries: List[Tuple[str, ResourceKind]] = []

    def exists(self, path: str, kind: ResourceKind) -> bool:
        self.queries.append((path, kind))
        if kind == ResourceKind.FOLDER:
            return path in self.folders
        return path in self.files


@pytest.fixture()
def locale_settings() -> LocaleSettings:
    return LocaleSettings(supported=["ko", "ja", "zh-cn"], neutral="en", message_language="en")


@pytest.fixture()
def content_tree(tmp_path: Path) -> Path:
    """
    A small real content tree:

        content/en/docs/concepts/overview.md
        content/ko/docs/concepts/overview.md
        content/ko/docs/tutorials/            (folder)
        content/ko/docs/page.md               (document under test)
    """
    root = tmp_path / "content"
    (root / "en" / "docs" / "concepts").mkdir(parents=True)
    (root / "en" / "docs" / "concepts" / "overview.md").write_text("# Overview\n", encoding="utf-8")
    (root / "ko" / "docs" / "concepts").mkdir(parents=True)
    (root / "ko" / "docs" / "concepts" / "overview.md").write_text("# 개요\n", encoding="utf-8")
    (root / "ko" / "docs" / "tutorials").mkdir(parents=True)
    (root / "ko" / "docs" / "page.md").write_text(
        "# Page\n\nSee [Overview](/docs/concepts/overview) and [Tutorials](/docs/tutorials/).\n"
        "Missing: [Nope](/docs/concepts/missing)\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture()
def make_oracle():
    """Factory for `FakeOracle(files=..., folders=...)`."""
    return FakeOracle
