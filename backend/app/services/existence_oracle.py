"""
Existence checks for localized link targets.

The oracle is the only place the link engine touches the filesystem, and it
never raises: any OS error is logged and reported as "does not exist", so an
unreadable tree can only hide a diagnostic, never invent one.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Protocol, Tuple

from ..models.links import ResourceKind
from .path_resolver import folder_fallback_file

logger = logging.getLogger(__name__)


class ExistenceOracle(Protocol):
    """Answers whether a path exists as the expected kind of resource."""

    def exists(self, path: str, kind: ResourceKind) -> bool:
        ...


class FileSystemOracle:
    """Existence oracle backed by the local filesystem."""

    def exists(self, path: str, kind: ResourceKind) -> bool:
        try:
            if kind == ResourceKind.FOLDER:
                return os.path.isdir(path)
            return os.path.isfile(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to check existence of {path}: {e}")
            return False


class CachingExistenceOracle:
    """
    Memoizes another oracle's answers.

    Meant to live for a single validation pass: nothing is written mid-pass,
    so answers for the same (path, kind) are stable within it.
    """

    def __init__(self, inner: ExistenceOracle):
        self._inner = inner
        self._cache: Dict[Tuple[str, ResourceKind], bool] = {}

    def exists(self, path: str, kind: ResourceKind) -> bool:
        key = (path, kind)
        if key not in self._cache:
            try:
                self._cache[key] = bool(self._inner.exists(path, kind))
            except Exception as e:
                logger.warning(f"Existence oracle failed for {path}: {e}")
                self._cache[key] = False
        return self._cache[key]


def localized_resource_exists(oracle: ExistenceOracle, expected_path: str, kind: ResourceKind) -> bool:
    """
    Check a resolved path, with the folder-link fallback.

    A folder link is satisfied by the directory itself or by a same-named
    markdown file next to it (`tutorials/` -> `tutorials.md`).
    """
    if kind == ResourceKind.FOLDER:
        return oracle.exists(expected_path, ResourceKind.FOLDER) or oracle.exists(
            folder_fallback_file(expected_path), ResourceKind.FILE
        )
    return oracle.exists(expected_path, ResourceKind.FILE)
