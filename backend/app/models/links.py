"""
Link extraction models.

A `LinkMatch` is created fresh on every validation pass and never persisted.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceKind(str, Enum):
    """Kind of resource a link points to, decided by its trailing separator."""

    FILE = "file"
    FOLDER = "folder"


class TextSpan(BaseModel):
    """A half-open [start, end) character range in a document."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    # 1-based line / 0-based column of both ends (mirrors LSP-style editors)
    start_line: int = 1
    start_column: int = 0
    end_line: int = 1
    end_column: int = 0

    @classmethod
    def from_offsets(cls, text: str, start: int, end: int) -> "TextSpan":
        start_line, start_column = _line_and_column(text, start)
        end_line, end_column = _line_and_column(text, end)
        return cls(
            start=start,
            end=end,
            start_line=start_line,
            start_column=start_column,
            end_line=end_line,
            end_column=end_column,
        )

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "TextSpan") -> bool:
        return self.start < other.end and other.start < self.end


# CRLF, lone CR (classic Mac) and LF each end one line
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def _line_and_column(text: str, offset: int):
    line, line_start = 1, 0
    for match in _LINE_BREAK_RE.finditer(text, 0, offset):
        line += 1
        line_start = match.end()
    return line, offset - line_start


class LinkMatch(BaseModel):
    """A `[display](/docs/<target>)` link found in a document."""

    model_config = ConfigDict(frozen=True)

    display_text: str
    raw_target: str  # as written after `/docs/`, fragment included
    span: TextSpan

    @property
    def base_path(self) -> str:
        return self.raw_target.split("#", 1)[0]

    @property
    def fragment(self) -> Optional[str]:
        if "#" not in self.raw_target:
            return None
        return self.raw_target.split("#", 1)[1]

    @property
    def resource_kind(self) -> ResourceKind:
        return ResourceKind.FOLDER if self.base_path.endswith("/") else ResourceKind.FILE

    @property
    def original_markdown(self) -> str:
        return f"[{self.display_text}](/docs/{self.raw_target})"

    def localized_markdown(self, locale: str) -> str:
        return f"[{self.display_text}](/{locale.lower()}/docs/{self.raw_target})"


class ValidationOutcome(BaseModel):
    """Derived result of resolving and checking one link candidate."""

    expected_path: Optional[str] = None
    resource_kind: ResourceKind = ResourceKind.FILE
    exists: bool = False
