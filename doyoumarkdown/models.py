"""Finding model shared by the detectors, reports, CLI, and service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .document import Span


class IssueType(str, Enum):
    """Classification attached to every finding."""

    FOUND_IMAGE = "found-image"
    FOUND_URL = "found-url"
    EMPTY_ANCHOR_TEXT = "empty-anchor-text"
    EMPTY_ANCHOR_HREF = "empty-anchor-href"
    EMPTY_IMAGE_ALT_TEXT = "empty-image-alt-text"
    LOW_IMAGE_ALT_TEXT = "low-image-alt-text"


@dataclass(frozen=True)
class MarkdownUrl:
    """One reported link or image occurrence.

    ``span`` is the anchor or alt text the issue was detected at; it is empty
    (zero-length) for empty bracket groups. ``href`` is the parenthesized
    target, or ``""`` when the target itself is missing.
    """

    issue_type: IssueType
    span: Span
    href: str

    @property
    def text(self) -> str:
        return self.span.text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issue": self.issue_type.value,
            "text": self.span.text,
            "href": self.href,
            "offset": self.span.offset,
            "line": self.span.line,
            "column": self.span.column,
        }


__all__ = ["IssueType", "MarkdownUrl"]
