"""Detectors for plain Markdown links (``[anchor](href)``).

A bracket directly preceded by ``!`` opens an image, so each detector here
drops constructs whose skipped text ends in ``!``.
"""

from __future__ import annotations

from typing import List

from ..document import Document, Span
from ..models import IssueType, MarkdownUrl
from ..parsing.constructs import Construct, markdown_url
from ..parsing.tokens import EMPTY_BRACKETS, LEFT_BRACKET
from .base import follows_image_marker, href_text, run_detector


def all_markdown_urls(source: "Document | str") -> List[MarkdownUrl]:
    def classify(skipped: Span, construct: Construct) -> MarkdownUrl | None:
        if follows_image_marker(skipped):
            return None
        return MarkdownUrl(IssueType.FOUND_URL, construct.label, href_text(construct))

    return run_detector("urls", source, LEFT_BRACKET, markdown_url, classify)


def all_empty_anchor_text_markdown_urls(source: "Document | str") -> List[MarkdownUrl]:
    def classify(skipped: Span, construct: Construct) -> MarkdownUrl | None:
        if follows_image_marker(skipped):
            return None
        return MarkdownUrl(IssueType.EMPTY_ANCHOR_TEXT, construct.label, href_text(construct))

    return run_detector("empty-anchor-text", source, EMPTY_BRACKETS, markdown_url, classify)


def all_empty_href_markdown_urls(source: "Document | str") -> List[MarkdownUrl]:
    def classify(skipped: Span, construct: Construct) -> MarkdownUrl | None:
        if follows_image_marker(skipped) or not construct.empty_href:
            return None
        return MarkdownUrl(IssueType.EMPTY_ANCHOR_HREF, construct.label, "")

    return run_detector("empty-href-urls", source, LEFT_BRACKET, markdown_url, classify)


__all__ = [
    "all_empty_anchor_text_markdown_urls",
    "all_empty_href_markdown_urls",
    "all_markdown_urls",
]
