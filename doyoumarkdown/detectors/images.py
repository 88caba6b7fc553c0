"""Detectors for Markdown images (``![alt](href)``)."""

from __future__ import annotations

from typing import List

from ..document import Document, Span
from ..models import IssueType, MarkdownUrl
from ..parsing.constructs import Construct, markdown_image
from ..parsing.tokens import EMPTY_IMAGE_BRACKETS, LEFT_IMAGE_BRACKET
from .base import DEFAULT_MIN_ALT_TEXT_WORDS, count_words, href_text, run_detector


def all_markdown_images(source: "Document | str") -> List[MarkdownUrl]:
    """Report every image, located at its alt text."""

    def classify(_: Span, construct: Construct) -> MarkdownUrl:
        return MarkdownUrl(IssueType.FOUND_IMAGE, construct.label, href_text(construct))

    return run_detector("images", source, LEFT_IMAGE_BRACKET, markdown_image, classify)


def all_empty_alt_text_markdown_images(source: "Document | str") -> List[MarkdownUrl]:
    """Report images written as ``![](...)``."""

    def classify(_: Span, construct: Construct) -> MarkdownUrl:
        return MarkdownUrl(IssueType.EMPTY_IMAGE_ALT_TEXT, construct.label, href_text(construct))

    return run_detector("empty-alt-text", source, EMPTY_IMAGE_BRACKETS, markdown_image, classify)


def all_empty_href_markdown_images(source: "Document | str") -> List[MarkdownUrl]:
    """Report images whose target is the empty ``()`` pair."""

    def classify(_: Span, construct: Construct) -> MarkdownUrl | None:
        if not construct.empty_href:
            return None
        return MarkdownUrl(IssueType.FOUND_IMAGE, construct.label, "")

    return run_detector("empty-href-images", source, LEFT_IMAGE_BRACKET, markdown_image, classify)


def all_low_alt_text_markdown_images(
    source: "Document | str", min_words: int = DEFAULT_MIN_ALT_TEXT_WORDS
) -> List[MarkdownUrl]:
    """Report images whose alt text has fewer than ``min_words`` words.

    Words are whitespace-separated runs, so empty alt text counts as zero
    words and is reported here as well as by the empty-alt-text detector.
    """
    if min_words < 1:
        raise ValueError("min_words must be a positive integer")

    def classify(_: Span, construct: Construct) -> MarkdownUrl | None:
        if count_words(construct.label.text) >= min_words:
            return None
        return MarkdownUrl(IssueType.LOW_IMAGE_ALT_TEXT, construct.label, href_text(construct))

    return run_detector("low-alt-text", source, LEFT_IMAGE_BRACKET, markdown_image, classify)


__all__ = [
    "all_empty_alt_text_markdown_images",
    "all_empty_href_markdown_images",
    "all_low_alt_text_markdown_images",
    "all_markdown_images",
]
