"""Lint Markdown links and images for missing or weak text and targets."""

from .detectors import (
    DEFAULT_MIN_ALT_TEXT_WORDS,
    ScanError,
    UnknownDetectorError,
    all_empty_alt_text_markdown_images,
    all_empty_anchor_text_markdown_urls,
    all_empty_href_markdown_images,
    all_empty_href_markdown_urls,
    all_low_alt_text_markdown_images,
    all_markdown_images,
    all_markdown_urls,
    detector_names,
)
from .document import Document, Position, Span
from .models import IssueType, MarkdownUrl
from .report import DocumentReport, ScanOptions, scan_document, scan_paths

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MIN_ALT_TEXT_WORDS",
    "Document",
    "DocumentReport",
    "IssueType",
    "MarkdownUrl",
    "Position",
    "ScanError",
    "ScanOptions",
    "Span",
    "UnknownDetectorError",
    "all_empty_alt_text_markdown_images",
    "all_empty_anchor_text_markdown_urls",
    "all_empty_href_markdown_images",
    "all_empty_href_markdown_urls",
    "all_low_alt_text_markdown_images",
    "all_markdown_images",
    "all_markdown_urls",
    "detector_names",
    "scan_document",
    "scan_paths",
]
