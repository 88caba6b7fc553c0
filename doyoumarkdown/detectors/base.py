"""Shared scanning loop and error types for the issue detectors."""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from ..document import Document, Span, as_document
from ..logging import log_detector_matches
from ..models import MarkdownUrl
from ..parsing.constructs import Construct
from ..parsing.tokens import Cursor, Parser, take_until

DEFAULT_MIN_ALT_TEXT_WORDS = 5


class ScanError(RuntimeError):
    """Raised when the recognizer chain misbehaves; indicates a detector bug."""


class UnknownDetectorError(ValueError):
    """Raised when a detector name is not registered."""


Classifier = Callable[[Span, Construct], "MarkdownUrl | None"]


def iter_constructs(
    document: Document, trigger: str, matcher: Parser[Construct]
) -> Iterator[Tuple[Span, Construct]]:
    """Yield ``(skipped, construct)`` pairs for every match after ``trigger``.

    ``skipped`` is the text between the end of the previous match and the
    construct. When the construct does not match at a trigger occurrence the
    scan resumes one character later; running out of triggers ends the scan.
    """
    skip = take_until(trigger)
    cursor = Cursor(document)
    skipped_from = 0
    while True:
        skipped = skip(cursor)
        if skipped is None:
            return
        candidate = skipped.rest
        matched = matcher(candidate)
        if matched is None:
            cursor = candidate.advance(1)
            continue
        if matched.rest.offset <= candidate.offset:
            raise ScanError(
                f"Construct matcher made no progress at offset {candidate.offset} (trigger {trigger!r})"
            )
        yield document.span(skipped_from, candidate.offset), matched.value
        cursor = matched.rest
        skipped_from = cursor.offset


def run_detector(
    name: str,
    source: "Document | str",
    trigger: str,
    matcher: Parser[Construct],
    classify: Classifier,
) -> List[MarkdownUrl]:
    """Scan ``source`` and collect every construct ``classify`` accepts."""
    document = as_document(source)
    findings: List[MarkdownUrl] = []
    for skipped, construct in iter_constructs(document, trigger, matcher):
        finding = classify(skipped, construct)
        if finding is not None:
            findings.append(finding)
    log_detector_matches(name, len(findings), document.source)
    return findings


def follows_image_marker(skipped: Span) -> bool:
    """Return True when the bracket is really the start of an image."""
    return skipped.text.endswith("!")


def href_text(construct: Construct) -> str:
    return "" if construct.empty_href else construct.href.text


def count_words(text: str) -> int:
    return len(text.split())


__all__ = [
    "DEFAULT_MIN_ALT_TEXT_WORDS",
    "ScanError",
    "UnknownDetectorError",
    "count_words",
    "follows_image_marker",
    "href_text",
    "iter_constructs",
    "run_detector",
]
