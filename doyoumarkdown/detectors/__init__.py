"""Issue detectors and the name registry used by reports, the CLI, and the service."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from ..document import Document
from ..models import MarkdownUrl
from .base import (
    DEFAULT_MIN_ALT_TEXT_WORDS,
    ScanError,
    UnknownDetectorError,
    iter_constructs,
)
from .images import (
    all_empty_alt_text_markdown_images,
    all_empty_href_markdown_images,
    all_low_alt_text_markdown_images,
    all_markdown_images,
)
from .links import (
    all_empty_anchor_text_markdown_urls,
    all_empty_href_markdown_urls,
    all_markdown_urls,
)

_BUILTIN_DETECTORS: Dict[str, Callable[..., List[MarkdownUrl]]] = {
    "urls": all_markdown_urls,
    "images": all_markdown_images,
    "empty-anchor-text": all_empty_anchor_text_markdown_urls,
    "empty-alt-text": all_empty_alt_text_markdown_images,
    "low-alt-text": all_low_alt_text_markdown_images,
    "empty-href-urls": all_empty_href_markdown_urls,
    "empty-href-images": all_empty_href_markdown_images,
}

_THRESHOLD_DETECTORS = {"low-alt-text"}

# Inventory detectors list every construct rather than reporting a problem.
INVENTORY_DETECTORS = frozenset({"urls", "images"})


def detector_names() -> List[str]:
    """Return registered detector names in their default run order."""
    return list(_BUILTIN_DETECTORS)


def default_detector_names() -> List[str]:
    """Return the problem-reporting detectors run when none are selected."""
    return [name for name in _BUILTIN_DETECTORS if name not in INVENTORY_DETECTORS]


def get_detector(name: str) -> Callable[..., List[MarkdownUrl]]:
    try:
        return _BUILTIN_DETECTORS[name.lower()]
    except KeyError:
        raise UnknownDetectorError(f"Unknown detector requested: {name}") from None


def validate_names(names: Sequence[str]) -> List[str]:
    """Normalise detector names, rejecting any that are not registered."""
    normalised = [name.lower() for name in names]
    missing = sorted({name for name in normalised if name not in _BUILTIN_DETECTORS})
    if missing:
        raise UnknownDetectorError(f"Unknown detectors requested: {', '.join(missing)}")
    return normalised


def run_named(
    name: str,
    source: "Document | str",
    *,
    min_alt_text_words: int = DEFAULT_MIN_ALT_TEXT_WORDS,
) -> List[MarkdownUrl]:
    """Run one registered detector, passing the threshold where it applies."""
    detector = get_detector(name)
    if name.lower() in _THRESHOLD_DETECTORS:
        return detector(source, min_words=min_alt_text_words)
    return detector(source)


__all__ = [
    "DEFAULT_MIN_ALT_TEXT_WORDS",
    "INVENTORY_DETECTORS",
    "ScanError",
    "UnknownDetectorError",
    "all_empty_alt_text_markdown_images",
    "all_empty_anchor_text_markdown_urls",
    "all_empty_href_markdown_images",
    "all_empty_href_markdown_urls",
    "all_low_alt_text_markdown_images",
    "all_markdown_images",
    "all_markdown_urls",
    "default_detector_names",
    "detector_names",
    "get_detector",
    "iter_constructs",
    "run_named",
    "validate_names",
]
