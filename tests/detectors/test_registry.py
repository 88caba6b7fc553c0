"""Tests for the detector registry and the shared scan loop."""

from __future__ import annotations

import pytest

from doyoumarkdown.detectors import (
    INVENTORY_DETECTORS,
    ScanError,
    UnknownDetectorError,
    all_markdown_urls,
    default_detector_names,
    detector_names,
    get_detector,
    iter_constructs,
    run_named,
    validate_names,
)
from doyoumarkdown.document import Document
from doyoumarkdown.parsing.constructs import Construct
from doyoumarkdown.parsing.tokens import Parsed


def test_registry_lists_every_detector() -> None:
    assert detector_names() == [
        "urls",
        "images",
        "empty-anchor-text",
        "empty-alt-text",
        "low-alt-text",
        "empty-href-urls",
        "empty-href-images",
    ]


def test_default_detectors_exclude_inventory() -> None:
    defaults = default_detector_names()
    assert not INVENTORY_DETECTORS.intersection(defaults)
    assert len(defaults) == 5


def test_get_detector_is_case_insensitive() -> None:
    assert get_detector("URLS") is all_markdown_urls
    with pytest.raises(UnknownDetectorError):
        get_detector("broken-links")


def test_validate_names_reports_all_unknown_names() -> None:
    assert validate_names(["Images", "urls"]) == ["images", "urls"]
    with pytest.raises(UnknownDetectorError) as excinfo:
        validate_names(["images", "nope", "also-nope"])
    assert "also-nope, nope" in str(excinfo.value)


def test_run_named_passes_threshold_only_where_used() -> None:
    text = "![three word alt](x) [link](y)"
    assert len(run_named("low-alt-text", text, min_alt_text_words=3)) == 0
    assert len(run_named("low-alt-text", text, min_alt_text_words=4)) == 1
    assert len(run_named("urls", text, min_alt_text_words=4)) == 1


def test_scan_loop_rejects_matchers_that_do_not_consume() -> None:
    document = Document("[x](y)")
    stalled = Construct(
        label=document.span(1, 1),
        href=document.span(1, 1),
        empty_label=True,
        empty_href=True,
    )

    def matcher(cursor):  # type: ignore[no-untyped-def]
        return Parsed(stalled, cursor)

    with pytest.raises(ScanError):
        list(iter_constructs(document, "[", matcher))


def test_repeated_scans_are_identical() -> None:
    document = Document("![a](b) [c](d) [](e) ![](f) [g]()")
    for name in detector_names():
        assert run_named(name, document) == run_named(name, document)
