"""Run several detectors over documents and gather their findings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .detectors import (
    DEFAULT_MIN_ALT_TEXT_WORDS,
    INVENTORY_DETECTORS,
    ScanError,
    default_detector_names,
    run_named,
    validate_names,
)
from .document import Document, as_document
from .file_scanner import MarkdownFileScanner
from .logging import describe_source, get_logger
from .models import MarkdownUrl

_logger = get_logger("report")


@dataclass
class ScanOptions:
    """Which detectors to run and with what alt-text threshold."""

    detectors: List[str] = field(default_factory=default_detector_names)
    min_alt_text_words: int = DEFAULT_MIN_ALT_TEXT_WORDS

    def __post_init__(self) -> None:
        self.detectors = validate_names(self.detectors)
        if self.min_alt_text_words < 1:
            raise ValueError("min_alt_text_words must be a positive integer")


@dataclass
class DocumentReport:
    """Concatenated findings for one document, grouped per detector."""

    source: Optional[str]
    by_detector: Dict[str, List[MarkdownUrl]] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def findings(self) -> List[MarkdownUrl]:
        return [finding for findings in self.by_detector.values() for finding in findings]

    @property
    def issues(self) -> List[MarkdownUrl]:
        """Findings from problem-reporting detectors only."""
        return [
            finding
            for name, findings in self.by_detector.items()
            if name not in INVENTORY_DETECTORS
            for finding in findings
        ]

    @property
    def ok(self) -> bool:
        return not self.errors and not self.issues

    def counts(self) -> Dict[str, int]:
        counter = Counter(finding.issue_type.value for finding in self.findings)
        return dict(counter)

    def to_dict(self) -> Dict[str, object]:
        return {
            "source": self.source,
            "detectors": {
                name: [finding.to_dict() for finding in findings]
                for name, findings in self.by_detector.items()
            },
            "counts": self.counts(),
            "errors": dict(self.errors),
        }


def scan_document(
    source: "Document | str", options: ScanOptions | None = None
) -> DocumentReport:
    """Run every selected detector independently over one document.

    A detector that raises :class:`ScanError` is recorded in ``errors`` and
    contributes no findings; the remaining detectors still run.
    """
    options = options or ScanOptions()
    document = as_document(source)
    report = DocumentReport(source=document.source)
    for name in options.detectors:
        try:
            report.by_detector[name] = run_named(
                name, document, min_alt_text_words=options.min_alt_text_words
            )
        except ScanError as exc:
            _logger.warning(
                "Detector %s failed on %s: %s", name, describe_source(document.source), exc
            )
            report.errors[name] = str(exc)
    return report


def read_document(path: Path) -> Document:
    return Document(path.read_text(encoding="utf-8"), source=str(path))


READ_ERROR = "read"


def scan_paths(
    paths: Iterable[Path],
    options: ScanOptions | None = None,
    *,
    exclude_paths: Sequence[str] = (),
    exclude_root: Path | None = None,
) -> List[DocumentReport]:
    """Scan Markdown files and directories, one report per file.

    ``exclude_paths`` rules are matched relative to ``exclude_root`` (the
    config file's directory) when it is given. A file that is not valid
    UTF-8 gets a report whose ``errors`` hold the decode failure under
    ``"read"``; the remaining files are still scanned.
    """
    options = options or ScanOptions()
    scanner = MarkdownFileScanner(exclude_paths, exclude_root=exclude_root)
    reports: List[DocumentReport] = []
    for path in paths:
        for file_path in scanner.iter_files(Path(path)):
            _logger.info("Scanning %s", file_path)
            try:
                document = read_document(file_path)
            except UnicodeDecodeError as exc:
                _logger.warning("Skipping %s: not valid UTF-8 (%s)", file_path, exc)
                reports.append(
                    DocumentReport(source=str(file_path), errors={READ_ERROR: str(exc)})
                )
                continue
            reports.append(scan_document(document, options))
    return reports


__all__ = [
    "DocumentReport",
    "READ_ERROR",
    "ScanOptions",
    "read_document",
    "scan_document",
    "scan_paths",
]
