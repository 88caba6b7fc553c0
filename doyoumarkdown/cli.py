"""CLI entrypoints for doyoumarkdown commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence

from .config import ConfigError, LintConfig, load_config
from .detectors import UnknownDetectorError, detector_names
from .document import Document
from .logging import UNNAMED_SOURCE, configure_logging, get_logger
from .report import READ_ERROR, DocumentReport, ScanOptions, scan_document, scan_paths

_logger = get_logger("cli")

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doyoumarkdown",
        description="Report missing or weak anchor text, alt text, and hrefs in Markdown.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Scan Markdown files or directories for link and image issues.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to scan; use '-' to read from stdin (defaults to '.').",
    )
    check_parser.add_argument(
        "-d",
        "--detector",
        action="append",
        dest="detectors",
        metavar="NAME",
        help=(
            "Detector to run; repeat for several "
            "(defaults to the config file, then every problem detector)."
        ),
    )
    check_parser.add_argument(
        "--min-alt-words",
        type=_positive_int,
        default=None,
        help="Alt text with fewer words than this is reported as low alt text.",
    )
    check_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format for findings.",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help="Path to .doyoumarkdown.yml or the directory holding it (defaults to cwd).",
    )

    detectors_parser = subparsers.add_parser(
        "detectors",
        help="List the available detectors.",
    )
    _add_verbose_option(detectors_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP scanning service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for doyoumarkdown commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    if args.command == "check":
        return _run_check(parser, args)
    if args.command == "detectors":
        for name in detector_names():
            print(name)
        return EXIT_OK
    if args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(EXIT_USAGE, f"{exc}\n")
        return EXIT_OK
    parser.exit(EXIT_USAGE, "Unknown command\n")  # pragma: no cover - argparse enforces choices
    return EXIT_USAGE  # pragma: no cover


def _run_check(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    config_path = Path(args.config) if args.config else Path.cwd()
    try:
        config = load_config(config_path)
        options = _build_options(config, args)
    except (ConfigError, UnknownDetectorError, ValueError) as exc:
        parser.exit(EXIT_USAGE, f"doyoumarkdown: {exc}\n")

    reports: List[DocumentReport] = []
    file_paths = [Path(path) for path in args.paths if path != "-"]
    if "-" in args.paths:
        stdin_doc = Document(sys.stdin.read(), source="<stdin>")
        reports.append(scan_document(stdin_doc, options))
    try:
        reports.extend(
            scan_paths(
                file_paths,
                options,
                exclude_paths=config.exclude_paths,
                exclude_root=config.root,
            )
        )
    except FileNotFoundError as exc:
        parser.exit(EXIT_USAGE, f"doyoumarkdown: {exc}\n")

    if args.format == "json":
        print(json.dumps([report.to_dict() for report in reports], indent=2))
    else:
        _print_text(reports)

    _logger.debug("Scanned %d document(s)", len(reports))
    return EXIT_OK if all(report.ok for report in reports) else EXIT_FINDINGS


def _build_options(config: LintConfig, args: argparse.Namespace) -> ScanOptions:
    detectors = args.detectors if args.detectors else config.detectors
    min_words = args.min_alt_words if args.min_alt_words is not None else config.min_alt_text_words
    return ScanOptions(detectors=list(detectors), min_alt_text_words=min_words)


def _print_text(reports: Sequence[DocumentReport]) -> None:
    total = 0
    for report in reports:
        source = _relativize(report.source)
        for finding in report.findings:
            total += 1
            print(
                f"{source}:{finding.span.line}:{finding.span.column}: "
                f"{finding.issue_type.value} {finding.text!r} -> {finding.href!r}"
            )
        for name, message in report.errors.items():
            label = "cannot read file" if name == READ_ERROR else f"detector {name} failed"
            print(f"{source}: {label}: {message}")
    print(f"{total} finding(s) in {len(reports)} document(s)")


def _relativize(source: str | None) -> str:
    if source is None:
        return UNNAMED_SOURCE
    path = Path(source)
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return source


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
