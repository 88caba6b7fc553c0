"""CLI parser and command behaviour tests."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from doyoumarkdown.cli import EXIT_FINDINGS, EXIT_OK, EXIT_USAGE, _build_parser, main
from doyoumarkdown.detectors import detector_names
from tests._fixtures.docs_builder import DocsBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "check"])
    assert args.verbose is True
    assert args.command == "check"
    assert args.paths == ["."]


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "--verbose"])
    assert args.verbose is True


def test_cli_collects_repeated_detectors() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "-d", "urls", "--detector", "images", "README.md"])
    assert args.detectors == ["urls", "images"]
    assert args.paths == ["README.md"]


def test_cli_rejects_non_positive_threshold() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["check", "--min-alt-words", "0"])


def test_check_reports_findings_and_exit_code(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    docs_builder.write({"index.md": "# Docs\n\nSee [](guide.md).\n"})

    code = main(["check", str(docs_builder.path()), "--config", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == EXIT_FINDINGS
    assert "index.md:3:6: empty-anchor-text '' -> 'guide.md'" in out
    assert "1 finding(s) in 1 document(s)" in out


def test_check_clean_document_exits_zero(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    docs_builder.write(
        {"index.md": "Read the [guide](guide.md).\n![a diagram of the request flow](flow.png)\n"}
    )

    code = main(["check", str(docs_builder.path()), "--config", str(tmp_path)])

    assert code == EXIT_OK
    assert "0 finding(s) in 1 document(s)" in capsys.readouterr().out


def test_check_threshold_flag_overrides_config(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text(
        "low_alt_text:\n  min_words: 10\n", encoding="utf-8"
    )
    docs_builder.write({"index.md": "![a diagram of the request flow](flow.png)\n"})

    assert main(["check", str(docs_builder.path()), "--config", str(tmp_path)]) == EXIT_FINDINGS
    capsys.readouterr()
    assert (
        main(
            [
                "check",
                str(docs_builder.path()),
                "--config",
                str(tmp_path),
                "--min-alt-words",
                "3",
            ]
        )
        == EXIT_OK
    )


def test_check_json_output(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    docs_builder.write({"index.md": "[link]()\n"})

    code = main(
        [
            "check",
            str(docs_builder.path() / "index.md"),
            "--config",
            str(tmp_path),
            "--format",
            "json",
            "-d",
            "empty-href-urls",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_FINDINGS
    assert payload[0]["detectors"]["empty-href-urls"][0]["text"] == "link"
    assert payload[0]["counts"] == {"empty-anchor-href": 1}


def test_check_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("![](x.png)\n"))

    code = main(["check", "-", "--config", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == EXIT_FINDINGS
    assert "<stdin>:1:3: empty-image-alt-text" in out


def test_check_unknown_detector_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(tmp_path), "--config", str(tmp_path), "-d", "nope"])
    assert excinfo.value.code == EXIT_USAGE


def test_check_missing_path_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(tmp_path / "missing.md"), "--config", str(tmp_path)])
    assert excinfo.value.code == EXIT_USAGE


def test_detectors_command_lists_names(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["detectors"]) == EXIT_OK
    assert capsys.readouterr().out.split() == detector_names()


def test_check_keeps_going_past_undecodable_files(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    docs_builder.write_bytes("a_latin1.md", "caf\xe9 [](menu)\n".encode("latin-1"))
    docs_builder.write({"b_index.md": "See [](guide.md).\n"})

    code = main(["check", str(docs_builder.path()), "--config", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == EXIT_FINDINGS
    assert "a_latin1.md: cannot read file:" in out
    assert "b_index.md:1:6: empty-anchor-text '' -> 'guide.md'" in out
    assert "1 finding(s) in 2 document(s)" in out


def test_check_resolves_exclude_paths_against_config_root(
    docs_builder: DocsBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text(
        "exclude_paths:\n  - docs/drafts/\n", encoding="utf-8"
    )
    docs_builder.write({"index.md": "[guide](guide.md)\n", "drafts/wip.md": "[](todo)\n"})

    code = main(["check", str(docs_builder.path()), "--config", str(tmp_path)])

    assert code == EXIT_OK
    assert "0 finding(s) in 1 document(s)" in capsys.readouterr().out
