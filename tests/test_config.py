"""Tests for doyoumarkdown.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from doyoumarkdown.config import ConfigError, LintConfig, load_config
from doyoumarkdown.detectors import DEFAULT_MIN_ALT_TEXT_WORDS, default_detector_names


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, LintConfig)
    assert config.root == tmp_path.resolve()
    assert config.detectors == default_detector_names()
    assert config.min_alt_text_words == DEFAULT_MIN_ALT_TEXT_WORDS
    assert config.exclude_paths == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".doyoumarkdown.yml"
    config_file.write_text(
        """
detectors:
  enabled: [images, Empty-Alt-Text, low-alt-text]
low_alt_text:
  min_words: 3
exclude_paths:
  - "node_modules/"
  - "CHANGELOG.md"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.detectors == ["images", "empty-alt-text", "low-alt-text"]
    assert config.min_alt_text_words == 3
    assert config.exclude_paths == ["node_modules/", "CHANGELOG.md"]


def test_load_config_accepts_directory_and_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text("\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.detectors == default_detector_names()


def test_load_config_rejects_unknown_detectors(tmp_path: Path) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text(
        "detectors:\n  enabled:\n    - urls\n    - spellcheck\n", encoding="utf-8"
    )
    with pytest.raises(ConfigError, match="spellcheck"):
        load_config(tmp_path)


@pytest.mark.parametrize("value", ["0", "-2", "many", "true"])
def test_load_config_rejects_bad_thresholds(tmp_path: Path, value: str) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text(
        f"low_alt_text:\n  min_words: {value}\n", encoding="utf-8"
    )
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_wraps_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".doyoumarkdown.yml").write_text("detectors: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
