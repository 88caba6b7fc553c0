"""Configuration loading for doyoumarkdown (.doyoumarkdown.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .detectors import (
    DEFAULT_MIN_ALT_TEXT_WORDS,
    UnknownDetectorError,
    default_detector_names,
    validate_names,
)

CONFIG_FILENAME = ".doyoumarkdown.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LintConfig:
    """Represents the settings defined in .doyoumarkdown.yml."""

    root: Path
    detectors: List[str] = field(default_factory=default_detector_names)
    min_alt_text_words: int = DEFAULT_MIN_ALT_TEXT_WORDS
    exclude_paths: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> LintConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LintConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = LintConfig(root=root)

    detector_data = _as_dict(data.get("detectors"))
    enabled = _as_str_list(detector_data.get("enabled")) if detector_data else []
    if enabled:
        try:
            config.detectors = validate_names(enabled)
        except UnknownDetectorError as exc:
            raise ConfigError(str(exc)) from exc

    alt_text_data = _as_dict(data.get("low_alt_text"))
    if alt_text_data and "min_words" in alt_text_data:
        min_words = _as_int(alt_text_data.get("min_words"))
        if min_words is None or min_words < 1:
            raise ConfigError("low_alt_text.min_words must be a positive integer")
        config.min_alt_text_words = min_words

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "LintConfig", "load_config"]
