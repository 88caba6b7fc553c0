"""Markdown file discovery for directory scans."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".tox",
    ".idea",
}

MARKDOWN_SUFFIXES = (".md", ".markdown")


@dataclass
class IgnoreRule:
    """Represents an ignore rule parsed from .gitignore or .doyoumarkdown.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            if self.directory_only and rel_path.startswith(f"{self.pattern}/"):
                return True
            return False

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str, negate: bool = False) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def parse_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.exists():
        return []

    rules: List[IgnoreRule] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        if negate:
            line = line[1:]
        rule = build_ignore_rule(line, negate=negate)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


class MarkdownFileScanner:
    """Walks a directory and yields the Markdown files worth linting.

    ``.gitignore`` rules are matched relative to the scanned directory.
    ``exclude_paths`` rules are matched relative to ``exclude_root`` when the
    path lies below it, otherwise relative to the scanned directory.
    """

    def __init__(
        self, exclude_paths: Sequence[str] = (), *, exclude_root: Path | None = None
    ) -> None:
        self._extra_rules = [
            rule for rule in (build_ignore_rule(pattern) for pattern in exclude_paths) if rule
        ]
        self._exclude_root = exclude_root.expanduser().resolve() if exclude_root else None

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Yield Markdown files below ``root`` in a stable, sorted order."""
        root = root.expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Path not found: {root}")
        if root.is_file():
            yield root
            return

        rules = parse_gitignore(root / ".gitignore")
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            kept_dirs = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if self._ignored(current_dir / name, rel_path, True, rules):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if not filename.lower().endswith(MARKDOWN_SUFFIXES):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._ignored(current_dir / filename, rel_path, False, rules):
                    continue
                yield current_dir / filename

    def _ignored(
        self, path: Path, rel_path: str, is_dir: bool, gitignore_rules: Sequence[IgnoreRule]
    ) -> bool:
        if _should_ignore(rel_path, is_dir, gitignore_rules):
            return True
        return _should_ignore(self._exclude_relative(path, rel_path), is_dir, self._extra_rules)

    def _exclude_relative(self, path: Path, rel_path: str) -> str:
        if self._exclude_root is None:
            return rel_path
        try:
            return path.relative_to(self._exclude_root).as_posix()
        except ValueError:
            return rel_path


__all__ = ["IgnoreRule", "MARKDOWN_SUFFIXES", "MarkdownFileScanner", "build_ignore_rule", "parse_gitignore"]
