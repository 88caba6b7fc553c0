"""Position-tracked document buffer used by every detector."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Position:
    """Location of a character inside a document.

    ``offset`` is the 0-based character index; ``line`` and ``column`` are
    1-based, with columns counted in characters rather than bytes.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """A copied slice of a document together with where it starts."""

    text: str
    position: Position

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def end(self) -> int:
        return self.position.offset + len(self.text)

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Document:
    """Immutable Markdown text plus the line table needed to locate spans."""

    text: str
    source: Optional[str] = None
    _line_starts: List[int] = field(init=False, repr=False, compare=False)
    _char_hits: Dict[str, Tuple[int, int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        object.__setattr__(self, "_line_starts", starts)
        object.__setattr__(self, "_char_hits", {})

    def __len__(self) -> int:
        return len(self.text)

    def find_char(self, char: str, start: int) -> int:
        """Return the index of the next ``char`` at or after ``start``, or -1.

        Scans move forward, so the last hit per character is remembered and
        reused for any later start that does not pass it.
        """
        hit = self._char_hits.get(char)
        if hit is not None:
            searched_from, found = hit
            if searched_from <= start and (found == -1 or start <= found):
                return found
        found = self.text.find(char, start)
        self._char_hits[char] = (start, found)
        return found

    def position(self, offset: int) -> Position:
        """Return the line/column position for a character offset."""
        if offset < 0 or offset > len(self.text):
            raise ValueError(f"Offset {offset} outside document of length {len(self.text)}")
        line_index = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return Position(offset=offset, line=line_index + 1, column=column)

    def span(self, start: int, end: int) -> Span:
        """Return the span covering ``text[start:end]``."""
        if start > end or end > len(self.text):
            raise ValueError(f"Span [{start}, {end}) outside document of length {len(self.text)}")
        return Span(text=self.text[start:end], position=self.position(start))


def as_document(source: "Document | str") -> Document:
    """Wrap plain strings so callers can pass either form to the detectors."""
    if isinstance(source, Document):
        return source
    if isinstance(source, str):
        return Document(source)
    raise TypeError(f"Expected Document or str, got {type(source).__name__}")


__all__ = ["Document", "Position", "Span", "as_document"]
