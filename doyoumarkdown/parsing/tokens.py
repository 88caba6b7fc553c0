"""Literal recognizers and the small combinator set used to compose them.

Every recognizer takes a :class:`Cursor` and returns either a :class:`Parsed`
result (the matched value plus the cursor after it) or ``None`` when the input
at that position does not match. A failed recognizer never consumes input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from ..document import Document, Span

T = TypeVar("T")
U = TypeVar("U")

LEFT_PARENS = "("
RIGHT_PARENS = ")"
LEFT_BRACKET = "["
RIGHT_BRACKET = "]"
EMPTY_BRACKETS = "[]"
EMPTY_IMAGE_BRACKETS = "![]"
LEFT_IMAGE_BRACKET = "!["


@dataclass(frozen=True)
class Cursor:
    """Read-only scan position inside a document."""

    document: Document
    offset: int = 0

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.document.text)

    def advance(self, count: int) -> "Cursor":
        return Cursor(self.document, min(self.offset + count, len(self.document.text)))

    def moved_to(self, offset: int) -> "Cursor":
        return Cursor(self.document, offset)

    def startswith(self, literal: str) -> bool:
        return self.document.text.startswith(literal, self.offset)

    def find(self, literal: str) -> int:
        return self.document.text.find(literal, self.offset)


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Successful recognizer output."""

    value: T
    rest: Cursor


Parser = Callable[[Cursor], Optional[Parsed[T]]]


def tag(literal: str) -> Parser[Span]:
    """Match ``literal`` exactly at the cursor."""
    if not literal:
        raise ValueError("tag() requires a non-empty literal")

    def parse(cursor: Cursor) -> Optional[Parsed[Span]]:
        if not cursor.startswith(literal):
            return None
        end = cursor.offset + len(literal)
        return Parsed(cursor.document.span(cursor.offset, end), cursor.moved_to(end))

    return parse


def is_not(stop_chars: str) -> Parser[Span]:
    """Consume one or more characters that are not in ``stop_chars``."""
    if not stop_chars:
        raise ValueError("is_not() requires at least one stop character")
    stop_pattern = re.compile(f"[{re.escape(stop_chars)}]")

    def parse(cursor: Cursor) -> Optional[Parsed[Span]]:
        if cursor.at_end:
            return None
        text = cursor.document.text
        if len(stop_chars) == 1:
            end = cursor.document.find_char(stop_chars, cursor.offset)
        else:
            found = stop_pattern.search(text, cursor.offset)
            end = found.start() if found else -1
        if end == -1:
            end = len(text)
        if end == cursor.offset:
            return None
        return Parsed(cursor.document.span(cursor.offset, end), cursor.moved_to(end))

    return parse


def take_until(literal: str) -> Parser[Span]:
    """Consume everything before the next occurrence of ``literal``.

    Fails when ``literal`` does not occur again; the literal itself is left
    for the next recognizer.
    """
    if not literal:
        raise ValueError("take_until() requires a non-empty literal")

    def parse(cursor: Cursor) -> Optional[Parsed[Span]]:
        index = cursor.find(literal)
        if index == -1:
            return None
        return Parsed(cursor.document.span(cursor.offset, index), cursor.moved_to(index))

    return parse


def pair(first: Parser[T], second: Parser[U]) -> Parser[Tuple[T, U]]:
    def parse(cursor: Cursor) -> Optional[Parsed[Tuple[T, U]]]:
        head = first(cursor)
        if head is None:
            return None
        tail = second(head.rest)
        if tail is None:
            return None
        return Parsed((head.value, tail.value), tail.rest)

    return parse


def delimited(opening: Parser[object], body: Parser[T], closing: Parser[object]) -> Parser[T]:
    """Match ``opening body closing`` and keep only the body."""

    def parse(cursor: Cursor) -> Optional[Parsed[T]]:
        start = opening(cursor)
        if start is None:
            return None
        inner = body(start.rest)
        if inner is None:
            return None
        end = closing(inner.rest)
        if end is None:
            return None
        return Parsed(inner.value, end.rest)

    return parse


def terminated(first: Parser[T], second: Parser[object]) -> Parser[T]:
    """Match ``first second`` and keep only the first value."""

    def parse(cursor: Cursor) -> Optional[Parsed[T]]:
        head = first(cursor)
        if head is None:
            return None
        tail = second(head.rest)
        if tail is None:
            return None
        return Parsed(head.value, tail.rest)

    return parse


def alt(*parsers: Parser[T]) -> Parser[T]:
    """Return the first alternative that matches."""
    if not parsers:
        raise ValueError("alt() requires at least one parser")

    def parse(cursor: Cursor) -> Optional[Parsed[T]]:
        for parser in parsers:
            result = parser(cursor)
            if result is not None:
                return result
        return None

    return parse


def map_parsed(parser: Parser[T], transform: Callable[[Cursor, Parsed[T]], U]) -> Parser[U]:
    """Rewrite a successful value; ``transform`` sees the starting cursor too."""

    def parse(cursor: Cursor) -> Optional[Parsed[U]]:
        result = parser(cursor)
        if result is None:
            return None
        return Parsed(transform(cursor, result), result.rest)

    return parse


left_parens = tag(LEFT_PARENS)
right_parens = tag(RIGHT_PARENS)
left_bracket = tag(LEFT_BRACKET)
right_bracket = tag(RIGHT_BRACKET)
left_image_bracket = tag(LEFT_IMAGE_BRACKET)

non_empty_parens = delimited(left_parens, is_not(RIGHT_PARENS), right_parens)
empty_parens_pair = terminated(left_parens, right_parens)

non_empty_brackets = delimited(left_bracket, is_not(RIGHT_BRACKET), right_bracket)
empty_brackets_pair = terminated(left_bracket, right_bracket)

non_empty_image_brackets = delimited(left_image_bracket, is_not(RIGHT_BRACKET), right_bracket)
empty_image_brackets_pair = terminated(left_image_bracket, right_bracket)


__all__ = [
    "Cursor",
    "EMPTY_BRACKETS",
    "EMPTY_IMAGE_BRACKETS",
    "LEFT_BRACKET",
    "LEFT_IMAGE_BRACKET",
    "LEFT_PARENS",
    "Parsed",
    "Parser",
    "RIGHT_BRACKET",
    "RIGHT_PARENS",
    "alt",
    "delimited",
    "empty_brackets_pair",
    "empty_image_brackets_pair",
    "empty_parens_pair",
    "is_not",
    "left_bracket",
    "left_image_bracket",
    "left_parens",
    "map_parsed",
    "non_empty_brackets",
    "non_empty_image_brackets",
    "non_empty_parens",
    "pair",
    "right_bracket",
    "right_parens",
    "take_until",
    "terminated",
]
