"""Link and image construct matchers built from the token recognizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..document import Span
from .tokens import (
    Cursor,
    Parsed,
    Parser,
    alt,
    empty_brackets_pair,
    empty_image_brackets_pair,
    empty_parens_pair,
    map_parsed,
    non_empty_brackets,
    non_empty_image_brackets,
    non_empty_parens,
    pair,
)


@dataclass(frozen=True)
class Group:
    """Content of one bracket or paren group."""

    content: Span
    empty: bool


@dataclass(frozen=True)
class Construct:
    """One ``[label](href)`` or ``![label](href)`` occurrence."""

    label: Span
    href: Span
    empty_label: bool
    empty_href: bool


def _empty(marker_pair: Parser[Span]) -> Parser[Group]:
    # Empty groups report a zero-length span just inside the opening marker.
    def build(_: Cursor, parsed: Parsed[Span]) -> Group:
        opening = parsed.value
        return Group(content=_zero_width(parsed.rest, opening.end), empty=True)

    return map_parsed(marker_pair, build)


def _filled(delimited_group: Parser[Span]) -> Parser[Group]:
    return map_parsed(delimited_group, lambda _, parsed: Group(content=parsed.value, empty=False))


def _zero_width(cursor: Cursor, offset: int) -> Span:
    return cursor.document.span(offset, offset)


brackets: Parser[Group] = alt(_empty(empty_brackets_pair), _filled(non_empty_brackets))
image_brackets: Parser[Group] = alt(
    _empty(empty_image_brackets_pair), _filled(non_empty_image_brackets)
)
parens: Parser[Group] = alt(_empty(empty_parens_pair), _filled(non_empty_parens))


def _construct(label_parser: Parser[Group]) -> Parser[Construct]:
    def build(_: Cursor, parsed: Parsed[tuple[Group, Group]]) -> Construct:
        label, href = parsed.value
        return Construct(
            label=label.content,
            href=href.content,
            empty_label=label.empty,
            empty_href=href.empty,
        )

    return map_parsed(pair(label_parser, parens), build)


_markdown_url = _construct(brackets)
_markdown_image = _construct(image_brackets)


def markdown_url(cursor: Cursor) -> Optional[Parsed[Construct]]:
    """Match ``[anchor](href)`` at the cursor with no gap between the groups."""
    return _markdown_url(cursor)


def markdown_image(cursor: Cursor) -> Optional[Parsed[Construct]]:
    """Match ``![alt](href)`` at the cursor with no gap between the groups."""
    return _markdown_image(cursor)


__all__ = [
    "Construct",
    "Group",
    "brackets",
    "image_brackets",
    "markdown_image",
    "markdown_url",
    "parens",
]
