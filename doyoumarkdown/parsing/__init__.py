"""Recognizers for the Markdown link and image constructs."""

from .constructs import Construct, markdown_image, markdown_url
from .tokens import Cursor, Parsed, Parser

__all__ = [
    "Construct",
    "Cursor",
    "Parsed",
    "Parser",
    "markdown_image",
    "markdown_url",
]
