"""Scanning pass that produced a reference hit."""

from enum import Enum


class RefPattern(str, Enum):
    MARKDOWN_LINK = "markdown_link"
    BARE = "bare"
    INLINE_CODE = "inline_code"
