"""Compiled patterns for path-like tokens.

A path-like token is an optional ``@`` followed by ``./``, ``../`` or ``/``
and at least one more character. Only ``re.finditer`` is used on these, so
no scan position is carried between calls.
"""

import re

# [label](./path) - group 1 is the token, padding whitespace is allowed
MARKDOWN_LINK_PATTERN = re.compile(r"\[[^\]]+\]\(\s*(@?(?:\.{1,2}/|/)[^)\s]+)\s*\)")

# ./path after start-of-text, whitespace, "(" or "`" - group 2 is the token
BARE_REF_PATTERN = re.compile(r"(^|[\s(`])(@?(?:\.{1,2}/|/)[^\s`)\]]+)")

# `./path` - group 1 is the token
INLINE_CODE_PATTERN = re.compile(r"`(@?(?:\.{1,2}/|/)[^\s`)\]]+)`")
