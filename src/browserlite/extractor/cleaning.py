"""
Whitespace and artefact cleanup applied to every extracted text.
"""

from __future__ import annotations

import re

_EMPTY_PARENS = re.compile(r"\(\s*\)")
_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_PADDED_NEWLINE = re.compile(r" ?\n ?")
_BLANK_LINES = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """Normalise extracted text.

    Empty parentheticals left behind by stripped links or icons are removed,
    horizontal whitespace runs become a single space, and paragraph breaks are
    kept but capped at one blank line. The function is idempotent.

    Args:
        text: Markdown or plain text to clean

    Returns:
        Cleaned text without leading or trailing whitespace
    """
    # fenced code is not exempt: "def f():" becomes "def f:".
    # "(())" only becomes empty after the inner pair is gone
    previous = None
    while previous != text:
        previous = text
        text = _EMPTY_PARENS.sub("", text)

    text = _INLINE_WHITESPACE.sub(" ", text)
    text = _PADDED_NEWLINE.sub("\n", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()
