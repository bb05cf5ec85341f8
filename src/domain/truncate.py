"""
Text truncation for meta descriptions.

Cuts plain text to a maximum length using one of four modes:

- word: at the last whitespace at or before the limit
- punctuation: after the last clause or sentence punctuation at or before the limit
- sentence: after the last sentence terminator at or before the limit
- block: hard cut at the limit

Markup is stripped and whitespace collapsed before measuring. Punctuation and
sentence modes fall back to word mode when no boundary is found.
"""

from __future__ import annotations

import re
from typing import Any

from src.rules.models import TRUNCATE_MODES

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")

PUNCTUATION_CHARS = ".,;:!?"
SENTENCE_CHARS = ".!?"


def normalize_text(value: Any) -> str:
    """Convert a field value to single-line plain text."""
    if value is None:
        return ""
    text = _TAG_RE.sub(" ", str(value))
    return _WS_RE.sub(" ", text).strip()


def _cut_at_word(text: str, max_length: int) -> str:
    # The character right after the limit may itself be the boundary
    window = text[: max_length + 1]
    last_space = window.rfind(" ")
    if last_space <= 0:
        return text[:max_length]
    return text[:last_space]


def _cut_after(text: str, max_length: int, chars: str) -> str | None:
    window = text[:max_length]
    last = max(window.rfind(c) for c in chars)
    if last < 0:
        return None
    return text[: last + 1]


def truncate_text(value: Any, max_length: int, mode: str = "word") -> str:
    """
    Truncate text to at most max_length characters.

    A max_length of 0 or less disables truncation.
    Raises ValueError for an unknown mode.
    """
    if mode not in TRUNCATE_MODES:
        raise ValueError(f"Unknown truncate mode: {mode!r}")

    text = normalize_text(value)
    if max_length <= 0 or len(text) <= max_length:
        return text

    if mode == "block":
        result = text[:max_length]
    elif mode == "punctuation":
        result = _cut_after(text, max_length, PUNCTUATION_CHARS) or _cut_at_word(
            text, max_length
        )
    elif mode == "sentence":
        result = _cut_after(text, max_length, SENTENCE_CHARS) or _cut_at_word(text, max_length)
    else:
        result = _cut_at_word(text, max_length)

    return result.rstrip()
