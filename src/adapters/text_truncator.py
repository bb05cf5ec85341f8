"""
Text truncator adapter.

Default TextTruncatorPort implementation for hosts without their own text
utility. Delegates to the domain truncation rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.truncate import truncate_text


@dataclass(frozen=True)
class SanitizerTruncator:
    """Truncates text with the word/punctuation/sentence/block modes."""

    def truncate(self, text: Any, max_length: int, mode: str) -> str:
        return truncate_text(text, max_length, mode)
