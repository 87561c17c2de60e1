"""Text normalization applied to both reference and recognized text."""
from __future__ import annotations

import re
from typing import Optional

# Characters replaced by a space before comparison
STRIP_CHARACTERS = ".,!?;:-–—()[]\"'`"

_STRIP_RE = re.compile("[" + re.escape(STRIP_CHARACTERS) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Normalize a text fragment for word-level comparison.

    Lowercases, replaces punctuation and quote characters with a space,
    collapses whitespace runs and trims the result.

    Example: "Hello, World!" -> "hello world"

    Args:
        text: Any string (None is treated as empty)

    Returns:
        Normalized string, empty for empty input
    """
    if not text:
        return ""
    text = _STRIP_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()
