"""One step of a word alignment between expected and recognized text."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AlignedWord:
    """A reference word paired with what the recognizer heard for it.

    ``ref_word`` is None for an extra spoken word ("ins") and ``hyp_word``
    is None for a skipped one ("del"); both are set for "match" and "sub".
    """
    ref_word: Optional[str]
    hyp_word: Optional[str]
    op: str  # "match" | "sub" | "del" | "ins"
