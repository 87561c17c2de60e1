"""Word tokenization for alignment."""
from __future__ import annotations

from typing import List, Optional

from .normalizer import normalize


def tokenize(text: Optional[str]) -> List[str]:
    """Split normalized text into word tokens.

    Example: "The sky, is blue." -> ["the", "sky", "is", "blue"]
    """
    return [token for token in normalize(text).split(" ") if token]
