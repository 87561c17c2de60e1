"""Per-response banding: maps word accuracy to a point award."""
from __future__ import annotations

from typing import Tuple, Union

from .rules import (
    ACCURACY_BANDS,
    ATTEMPT_LABEL,
    ATTEMPT_POINTS,
    MIN_ATTEMPT_LENGTH_SPEAKING,
    NO_CREDIT_LABEL,
    NO_CREDIT_POINTS,
)


def is_attempt(hypothesis: Union[str, bool, None], min_attempt_length: int) -> bool:
    """True when the raw transcript is longer than ``min_attempt_length`` characters.

    A boolean is taken as an already-made decision.
    """
    if isinstance(hypothesis, bool):
        return hypothesis
    return len(hypothesis or "") > min_attempt_length


def band_for(
    accuracy: float,
    hypothesis: Union[str, bool, None] = "",
    min_attempt_length: int = MIN_ATTEMPT_LENGTH_SPEAKING,
) -> Tuple[float, str]:
    """Return ``(points, label)`` for one response."""
    for minimum, points, label in ACCURACY_BANDS:
        if accuracy >= minimum:
            return points, label
    if is_attempt(hypothesis, min_attempt_length):
        return ATTEMPT_POINTS, ATTEMPT_LABEL
    return NO_CREDIT_POINTS, NO_CREDIT_LABEL


def score_response(
    accuracy: float,
    hypothesis: Union[str, bool, None] = "",
    min_attempt_length: int = MIN_ATTEMPT_LENGTH_SPEAKING,
) -> float:
    """Points toward 1.0 for a single prompt.

    - accuracy >= 0.90 -> 1.0
    - 0.80 <= accuracy < 0.90 -> 0.8
    - 0.65 <= accuracy < 0.80 -> 0.5
    - lower accuracy, but the transcript is longer than
      ``min_attempt_length`` characters -> 0.2
    - otherwise -> 0.0

    Args:
        accuracy: Word accuracy in [0, 1]
        hypothesis: The raw recognized transcript, or a precomputed attempt flag
        min_attempt_length: Characters a transcript must exceed to earn attempt credit

    Returns:
        Point value for the prompt
    """
    points, _ = band_for(accuracy, hypothesis, min_attempt_length)
    return points


def band_label(
    accuracy: float,
    hypothesis: Union[str, bool, None] = "",
    min_attempt_length: int = MIN_ATTEMPT_LENGTH_SPEAKING,
) -> str:
    _, label = band_for(accuracy, hypothesis, min_attempt_length)
    return label
