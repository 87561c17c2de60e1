"""Section scoring over an ordered list of (expected, recognized) pairs."""
from __future__ import annotations

from typing import List, Optional, Sequence

from assessment_core.alignment.aligner import word_accuracy
from assessment_core.models.utterance import PromptScore, SectionScore, Utterance
from .bands import band_for, is_attempt
from .rules import (
    MIN_ATTEMPT_LENGTH_SPEAKING,
    NO_CREDIT_POINTS,
    SECTION_POLICIES,
    SECTION_SCORE_DECIMALS,
    UNANSWERED_LABEL,
)


class UnknownSectionError(ValueError):
    """Raised when a section name has no scoring policy."""


def _clamp_section(total: float, max_points: float) -> float:
    return max(0.0, min(round(total, SECTION_SCORE_DECIMALS), max_points))


def score_utterance(utterance: Utterance, min_attempt_length: int, index: int = 0) -> PromptScore:
    """Score a single prompt.

    Prompts where either side is blank after trimming earn nothing and are
    reported as unanswered.
    """
    expected = (utterance.expected_text or "").strip()
    actual = (utterance.recognized_text or "").strip()
    if not expected or not actual:
        return PromptScore(
            index=index,
            accuracy=None,
            points=NO_CREDIT_POINTS,
            label=UNANSWERED_LABEL,
            attempted=False,
        )

    accuracy = word_accuracy(utterance.expected_text, utterance.recognized_text)
    points, label = band_for(accuracy, utterance.recognized_text, min_attempt_length)
    return PromptScore(
        index=index,
        accuracy=accuracy,
        points=points,
        label=label,
        attempted=is_attempt(utterance.recognized_text, min_attempt_length),
    )


def score_prompts(
    expected: Sequence[Optional[str]],
    actual: Sequence[Optional[str]],
    min_attempt_length: int,
) -> List[PromptScore]:
    """Score each index present in both sequences; the tail of the longer one is ignored."""
    return [
        score_utterance(Utterance(exp or "", act or ""), min_attempt_length, index=i)
        for i, (exp, act) in enumerate(zip(expected, actual))
    ]


def score_response_set(
    expected: Sequence[Optional[str]],
    actual: Sequence[Optional[str]],
    max_points: float,
    min_attempt_length: int,
) -> float:
    """Total section score in ``[0, max_points]``.

    Per-prompt points are summed, rounded to one decimal and then clamped to
    ``max_points``. Missing or empty transcripts contribute 0 and
    mismatched lengths are not an error.
    """
    total = sum(p.points for p in score_prompts(expected, actual, min_attempt_length))
    return _clamp_section(total, max_points)


def score_section(
    expected: Sequence[Optional[str]],
    actual: Sequence[Optional[str]],
    max_points: float,
    min_attempt_length: int = MIN_ATTEMPT_LENGTH_SPEAKING,
) -> float:
    """Section total for parallel expected/recognized lists.

    Same rules as ``score_response_set``; ``min_attempt_length`` defaults to
    the speaking threshold (10 characters).
    """
    return score_response_set(expected, actual, max_points, min_attempt_length)


def evaluate_section(
    section: str,
    expected: Sequence[Optional[str]],
    actual: Sequence[Optional[str]],
) -> SectionScore:
    """Score a named section using its policy, keeping the per-prompt breakdown.

    Raises:
        UnknownSectionError: If ``section`` has no policy
    """
    try:
        max_points, min_attempt_length = SECTION_POLICIES[section]
    except KeyError:
        raise UnknownSectionError(
            f"Unknown section {section!r}; expected one of {sorted(SECTION_POLICIES)}"
        ) from None

    prompts = score_prompts(expected, actual, min_attempt_length)
    total = sum(p.points for p in prompts)
    return SectionScore(
        section=section,
        points_awarded=_clamp_section(total, max_points),
        max_points=max_points,
        prompts=prompts,
    )
