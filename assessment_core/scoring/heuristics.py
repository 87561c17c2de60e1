"""Structural checks for free-form responses (self introduction, essay).

These are word-count and keyword rules only; no grammar or semantic scoring.
"""
from __future__ import annotations

import re
from typing import Optional

from .rules import SELF_INTRODUCTION_MAX_POINTS, WRITING_MAX_POINTS

GREETING_RE = re.compile(
    r"\b(hello|hi|good|morning|afternoon|evening|myself|introduction)\b", re.IGNORECASE
)
PERSONAL_INFO_RE = re.compile(
    r"\b(name|background|experience|skills|education|qualification|degree)\b", re.IGNORECASE
)
CAREER_GOALS_RE = re.compile(
    r"\b(goal|aspiration|future|career|want|hope|aim|objective)\b", re.IGNORECASE
)

# Word count thresholds for the self introduction: (minimum words, points)
SELF_INTRO_LENGTH_BANDS = ((80, 3), (50, 2), (30, 1))

ESSAY_IDEAL_RANGE = (150, 250)
ESSAY_MIN_SENTENCES = 5


def _word_count(text: str) -> int:
    return len(text.split())


def score_self_introduction(transcript: Optional[str]) -> int:
    """Score a spoken self introduction out of 10.

    Length earns up to 3 points; a greeting earns 2, personal details 3 and
    career goals 2.
    """
    if not transcript or not transcript.strip():
        return 0

    word_count = _word_count(transcript)
    score = 0
    for minimum, points in SELF_INTRO_LENGTH_BANDS:
        if word_count >= minimum:
            score += points
            break

    if GREETING_RE.search(transcript):
        score += 2
    if PERSONAL_INFO_RE.search(transcript):
        score += 3
    if CAREER_GOALS_RE.search(transcript):
        score += 2

    return min(score, SELF_INTRODUCTION_MAX_POINTS)


def score_writing(essay: Optional[str]) -> int:
    """Score an essay out of 10 from its length and sentence count."""
    if not essay or not essay.strip():
        return 0

    word_count = _word_count(essay)
    sentences = [s for s in re.split(r"[.!?]+", essay) if s.strip()]
    low, high = ESSAY_IDEAL_RANGE

    score = 0
    if low <= word_count <= high:
        score += 4
    elif word_count >= 100:
        score += 2
    elif word_count >= 50:
        score += 1

    if len(sentences) >= ESSAY_MIN_SENTENCES:
        score += 3
    if word_count >= low:
        score += 3

    return min(score, WRITING_MAX_POINTS)
