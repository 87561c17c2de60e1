"""Communication section pipeline.

Scores the four parts of the communication test from finalized transcripts:
- Self introduction: structural heuristics (length, greeting, details, goals)
- Speaking: candidate reads sentences aloud, scored by word alignment
- Listening: candidate repeats phrases they heard, scored by word alignment
- Writing: essay length and structure

Transcripts come from the speech-recognition layer and may be empty.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from assessment_core.scoring.heuristics import score_self_introduction, score_writing
from assessment_core.scoring.response_set import evaluate_section
from assessment_core.scoring.rules import (
    COMMUNICATION_MAX_POINTS,
    SECTION_LISTENING,
    SECTION_SPEAKING,
    SELF_INTRODUCTION_MAX_POINTS,
    WRITING_MAX_POINTS,
)
from .report import build_prompt_report, generate_communication_feedback, generate_feedback

logger = logging.getLogger(__name__)


def assess_spoken_section(
    section: str,
    expected: Sequence[Optional[str]],
    actual: Sequence[Optional[str]],
) -> Dict[str, Any]:
    """Score a speaking or listening section with per-prompt reports and feedback."""
    section_score = evaluate_section(section, expected, actual)
    for prompt in section_score.prompts:
        logger.debug(
            "%s prompt %d: accuracy=%s points=%.1f (%s)",
            section, prompt.index, prompt.accuracy, prompt.points, prompt.label,
        )

    result = section_score.to_dict()
    result["reports"] = [
        build_prompt_report(exp, act) for exp, act in zip(expected, actual)
    ]
    result["feedback"] = generate_feedback(section_score)
    return result


def assess_communication(
    self_intro_transcript: Optional[str],
    speaking_transcripts: Sequence[Optional[str]],
    listening_transcripts: Sequence[Optional[str]],
    essay: Optional[str],
    expected_listening_texts: Sequence[Optional[str]],
    expected_speaking_texts: Sequence[Optional[str]],
    *,
    writing_topic: str = "",
) -> Dict[str, Any]:
    """Assess the whole communication test.

    Args:
        self_intro_transcript: Final transcript of the self introduction
        speaking_transcripts: One recognized transcript per speaking prompt
        listening_transcripts: One recognized transcript per listening prompt
        essay: The written essay
        expected_listening_texts: Phrases played to the candidate
        expected_speaking_texts: Sentences shown to the candidate
        writing_topic: Essay topic, echoed in the result

    Returns:
        Dict with:
            - "self_introduction", "speaking", "listening", "writing": inputs and score
            - "total": sum of the four section scores
            - "max_total": ceiling of the communication test
    """
    speaking = assess_spoken_section(SECTION_SPEAKING, expected_speaking_texts, speaking_transcripts)
    listening = assess_spoken_section(SECTION_LISTENING, expected_listening_texts, listening_transcripts)

    self_intro_score = score_self_introduction(self_intro_transcript)
    writing_score = score_writing(essay)

    result: Dict[str, Any] = {
        "self_introduction": {
            "transcript": self_intro_transcript or "",
            "score": self_intro_score,
            "max_score": SELF_INTRODUCTION_MAX_POINTS,
        },
        "speaking": {
            "sentences": list(expected_speaking_texts),
            "recordings": [t or "" for t in speaking_transcripts],
            **speaking,
        },
        "listening": {
            "audio_texts": list(expected_listening_texts),
            "user_responses": [t or "" for t in listening_transcripts],
            **listening,
        },
        "writing": {
            "topic": writing_topic,
            "essay": essay or "",
            "score": writing_score,
            "max_score": WRITING_MAX_POINTS,
        },
    }

    total = self_intro_score + speaking["score"] + listening["score"] + writing_score
    result["total"] = round(total, 1)
    result["max_total"] = COMMUNICATION_MAX_POINTS

    logger.info(
        "Communication scored: self_intro=%d speaking=%.1f listening=%.1f writing=%d total=%.1f",
        self_intro_score, speaking["score"], listening["score"], writing_score, result["total"],
    )
    result["feedback"] = generate_communication_feedback(result)
    return result
