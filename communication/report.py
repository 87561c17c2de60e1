"""Word-level content reports and feedback for the communication round."""
from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from assessment_core.alignment.aligner import align_words
from assessment_core.models.utterance import SectionScore
from assessment_core.scoring.heuristics import ESSAY_IDEAL_RANGE
from assessment_core.scoring.rules import (
    COMMUNICATION_MAX_POINTS,
    COMMUNICATION_PERFORMANCE_BANDS,
    COMMUNICATION_PRACTICE_PERCENT,
    LOWEST_PERFORMANCE_LEVEL,
    MIN_ATTEMPT_LENGTH_LISTENING,
    MIN_ATTEMPT_LENGTH_SPEAKING,
    STRONG_RESPONSE_RATE,
    STRONG_SELF_INTRODUCTION_SCORE,
    STRONG_SPOKEN_SECTION_SCORE,
    STRONG_WRITING_SCORE,
    UNANSWERED_LABEL,
)

# Alignment op -> reported word status
_STATUS_BY_OP = {
    "match": "correct",
    "del": "missed",
    "sub": "substituted",
    "ins": "repeated",
}


def build_prompt_report(expected: Optional[str], actual: Optional[str]) -> Dict[str, Any]:
    """Word-by-word comparison of one prompt.

    Returns dict:
      - "words": list of {word, status} (plus "spoken" for substitutions)
        status in {"correct","missed","substituted","repeated"}
      - "summary": {total_words, correct, missed, substituted, repeated, accuracy}

    Notes:
      - "missed" comes from deletions (reference word not spoken)
      - "repeated" comes from insertions (extra spoken word)
      - accuracy is the percentage of reference words spoken correctly
    """
    words: List[Dict[str, Any]] = []
    counts = {status: 0 for status in _STATUS_BY_OP.values()}

    for a in align_words(expected, actual):
        status = _STATUS_BY_OP[a.op]
        counts[status] += 1
        if a.op == "ins":
            words.append({"word": a.hyp_word, "status": status})
        elif a.op == "sub":
            words.append({"word": a.ref_word, "status": status, "spoken": a.hyp_word})
        else:
            words.append({"word": a.ref_word, "status": status})

    total_words = counts["correct"] + counts["missed"] + counts["substituted"]
    accuracy = (counts["correct"] / total_words * 100.0) if total_words else 0.0
    return {
        "words": words,
        "summary": {"total_words": total_words, **counts, "accuracy": round(accuracy, 1)},
    }


def generate_feedback(section_score: SectionScore) -> List[str]:
    """Short, actionable feedback strings for a spoken section."""
    feedback: List[str] = []
    prompts = section_score.prompts
    if not prompts:
        return ["No responses were recorded for this section."]

    unanswered = [p.index + 1 for p in prompts if p.label == UNANSWERED_LABEL]
    strong = [p for p in prompts if p.points >= 1.0]
    weak = [p for p in prompts if p.accuracy is not None and p.points < 0.5]

    ratio = section_score.points_awarded / section_score.max_points if section_score.max_points else 0.0
    if ratio >= 0.8:
        feedback.append("Your responses closely matched the prompts.")
    elif ratio >= 0.5:
        feedback.append("Most responses were recognizable, with some words missed or changed.")
    else:
        feedback.append("Many responses differed from the prompts; practise repeating sentences word for word.")

    if strong:
        feedback.append(f"{len(strong)} of {len(prompts)} prompts were repeated almost exactly.")
    if unanswered:
        numbers = ", ".join(str(n) for n in unanswered)
        feedback.append(f"No speech was captured for prompt(s) {numbers}.")
    if weak:
        feedback.append("Speak clearly and at a steady pace so every word is recognized.")

    return feedback[:5]


ROUND_NAME = "Communication Round"

_PERFORMANCE_MESSAGES = {
    "outstanding": (
        "Outstanding communication skills! You scored {score}. Your clarity, fluency, "
        "and expression demonstrate excellent communication abilities."
    ),
    "good": (
        "Good communication skills with room for refinement. You scored {score}. "
        "Your basic communication is solid with some areas for enhancement."
    ),
    "average": (
        "Average communication performance. You scored {score}. With focused practice, "
        "you can significantly improve your communication effectiveness."
    ),
    "developing": (
        "Communication skills need substantial development. You scored {score}. Regular "
        "practice and structured learning will help build stronger communication abilities."
    ),
}

_INTRO_STRUCTURE_RE = re.compile(r"\b(name|background|experience|skills|education|goal)\b", re.IGNORECASE)


def performance_level(percentage: float) -> str:
    """Communication round level: outstanding from 85%, good from 70%, average from 55%."""
    for minimum, level in COMMUNICATION_PERFORMANCE_BANDS:
        if percentage >= minimum:
            return level
    return LOWEST_PERFORMANCE_LEVEL


def _response_rate(responses: Sequence[Optional[str]], prompt_count: int, min_length: int) -> float:
    if not prompt_count:
        return 0.0
    return sum(1 for r in responses if r and len(r) > min_length) / prompt_count


def generate_communication_feedback(result: Mapping[str, Any]) -> Dict[str, Any]:
    """Round-level feedback from an ``assess_communication`` result.

    A component is strong when its score is high and the candidate actually
    produced enough material (words, or attempts on at least 80% of prompts).
    Weaknesses fall back to the lowest-scoring component when everything is strong.

    Returns:
        Dict with "round_name", "level", "overall_performance", "strengths",
        "weaknesses" and "suggestions"
    """
    intro = result["self_introduction"]
    speaking = result["speaking"]
    listening = result["listening"]
    writing = result["writing"]

    transcript = intro.get("transcript") or ""
    essay = writing.get("essay") or ""
    intro_words = len(transcript.split())
    essay_words = len(essay.split())

    intro_strong = (
        intro["score"] >= STRONG_SELF_INTRODUCTION_SCORE
        and intro_words >= 50
        and bool(_INTRO_STRUCTURE_RE.search(transcript))
    )
    speaking_strong = (
        speaking["score"] >= STRONG_SPOKEN_SECTION_SCORE
        and _response_rate(speaking.get("recordings", []), len(speaking.get("sentences", [])),
                           MIN_ATTEMPT_LENGTH_SPEAKING) >= STRONG_RESPONSE_RATE
    )
    listening_strong = (
        listening["score"] >= STRONG_SPOKEN_SECTION_SCORE
        and _response_rate(listening.get("user_responses", []), len(listening.get("audio_texts", [])),
                           MIN_ATTEMPT_LENGTH_LISTENING) >= STRONG_RESPONSE_RATE
    )
    writing_strong = (
        writing["score"] >= STRONG_WRITING_SCORE
        and essay_words >= ESSAY_IDEAL_RANGE[0]
        and "." in essay
    )

    total = round(intro["score"] + speaking["score"] + listening["score"] + writing["score"], 1)
    percentage = total * 100 / COMMUNICATION_MAX_POINTS
    level = performance_level(percentage)
    score_text = f"{total:g}/{COMMUNICATION_MAX_POINTS:g} ({percentage:.1f}%)"

    strengths: List[str] = []
    if intro_strong:
        strengths.append("Clear and well-structured self-introduction")
    if speaking_strong:
        strengths.append("Good pronunciation and speaking clarity")
    if listening_strong:
        strengths.append("Strong listening comprehension and repetition accuracy")
    if writing_strong:
        strengths.append("Well-organized writing with good vocabulary")
    if len(transcript) > 200:
        strengths.append("Comprehensive self-introduction with good detail")
    if essay_words >= ESSAY_IDEAL_RANGE[0]:
        strengths.append("Met word count requirements in writing task")
    if not strengths:
        strengths.append("Completed all communication tasks within the time limit")

    weaknesses: List[str] = []
    suggestions: List[str] = []
    if not intro_strong:
        if len(transcript) < 100:
            weaknesses.append("Self-introduction was too brief - needs more detail about background and goals")
        else:
            weaknesses.append("Self-introduction lacked structure or key personal/professional information")
        suggestions.append("Practice structured self-introductions: name, background, skills, then career goals")
        suggestions.append("Record yourself speaking and analyze clarity, pace, and content organization")
    if not speaking_strong:
        weaknesses.append("Speaking clarity and pronunciation need improvement")
        suggestions.append("Practice reading aloud daily to improve pronunciation and fluency")
        suggestions.append("Use speech recognition apps to get feedback on pronunciation accuracy")
    if not listening_strong:
        weaknesses.append("Listening comprehension and accurate repetition need practice")
        suggestions.append("Practice active listening with audio materials and repeat-after-me exercises")
        suggestions.append("Watch English content with subtitles and gradually remove them")
    if not writing_strong:
        if essay_words < 100:
            weaknesses.append("Writing task was incomplete - did not meet minimum word requirements")
        else:
            weaknesses.append("Writing organization and grammar need improvement")
        suggestions.append("Practice structured writing: introduction, body, then conclusion")
        suggestions.append("Focus on grammar fundamentals and expand vocabulary through reading")
    if percentage < COMMUNICATION_PRACTICE_PERCENT:
        suggestions.append("Join speaking clubs or practice groups to build confidence")
        suggestions.append("Set aside 30 minutes daily for communication practice across all skills")

    if not weaknesses:
        components = [
            ("Self Introduction", intro["score"]),
            ("Speaking", speaking["score"]),
            ("Listening", listening["score"]),
            ("Writing", writing["score"]),
        ]
        weakest, _ = min(components, key=lambda c: c[1])
        weaknesses.append(f"{weakest} can be improved with targeted practice")
    if not suggestions:
        suggestions.append("Practice 10-15 minutes daily across speaking, listening, and writing")
        suggestions.append("Review your responses to identify clarity and structure improvements")

    return {
        "round_name": ROUND_NAME,
        "level": level,
        "overall_performance": _PERFORMANCE_MESSAGES[level].format(score=score_text),
        "strengths": strengths,
        "weaknesses": weaknesses,
        "suggestions": suggestions,
    }
