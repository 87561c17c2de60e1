"""Point awards for spoken responses and assessment sections."""
from .bands import band_label, score_response
from .heuristics import score_self_introduction, score_writing
from .response_set import (
    UnknownSectionError,
    evaluate_section,
    score_response_set,
    score_section,
    score_utterance,
)
from .sections import (
    grade_for,
    score_aptitude_section,
    score_coding_solution,
    score_coding_solutions,
    summarize_assessment,
)

__all__ = [
    "band_label",
    "score_response",
    "score_self_introduction",
    "score_writing",
    "UnknownSectionError",
    "evaluate_section",
    "score_response_set",
    "score_section",
    "score_utterance",
    "grade_for",
    "score_aptitude_section",
    "score_coding_solution",
    "score_coding_solutions",
    "summarize_assessment",
]
