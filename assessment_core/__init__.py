"""Core scoring for spoken responses: normalization, alignment, banding."""
from .alignment import normalize, word_accuracy, word_error_rate
from .scoring import score_response, score_response_set, score_section

__all__ = [
    "normalize",
    "word_accuracy",
    "word_error_rate",
    "score_response",
    "score_response_set",
    "score_section",
]
