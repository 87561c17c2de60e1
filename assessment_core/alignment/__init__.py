"""Alignment utilities for matching reference text to recognized speech."""
from .aligner import align, align_words, word_accuracy, word_error_rate
from .normalizer import normalize
from .tokenizer import tokenize

__all__ = [
    "align",
    "align_words",
    "normalize",
    "tokenize",
    "word_accuracy",
    "word_error_rate",
]
