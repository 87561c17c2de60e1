"""Alignment orchestration between reference text and recognized text."""
from __future__ import annotations

from typing import List, Optional

from assessment_core.models.aligned_word import AlignedWord
from assessment_core.models.utterance import AlignmentResult
from .edit_distance import align_sequences, edit_distance
from .tokenizer import tokenize


def align(reference: Optional[str], hypothesis: Optional[str]) -> AlignmentResult:
    """Align a reference sentence with a recognized transcript.

    Both strings are normalized and tokenized first; either may be empty.

    Args:
        reference: The sentence the candidate was asked to say
        hypothesis: The speech recognizer's final transcript

    Returns:
        AlignmentResult with token counts and word-level edit distance
    """
    ref_tokens = tokenize(reference)
    hyp_tokens = tokenize(hypothesis)
    return AlignmentResult(
        reference_token_count=len(ref_tokens),
        hypothesis_token_count=len(hyp_tokens),
        edit_distance=edit_distance(ref_tokens, hyp_tokens),
    )


def word_error_rate(reference: Optional[str], hypothesis: Optional[str]) -> float:
    """Word error rate in [0, 1].

    An empty reference yields 0.0 when nothing was said and 1.0 otherwise.
    Long hypotheses can push the raw ratio above 1; it is clamped.
    """
    return align(reference, hypothesis).word_error_rate


def word_accuracy(reference: Optional[str], hypothesis: Optional[str]) -> float:
    """``1 - word_error_rate``. Not symmetric: the divisor is the reference length."""
    return 1.0 - word_error_rate(reference, hypothesis)


def align_words(reference: Optional[str], hypothesis: Optional[str]) -> List[AlignedWord]:
    """Align reference tokens to hypothesis tokens word by word.

    Args:
        reference: The reference text to align
        hypothesis: The recognized text

    Returns:
        List of AlignedWord objects representing the alignment
    """
    ref_tokens = tokenize(reference)
    hyp_tokens = tokenize(hypothesis)

    aligned: List[AlignedWord] = []
    for op, ri, hj in align_sequences(ref_tokens, hyp_tokens):
        ref_word = ref_tokens[ri] if ri is not None else None
        hyp_word = hyp_tokens[hj] if hj is not None else None
        aligned.append(AlignedWord(ref_word=ref_word, hyp_word=hyp_word, op=op))
    return aligned
