"""Tests for normalization, tokenization and word alignment."""
import jiwer
import pytest

from assessment_core.alignment.aligner import align, align_words, word_accuracy, word_error_rate
from assessment_core.alignment.edit_distance import align_sequences, edit_distance
from assessment_core.alignment.normalizer import normalize
from assessment_core.alignment.tokenizer import tokenize

PAIRS = [
    ("the sky is blue", "the sky is blue"),
    ("the sky is blue", "sky is blue"),
    ("sky is blue", "the sky is blue"),
    ("good morning everyone", "good morning"),
    ("please close the door", "please clothes the door behind you"),
    ("hello", "hello there my friend how are you"),
    ("one two three", ""),
    ("", "something"),
    ("", ""),
    ("Don't stop, believing!", "dont stop believing"),
]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello, World!", "hello world"),
        ("  The   sky\tis\nblue. ", "the sky is blue"),
        ("well—actually (maybe) [not]", "well actually maybe not"),
        ("`quoted` \"text\"; here: yes?", "quoted text here yes"),
        ("don't", "don t"),
        ("...", ""),
        ("", ""),
    ],
)
def test_normalize(text, expected):
    assert normalize(text) == expected


def test_normalize_none_is_empty():
    assert normalize(None) == ""


def test_tokenize_discards_empty_tokens():
    assert tokenize(" The sky,  is -- blue. ") == ["the", "sky", "is", "blue"]
    assert tokenize("") == []


def test_identity():
    assert word_accuracy("the sky is blue", "the sky is blue") == 1.0


def test_case_and_punctuation_are_ignored():
    assert word_accuracy("The sky is blue.", "the SKY, is blue") == 1.0


def test_empty_reference_rule():
    assert word_error_rate("", "") == 0.0
    assert word_accuracy("", "") == 1.0
    assert word_error_rate("", "anything") == 1.0
    assert word_accuracy("", "anything") == 0.0
    # punctuation-only reference has no tokens either
    assert word_accuracy("?!", "") == 1.0


def test_empty_hypothesis_is_total_error():
    assert word_accuracy("one two three", "") == 0.0


def test_accuracy_is_not_symmetric():
    assert word_accuracy("the sky is blue", "sky is blue") == pytest.approx(0.75)
    assert word_accuracy("sky is blue", "the sky is blue") == pytest.approx(2 / 3)


def test_long_hypothesis_is_clamped():
    result = align("hello", "hello there my friend how are you")
    assert result.edit_distance == 6
    assert word_error_rate("hello", "hello there my friend how are you") == 1.0
    assert word_accuracy("hello", "hello there my friend how are you") == 0.0


@pytest.mark.parametrize("reference, hypothesis", PAIRS)
def test_accuracy_is_bounded(reference, hypothesis):
    assert 0.0 <= word_accuracy(reference, hypothesis) <= 1.0
    assert 0.0 <= word_error_rate(reference, hypothesis) <= 1.0


def test_align_counts_tokens():
    result = align("Good morning, everyone!", "good morning")
    assert result.reference_token_count == 3
    assert result.hypothesis_token_count == 2
    assert result.edit_distance == 1
    assert result.accuracy == pytest.approx(2 / 3)


def test_edit_distance_unit_costs():
    assert edit_distance([], []) == 0
    assert edit_distance(["a", "b"], []) == 2
    assert edit_distance([], ["a", "b", "c"]) == 3
    assert edit_distance(["a", "b", "c"], ["a", "x", "c", "d"]) == 2
    assert edit_distance(["kitten"], ["sitting"]) == 1


def test_edit_distance_long_and_lopsided_inputs():
    words = ["word"] * 5000
    assert edit_distance(words, ["word"]) == 4999
    assert edit_distance(["word"], words) == 4999
    # one-token shift: drop the leading "a", append one at the end
    assert edit_distance(["a", "b"] * 300, ["b", "a"] * 300) == 2


def test_align_sequences_path():
    ops = align_sequences(["the", "sky", "is", "blue"], ["sky", "is", "bleu"])
    assert ops == [
        ("del", 0, None),
        ("match", 1, 0),
        ("match", 2, 1),
        ("sub", 3, 2),
    ]


@pytest.mark.parametrize("reference, hypothesis", PAIRS)
def test_alignment_path_cost_matches_distance(reference, hypothesis):
    ref, hyp = tokenize(reference), tokenize(hypothesis)
    ops = align_sequences(ref, hyp)
    assert sum(1 for op, _, _ in ops if op != "match") == edit_distance(ref, hyp)
    assert [ri for _, ri, _ in ops if ri is not None] == list(range(len(ref)))
    assert [hj for _, _, hj in ops if hj is not None] == list(range(len(hyp)))


def test_align_words_reports_insertions():
    aligned = align_words("good morning", "good good morning")
    assert [a.op for a in aligned] == ["ins", "match", "match"]
    assert aligned[0].ref_word is None
    assert aligned[0].hyp_word == "good"


@pytest.mark.parametrize("reference, hypothesis", [p for p in PAIRS if tokenize(p[0])])
def test_word_error_rate_agrees_with_jiwer(reference, hypothesis):
    ref, hyp = normalize(reference), normalize(hypothesis)
    if not hyp:
        expected = 1.0
    else:
        expected = min(1.0, jiwer.wer(ref, hyp))
    assert word_error_rate(reference, hypothesis) == pytest.approx(expected)
