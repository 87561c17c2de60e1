"""Tests for per-response banding and section totals."""
import pytest

from assessment_core.models.utterance import Utterance
from assessment_core.scoring.bands import band_label, score_response
from assessment_core.scoring.response_set import (
    UnknownSectionError,
    evaluate_section,
    score_response_set,
    score_section,
    score_utterance,
)
from assessment_core.scoring.rules import (
    MIN_ATTEMPT_LENGTH_LISTENING,
    MIN_ATTEMPT_LENGTH_SPEAKING,
    SPEAKING_MAX_POINTS,
)


@pytest.mark.parametrize(
    "accuracy, points",
    [
        (1.0, 1.0),
        (0.95, 1.0),
        (0.90, 1.0),
        (0.89, 0.8),
        (0.85, 0.8),
        (0.80, 0.8),
        (0.70, 0.5),
        (0.65, 0.5),
    ],
)
def test_accuracy_bands(accuracy, points):
    assert score_response(accuracy, "", MIN_ATTEMPT_LENGTH_SPEAKING) == points


def test_low_accuracy_attempt_gets_minimal_credit():
    assert score_response(0.30, "I tried saying it", MIN_ATTEMPT_LENGTH_SPEAKING) == 0.2
    assert band_label(0.30, "I tried saying it", MIN_ATTEMPT_LENGTH_SPEAKING) == "attempted"


def test_short_low_accuracy_response_gets_nothing():
    assert score_response(0.30, "hi", MIN_ATTEMPT_LENGTH_SPEAKING) == 0.0
    # length must exceed the minimum, not equal it
    assert score_response(0.30, "abcdefghij", MIN_ATTEMPT_LENGTH_SPEAKING) == 0.0
    assert band_label(0.30, "hi", MIN_ATTEMPT_LENGTH_SPEAKING) == "none"


def test_listening_attempt_threshold_is_shorter():
    assert score_response(0.0, "hello", MIN_ATTEMPT_LENGTH_LISTENING) == 0.0
    assert score_response(0.0, "hello!", MIN_ATTEMPT_LENGTH_LISTENING) == 0.2


def test_attempt_flag_can_be_passed_directly():
    assert score_response(0.30, True, MIN_ATTEMPT_LENGTH_SPEAKING) == 0.2
    assert score_response(0.30, False, MIN_ATTEMPT_LENGTH_SPEAKING) == 0.0


def test_end_to_end_section():
    expected = ["the sky is blue", "good morning everyone"]
    actual = ["the sky is blue", "good morning"]
    assert score_section(expected, actual, 5) == 1.5


def test_missing_response_scores_zero():
    assert score_section(["say hello"], [""], 5) == 0.0
    assert score_section(["say hello"], [None], 5) == 0.0
    assert score_section(["say hello"], ["   "], 5) == 0.0
    assert score_section([""], ["hello there friend"], 5) == 0.0
    assert score_section([], [], 5) == 0.0


def test_score_section_defaults_to_speaking_attempt_length():
    # ten characters is not longer than the speaking threshold
    assert score_section(["the sky is blue"], ["cloudy day"], 5) == 0.0
    assert score_section(["the sky is blue"], ["cloudy day"], 5, MIN_ATTEMPT_LENGTH_LISTENING) == 0.2


def test_section_is_clamped_to_max_points():
    sentences = ["the sky is blue"] * 7
    assert score_section(sentences, sentences, SPEAKING_MAX_POINTS) == SPEAKING_MAX_POINTS
    assert score_section(sentences[:2], sentences[:2], 1) == 1


def test_section_total_is_rounded():
    expected = ["one two three four five"] * 3
    actual = ["one two three four six"] * 3
    # 0.8 + 0.8 + 0.8 drifts above 2.4 in floating point
    assert score_section(expected, actual, 5) == 2.4


def test_mismatched_lengths_score_only_shared_indices():
    assert score_section(["a b c", "d e f", "g h i"], ["a b c"], 5) == 1.0
    assert score_section(["a b c"], ["a b c", "d e f", "g h i"], 5) == 1.0


def test_attempt_threshold_depends_on_section():
    expected = ["the quick brown fox jumps"]
    actual = ["a slow cat"]
    assert score_response_set(expected, actual, 5, MIN_ATTEMPT_LENGTH_LISTENING) == 0.2
    assert score_response_set(expected, actual, 5, MIN_ATTEMPT_LENGTH_SPEAKING) == 0.0


def test_score_utterance_breakdown():
    scored = score_utterance(Utterance("good morning everyone", "good morning"), MIN_ATTEMPT_LENGTH_SPEAKING, index=3)
    assert scored.index == 3
    assert scored.accuracy == pytest.approx(2 / 3)
    assert scored.points == 0.5
    assert scored.label == "fair"
    assert scored.attempted is True

    unanswered = score_utterance(Utterance("say hello"), MIN_ATTEMPT_LENGTH_SPEAKING)
    assert unanswered.accuracy is None
    assert unanswered.points == 0.0
    assert unanswered.label == "unanswered"


def test_evaluate_section_uses_section_policy():
    result = evaluate_section("listening", ["the quick brown fox jumps", "say hello"], ["a slow cat", ""])
    assert result.section == "listening"
    assert result.max_points == 5.0
    assert result.points_awarded == 0.2
    assert [p.label for p in result.prompts] == ["attempted", "unanswered"]

    as_dict = result.to_dict()
    assert as_dict["score"] == 0.2
    assert as_dict["prompts"][0]["accuracy"] == 0.0


def test_evaluate_section_rejects_unknown_section():
    with pytest.raises(UnknownSectionError):
        evaluate_section("reading", ["a"], ["a"])
