"""Scoring policy constants for spoken-response sections."""
from __future__ import annotations

# Accuracy bands: (minimum accuracy, points per prompt, label)
# Checked in order; the first band whose minimum is reached wins.
ACCURACY_BANDS = (
    (0.90, 1.0, "excellent"),
    (0.80, 0.8, "good"),
    (0.65, 0.5, "fair"),
)

# Credit for a low-accuracy response that was still a real attempt
ATTEMPT_POINTS = 0.2
ATTEMPT_LABEL = "attempted"

NO_CREDIT_POINTS = 0.0
NO_CREDIT_LABEL = "none"

# Prompts where the candidate produced no transcript
UNANSWERED_LABEL = "unanswered"

# Minimum raw transcript length (characters) that counts as an attempt
MIN_ATTEMPT_LENGTH_SPEAKING = 10  # longer read-aloud sentences
MIN_ATTEMPT_LENGTH_LISTENING = 5  # short repeat-back phrases

# Section ceilings
SPEAKING_MAX_POINTS = 5.0
LISTENING_MAX_POINTS = 5.0
SELF_INTRODUCTION_MAX_POINTS = 10
WRITING_MAX_POINTS = 10
COMMUNICATION_MAX_POINTS = (
    SPEAKING_MAX_POINTS + LISTENING_MAX_POINTS + SELF_INTRODUCTION_MAX_POINTS + WRITING_MAX_POINTS
)

SECTION_SPEAKING = "speaking"
SECTION_LISTENING = "listening"

# Alignment-scored sections: name -> (max points, minimum attempt length)
SECTION_POLICIES = {
    SECTION_SPEAKING: (SPEAKING_MAX_POINTS, MIN_ATTEMPT_LENGTH_SPEAKING),
    SECTION_LISTENING: (LISTENING_MAX_POINTS, MIN_ATTEMPT_LENGTH_LISTENING),
}

# Decimal places kept on section totals
SECTION_SCORE_DECIMALS = 1

# Whole-assessment ceilings
APTITUDE_MAX_POINTS = 60  # 3 sections x 20 multiple-choice questions
CODING_MAX_POINTS = 100  # 2 problems x 50
ASSESSMENT_MAX_POINTS = APTITUDE_MAX_POINTS + COMMUNICATION_MAX_POINTS + CODING_MAX_POINTS

# Coding pass-rate bands: (minimum pass rate, points)
CODING_PASS_BANDS = (
    (1.0, 50),
    (0.8, 40),
    (0.6, 30),
    (0.4, 20),
    (0.2, 10),
)

# Overall grade from the rounded assessment percentage: (minimum percent, grade)
GRADE_BANDS = (
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C"),
)
LOWEST_GRADE = "D"

# Communication round feedback: (minimum percent, performance level)
COMMUNICATION_PERFORMANCE_BANDS = (
    (85, "outstanding"),
    (70, "good"),
    (55, "average"),
)
LOWEST_PERFORMANCE_LEVEL = "developing"

# Below this percentage general practice suggestions are added
COMMUNICATION_PRACTICE_PERCENT = 70

# A component counts as strong at or above these scores
STRONG_SELF_INTRODUCTION_SCORE = 7
STRONG_SPOKEN_SECTION_SCORE = 4
STRONG_WRITING_SCORE = 7
# Share of prompts that must have a real attempt for a strong spoken section
STRONG_RESPONSE_RATE = 0.8
