"""Scorers for the non-spoken sections and the overall assessment summary."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .rules import ASSESSMENT_MAX_POINTS, CODING_PASS_BANDS, GRADE_BANDS, LOWEST_GRADE


def score_aptitude_section(answers: Sequence[Any], correct_answers: Sequence[Any]) -> int:
    """Count answers equal to the correct answer at the same position.

    Answers past the end of ``correct_answers`` are ignored.
    """
    return sum(1 for answer, correct in zip(answers, correct_answers) if answer == correct)


def score_coding_solution(passed: int, total: int) -> int:
    if total <= 0:
        return 0
    pass_rate = passed / total
    for minimum, points in CODING_PASS_BANDS:
        if pass_rate >= minimum:
            return points
    return 0


def score_coding_solutions(solutions: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Annotate each solution with ``score``, ``passed_tests`` and ``total_tests``.

    Args:
        solutions: Dicts carrying a ``test_results`` list of ``{"passed": bool}``

    Returns:
        New dicts with the original keys plus the score fields
    """
    scored: List[Dict[str, Any]] = []
    for solution in solutions:
        test_results = solution.get("test_results") or []
        passed = sum(1 for result in test_results if result.get("passed"))
        total = len(test_results)
        scored.append(
            {
                **solution,
                "score": score_coding_solution(passed, total),
                "passed_tests": passed,
                "total_tests": total,
            }
        )
    return scored


def grade_for(percentage: float) -> str:
    """Letter grade for an overall percentage: A+ from 90, down to D below 50."""
    for minimum, grade in GRADE_BANDS:
        if percentage >= minimum:
            return grade
    return LOWEST_GRADE


def summarize_assessment(
    aptitude_scores: Mapping[str, float],
    communication: Mapping[str, Any],
    coding_results: Sequence[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Combine section results into the overall total, percentage and grade."""
    aptitude_total = sum(aptitude_scores.values())
    communication_total = communication.get("total", 0.0)
    coding_total = sum(result.get("score", 0) or 0 for result in coding_results)

    total = round(aptitude_total + communication_total + coding_total, 1)
    percentage = int(round(total / ASSESSMENT_MAX_POINTS * 100))
    return {
        "aptitude": aptitude_total,
        "communication": communication_total,
        "coding": coding_total,
        "total_score": total,
        "max_score": ASSESSMENT_MAX_POINTS,
        "percentage": percentage,
        "grade": grade_for(percentage),
    }
