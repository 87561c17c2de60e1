"""Data models for spoken responses and their scores."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


@dataclass(frozen=True)
class Utterance:
    """A single spoken response.

    Attributes:
        expected_text: The sentence the candidate was asked to say or repeat
        recognized_text: Final transcript from speech recognition ("" if nothing was captured)
    """
    expected_text: str
    recognized_text: str = ""


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of aligning a reference token sequence with a hypothesis."""
    reference_token_count: int
    hypothesis_token_count: int
    edit_distance: int

    @property
    def word_error_rate(self) -> float:
        if self.reference_token_count == 0:
            return 0.0 if self.hypothesis_token_count == 0 else 1.0
        return _clamp01(self.edit_distance / self.reference_token_count)

    @property
    def accuracy(self) -> float:
        return 1.0 - self.word_error_rate


@dataclass(frozen=True)
class PromptScore:
    """Score of one prompt within a section."""
    index: int
    accuracy: Optional[float]  # None when the prompt was not scored
    points: float
    label: str
    attempted: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "accuracy": None if self.accuracy is None else round(self.accuracy, 3),
            "points": self.points,
            "label": self.label,
            "attempted": self.attempted,
        }


@dataclass
class SectionScore:
    """Aggregate score of a section.

    ``points_awarded`` is always within ``[0, max_points]``.
    """
    section: str
    points_awarded: float
    max_points: float
    prompts: List[PromptScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "score": self.points_awarded,
            "max_score": self.max_points,
            "prompts": [p.to_dict() for p in self.prompts],
        }
