"""Request models for the scoring API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class NormalizeRequest(BaseModel):
    text: str = ""


class AccuracyRequest(BaseModel):
    reference: str = ""
    hypothesis: str = ""


class SectionRequest(BaseModel):
    """Either a named section or an explicit ceiling and attempt length."""
    expected: List[Optional[str]]
    actual: List[Optional[str]]
    section: Optional[str] = None
    max_points: Optional[float] = Field(default=None, ge=0)
    min_attempt_length: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_policy(self) -> "SectionRequest":
        if self.section is None and (self.max_points is None or self.min_attempt_length is None):
            raise ValueError("Provide 'section' or both 'max_points' and 'min_attempt_length'")
        return self


class CommunicationRequest(BaseModel):
    self_intro_transcript: Optional[str] = ""
    speaking_transcripts: List[Optional[str]] = Field(default_factory=list)
    listening_transcripts: List[Optional[str]] = Field(default_factory=list)
    essay: Optional[str] = ""
    expected_listening_texts: List[Optional[str]] = Field(default_factory=list)
    expected_speaking_texts: List[Optional[str]] = Field(default_factory=list)
    writing_topic: str = ""


class CodingTestResult(BaseModel):
    passed: bool = False


class CodingSolution(BaseModel):
    question_id: str = ""
    language: str = ""
    code: str = ""
    test_results: List[CodingTestResult] = Field(default_factory=list)


class CodingRequest(BaseModel):
    solutions: List[CodingSolution]

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [s.model_dump() for s in self.solutions]
