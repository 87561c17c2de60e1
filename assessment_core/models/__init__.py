"""Data models shared by the alignment and scoring modules."""
from .aligned_word import AlignedWord
from .utterance import AlignmentResult, PromptScore, SectionScore, Utterance

__all__ = ["AlignedWord", "AlignmentResult", "PromptScore", "SectionScore", "Utterance"]
