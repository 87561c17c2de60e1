"""Communication test assessment.

Combines alignment scoring of the speaking and listening sections with
structural checks of the self introduction and essay.
"""

from .pipeline import assess_communication, assess_spoken_section
from .report import build_prompt_report, generate_communication_feedback, generate_feedback, performance_level

__all__ = [
    "assess_communication",
    "assess_spoken_section",
    "build_prompt_report",
    "generate_communication_feedback",
    "generate_feedback",
    "performance_level",
]
