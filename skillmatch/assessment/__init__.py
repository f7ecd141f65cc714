"""Coding skill assessment.

Public API:
    - AssessmentService: grade a submission and decide join eligibility
    - evaluate_code / explain_code: structural heuristic code scoring
    - generate_feedback: score-to-message mapping
"""

from skillmatch.assessment.evaluator import SIGNALS, evaluate_code, explain_code
from skillmatch.assessment.feedback import generate_feedback
from skillmatch.assessment.models import (
    AssessmentResult,
    AttemptStatus,
    ChallengeAttempt,
    CodeEvaluation,
)
from skillmatch.assessment.service import AssessmentService

__all__ = [
    "AssessmentService",
    "AssessmentResult",
    "AttemptStatus",
    "ChallengeAttempt",
    "CodeEvaluation",
    "SIGNALS",
    "evaluate_code",
    "explain_code",
    "generate_feedback",
]
