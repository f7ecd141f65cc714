"""Coding skill assessment service."""

from __future__ import annotations

import logging

from skillmatch.assessment.evaluator import explain_code
from skillmatch.assessment.feedback import generate_feedback, hints_for
from skillmatch.assessment.models import AssessmentResult
from skillmatch.scoring.config import ScoringConfig

logger = logging.getLogger(__name__)


class AssessmentService:
    """Grades submitted code and decides project-join eligibility."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    @property
    def min_passing_score(self) -> int:
        return self.config.min_passing_score

    def assess(
        self,
        user_id: str,
        project_id: str,
        code: str | None,
        challenge_id: str | None = None,
    ) -> AssessmentResult:
        """Assess a code submission.

        A low score is a normal outcome, not an error: the result always
        reports ``success=True`` and carries ``passed=False``.
        """
        evaluation = explain_code(code)
        passed = evaluation.score >= self.min_passing_score

        result = AssessmentResult(
            user_id=user_id,
            project_id=project_id,
            challenge_id=challenge_id,
            score=evaluation.score,
            passed=passed,
            feedback=generate_feedback(evaluation.score),
            can_join_project=passed,
            hints=[] if passed else hints_for(evaluation.missing),
            signals=evaluation.signals,
        )

        logger.info(
            "Assessed user %s for project %s: score=%d passed=%s",
            user_id,
            project_id,
            result.score,
            result.passed,
        )
        return result

    # Alias kept for callers of the older service API.
    assess_coding_skill = assess

    def format_result(self, result: AssessmentResult) -> str:
        """Format an assessment result for CLI output."""
        lines = [
            f"Score: {result.score}/100 "
            f"({'PASSED' if result.passed else 'FAILED'}, "
            f"passing={self.min_passing_score})",
            f"Can join project: {'yes' if result.can_join_project else 'no'}",
            f"Feedback: {result.feedback}",
        ]
        detected = [name for name, points in result.signals.items() if points]
        if detected:
            lines.append(f"Signals: {', '.join(detected)}")
        for hint in result.hints:
            lines.append(f"Hint: {hint}")
        return "\n".join(lines)
