"""Failed-attempt tracking and learning-support detection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillmatch.assessment.models import AttemptStatus, ChallengeAttempt
from skillmatch.learning.models import AttemptAnalytics, FailureSummary
from skillmatch.scoring.config import ScoringConfig
from skillmatch.utils.documents import load_document

logger = logging.getLogger(__name__)

# Attempts this many points below the passing score count as near misses.
_NEAR_PASSING_MARGIN = 10


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class FailureTracker:
    """Aggregates failed attempts and flags users who need learning support."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    def needs_learning_support(self, failed_attempt_count: int) -> bool:
        """True once a user's failed attempts reach the configured maximum."""
        if failed_attempt_count < 0:
            raise ValueError(
                f"failed_attempt_count must be non-negative (got {failed_attempt_count})"
            )
        return failed_attempt_count >= self.max_attempts

    def summarize_failures(
        self, attempts: Iterable[ChallengeAttempt]
    ) -> dict[str, FailureSummary]:
        """Group failed attempts by user.

        Passed attempts are ignored. Users appear in first-seen order.
        """
        scores: dict[str, list[float]] = {}
        projects: dict[str, set[str]] = {}

        for attempt in attempts:
            if attempt.status is not AttemptStatus.FAILED:
                continue
            scores.setdefault(attempt.user_id, []).append(attempt.score or 0.0)
            projects.setdefault(attempt.user_id, set()).add(attempt.project_id)

        return {
            user_id: FailureSummary(
                user_id=user_id,
                failure_count=len(user_scores),
                avg_score=_mean(user_scores),
                unique_projects=len(projects[user_id]),
            )
            for user_id, user_scores in scores.items()
        }

    def users_needing_support(
        self, attempts: Iterable[ChallengeAttempt]
    ) -> list[FailureSummary]:
        """Summaries of users whose failures reached the maximum."""
        flagged = [
            summary
            for summary in self.summarize_failures(attempts).values()
            if self.needs_learning_support(summary.failure_count)
        ]
        if flagged:
            logger.info(
                "%d user(s) reached %d failed attempts", len(flagged), self.max_attempts
            )
        return flagged

    def users_near_threshold(
        self, attempts: Iterable[ChallengeAttempt]
    ) -> list[FailureSummary]:
        """Summaries of users close to, but not yet at, the maximum."""
        return [
            summary
            for summary in self.summarize_failures(attempts).values()
            if self.config.near_threshold_attempts
            <= summary.failure_count
            < self.max_attempts
        ]

    def spans_multiple_projects(self, summary: FailureSummary) -> bool:
        """True if the user failed across enough projects to suggest a broad gap."""
        return summary.unique_projects >= self.config.multi_project_failure_count

    def analyze_attempts(self, attempts: Iterable[ChallengeAttempt]) -> AttemptAnalytics:
        """Compute pass/fail statistics over a batch of attempts."""
        passed: list[float] = []
        failed: list[float] = []
        near_passing = 0
        lower_bound = self.config.min_passing_score - _NEAR_PASSING_MARGIN

        for attempt in attempts:
            score = attempt.score or 0.0
            if attempt.status is AttemptStatus.PASSED:
                passed.append(score)
            else:
                failed.append(score)
                if lower_bound <= score < self.config.min_passing_score:
                    near_passing += 1

        return AttemptAnalytics(
            total_attempts=len(passed) + len(failed),
            passed_attempts=len(passed),
            failed_attempts=len(failed),
            avg_passed_score=_mean(passed),
            avg_failed_score=_mean(failed),
            near_passing_attempts=near_passing,
        )


def load_attempts(path: Path | str) -> list[ChallengeAttempt]:
    """Load challenge attempts from a YAML/JSON list or ``{"attempts": [...]}``."""
    data = load_document(path)
    if isinstance(data, dict):
        data = data.get("attempts", [])
    if not isinstance(data, list):
        raise ValueError(f"Attempts document must be a list: {path}")
    return [ChallengeAttempt.model_validate(entry) for entry in data]
