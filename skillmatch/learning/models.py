"""Data models for failure tracking and learning recommendations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class RecommendationType(str, Enum):
    """Kind of learning material suggested."""

    LANGUAGE = "language"
    TOPIC = "topic"
    FUNDAMENTALS = "fundamentals"
    PRACTICE = "practice"


class LearningDifficulty(str, Enum):
    """Difficulty of suggested learning material."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LearningRecommendation(BaseModel):
    """A learning recommendation; persisted by the caller."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    type: RecommendationType
    target_skill: str
    current_level: float | None = None
    target_level: float | None = None
    difficulty: LearningDifficulty
    reason: str = ""

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


@dataclass
class FailureSummary:
    """Aggregated failed-attempt history for one user.

    Attributes:
        user_id: The user the failures belong to.
        failure_count: Number of failed attempts.
        avg_score: Mean score of failed attempts (missing scores count as 0).
        unique_projects: Number of distinct projects with a failed attempt.
    """

    user_id: str
    failure_count: int
    avg_score: float
    unique_projects: int = 0

    def __post_init__(self) -> None:
        if self.failure_count < 0:
            raise ValueError(
                f"failure_count must be non-negative (got {self.failure_count})"
            )
        if not (0.0 <= self.avg_score <= 100.0):
            raise ValueError(
                f"avg_score must be between 0 and 100 (got {self.avg_score})"
            )


@dataclass
class AttemptAnalytics:
    """System-wide statistics over a batch of challenge attempts."""

    total_attempts: int
    passed_attempts: int
    failed_attempts: int
    avg_passed_score: float
    avg_failed_score: float
    near_passing_attempts: int

    @property
    def failure_rate(self) -> float:
        if not self.total_attempts:
            return 0.0
        return self.failed_attempts / self.total_attempts

    @property
    def score_gap(self) -> float:
        return self.avg_passed_score - self.avg_failed_score

