"""Data models for coding skill assessment."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AttemptStatus(str, Enum):
    """Outcome of a challenge attempt."""

    PASSED = "passed"
    FAILED = "failed"


class ChallengeAttempt(BaseModel):
    """A stored challenge attempt, read-only to the engine."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    challenge_id: str | None = None
    submitted_code: str | None = None
    score: float | None = Field(default=None, ge=0.0, le=100.0)
    status: AttemptStatus
    submitted_at: datetime | None = None

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeAttempt:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass
class CodeEvaluation:
    """Heuristic code score with the contribution of each signal."""

    score: int
    signals: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    @property
    def detected(self) -> list[str]:
        return [name for name, points in self.signals.items() if points > 0]

    @property
    def missing(self) -> list[str]:
        return [name for name, points in self.signals.items() if points == 0]


@dataclass
class AssessmentResult:
    """Outcome of assessing a submitted code sample."""

    user_id: str
    project_id: str
    challenge_id: str | None
    score: int
    passed: bool
    feedback: str
    can_join_project: bool
    success: bool = True
    hints: list[str] = field(default_factory=list)
    signals: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.can_join_project and not self.passed:
            raise ValueError("can_join_project=True requires passed=True")

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "userId": self.user_id,
            "projectId": self.project_id,
            "challengeId": self.challenge_id,
            "score": self.score,
            "passed": self.passed,
            "feedback": self.feedback,
            "canJoinProject": self.can_join_project,
            "hints": list(self.hints),
            "signals": dict(self.signals),
        }
