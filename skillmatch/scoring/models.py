"""Data models for skill matching and project recommendation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from skillmatch.scoring.matchers import canonical_name, proficiency_value

ExperienceTier = Literal["beginner", "intermediate", "advanced", "expert"]


def _lower_tier(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _ensure_unique(names: list[str], kind: str) -> None:
    seen: set[str] = set()
    for name in names:
        key = canonical_name(name)
        if key in seen:
            raise ValueError(f"Duplicate {kind} '{name}' in profile")
        seen.add(key)


class UserTopic(BaseModel):
    """A topic the user is experienced in or interested in."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Topic name")
    experience_level: int = Field(default=0, ge=0, le=5, description="0-5")
    interest_level: int = Field(default=0, ge=0, le=5, description="0-5")


class UserLanguage(BaseModel):
    """A programming language proficiency entry."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Language name")
    proficiency_level: ExperienceTier | Annotated[float, Field(ge=0.0, le=5.0)] = (
        Field(default="beginner", description="Tier name or numeric 0-5 level")
    )
    years_experience: float = Field(default=0.0, ge=0.0)

    @field_validator("proficiency_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return _lower_tier(value)

    @property
    def proficiency(self) -> float:
        """Proficiency on the numeric 0-5 scale."""
        return proficiency_value(self.proficiency_level)


class UserProfile(BaseModel):
    """Read-only snapshot of a user's skills."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="User identifier")
    years_experience: float = Field(default=0.0, ge=0.0)
    topics: list[UserTopic] = Field(default_factory=list)
    languages: list[UserLanguage] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> UserProfile:
        _ensure_unique([t.name for t in self.topics], "topic")
        _ensure_unique([lang.name for lang in self.languages], "language")
        return self

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> UserProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class ProjectTopic(BaseModel):
    """A topic requirement of a project."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    is_primary: bool = False


class ProjectLanguage(BaseModel):
    """A language requirement of a project."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    required_level: ExperienceTier = "beginner"
    is_primary: bool = False

    @field_validator("required_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return _lower_tier(value)

    @property
    def required_proficiency(self) -> float:
        return proficiency_value(self.required_level)


class ProjectProfile(BaseModel):
    """Read-only snapshot of a project's requirements."""

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(..., min_length=1)
    title: str = Field(default="")
    required_experience_level: ExperienceTier = "beginner"
    topics: list[ProjectTopic] = Field(default_factory=list)
    languages: list[ProjectLanguage] = Field(default_factory=list)
    technologies: list[str] = Field(
        default_factory=list, description="Technology tags (defaults to languages)"
    )

    @field_validator("required_experience_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return _lower_tier(value)

    @property
    def tech_stack(self) -> list[str]:
        """Technology tags used for diversity re-ranking."""
        if self.technologies:
            return list(self.technologies)
        return [lang.name for lang in self.languages]

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ProjectProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


def _check_score(name: str, value: float) -> None:
    if not (0.0 <= value <= 100.0):
        raise ValueError(f"{name} must be between 0 and 100 (got {value})")


@dataclass
class TopicScore:
    """Topic coverage breakdown."""

    score: float
    matches: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_score("score", self.score)


@dataclass
class LanguageScore:
    """Language proficiency breakdown."""

    score: float
    matches: list[str] = field(default_factory=list)
    gaps: list[str] = field(default_factory=list)
    coverage: float = 1.0

    def __post_init__(self) -> None:
        _check_score("score", self.score)
        if not (0.0 <= self.coverage <= 1.0):
            raise ValueError(
                f"coverage must be between 0.0 and 1.0 (got {self.coverage})"
            )


@dataclass
class ExperienceAlignment:
    """How the user's years of experience compare to the project tier."""

    user_years: float
    required_level: str
    required_years: float
    score: float

    @property
    def meets_requirement(self) -> bool:
        return self.user_years >= self.required_years

    def to_dict(self) -> dict:
        return {
            "userYears": self.user_years,
            "requiredLevel": self.required_level,
            "requiredYears": self.required_years,
            "score": self.score,
            "meetsRequirement": self.meets_requirement,
        }


@dataclass
class MatchFactors:
    """Human-readable explanation of a project score."""

    topic_matches: list[str]
    topic_gaps: list[str]
    language_matches: list[str]
    language_gaps: list[str]
    experience_level: ExperienceAlignment

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys collaborators expect."""
        return {
            "topicMatches": list(self.topic_matches),
            "topicGaps": list(self.topic_gaps),
            "languageMatches": list(self.language_matches),
            "languageGaps": list(self.language_gaps),
            "experienceLevel": self.experience_level.to_dict(),
        }


@dataclass
class ProjectScore:
    """Full scoring result for one (user, project) pair."""

    project_id: str
    title: str
    score: float
    topic: TopicScore
    language: LanguageScore
    difficulty: float
    match_factors: MatchFactors
    technologies: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_score("score", self.score)
        _check_score("difficulty", self.difficulty)


@dataclass
class Recommendation:
    """A recommended project for a user."""

    project_id: str
    title: str
    score: float
    match_factors: MatchFactors
    technologies: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_score("score", self.score)

    @classmethod
    def from_project_score(cls, result: ProjectScore) -> Recommendation:
        return cls(
            project_id=result.project_id,
            title=result.title,
            score=result.score,
            match_factors=result.match_factors,
            technologies=list(result.technologies),
        )

    def to_dict(self) -> dict:
        return {
            "projectId": self.project_id,
            "title": self.title,
            "score": self.score,
            "matchFactors": self.match_factors.to_dict(),
            "technologies": list(self.technologies),
        }
