"""Configuration settings for the skill matching engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Scoring, assessment and learning-support configuration.

    All settings have sensible defaults and can be overridden via
    environment variables with `SKILLMATCH_` prefix or a .env file.
    Instances are frozen: build one at startup and pass it around.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKILLMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Aggregate weights (must sum to 1.0)
    weight_topic_coverage: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.40,
        description="Weight for topic coverage",
    )
    weight_language_proficiency: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.40,
        description="Weight for language proficiency",
    )
    weight_difficulty_alignment: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.20,
        description="Weight for experience/difficulty alignment",
    )

    # Thresholds
    recommendation_threshold: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=55.0,
        description="Minimum aggregate score for a project to be recommended",
    )
    min_passing_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=70,
        description="Minimum code evaluation score to pass an assessment",
    )
    max_attempts: Annotated[int, Field(ge=1)] = Field(
        default=8,
        description="Failed attempts after which learning support is triggered",
    )

    # Topic / language weighting
    primary_topic_weight: Annotated[float, Field(gt=0.0)] = Field(
        default=2.0,
        description="Relative weight of a project's primary topics",
    )
    secondary_topic_weight: Annotated[float, Field(gt=0.0)] = Field(
        default=1.0,
        description="Relative weight of a project's secondary topics",
    )
    primary_language_weight: Annotated[float, Field(gt=0.0)] = Field(
        default=2.0,
        description="Relative weight of a project's primary languages",
    )
    secondary_language_weight: Annotated[float, Field(gt=0.0)] = Field(
        default=1.0,
        description="Relative weight of a project's secondary languages",
    )

    # Difficulty alignment
    years_intermediate: Annotated[float, Field(ge=0.0)] = Field(
        default=3.0,
        description="Years of experience expected for intermediate projects",
    )
    years_advanced: Annotated[float, Field(ge=0.0)] = Field(
        default=5.0,
        description="Years of experience expected for advanced projects",
    )
    years_expert: Annotated[float, Field(ge=0.0)] = Field(
        default=8.0,
        description="Years of experience expected for expert projects",
    )
    difficulty_floor: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=30.0,
        description="Lowest difficulty score for a user below the requirement",
    )

    # Name matching
    name_fuzzy_match: bool = Field(
        default=False,
        description="Enable fuzzy topic/language name matching",
    )
    name_fuzzy_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.85,
        description="Similarity threshold for fuzzy matching",
    )

    # Learning support
    competent_proficiency: Annotated[float, Field(ge=0.0, le=5.0)] = Field(
        default=5.0,
        description="Language proficiency at or above which no tutorial is suggested",
    )
    low_proficiency: Annotated[float, Field(ge=0.0, le=5.0)] = Field(
        default=3.0,
        description="Language proficiency below which tutorials are beginner level",
    )
    topic_experience_cutoff: Annotated[int, Field(ge=0, le=5)] = Field(
        default=3,
        description="Topic experience below which topic material is suggested",
    )
    low_score_cutoff: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=40.0,
        description="Average failed score below which fundamentals are suggested",
    )
    practice_score_cutoff: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=60.0,
        description="Average failed score below which extra practice is suggested",
    )
    near_threshold_attempts: Annotated[int, Field(ge=1)] = Field(
        default=5,
        description="Failed attempts at which a user is flagged as close to support",
    )
    multi_project_failure_count: Annotated[int, Field(ge=2)] = Field(
        default=3,
        description="Distinct failed projects that mark a broad skill gap",
    )

    # Execution
    max_workers: Annotated[int, Field(ge=1)] = Field(
        default=1,
        description="Thread pool size used to score candidate projects",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> ScoringConfig:
        """Ensure aggregate weights sum to 1.0 (within tolerance)."""
        weight_sum = (
            self.weight_topic_coverage
            + self.weight_language_proficiency
            + self.weight_difficulty_alignment
        )
        if abs(weight_sum - 1.0) > 1e-6:
            raise ValueError(
                "Scoring weights must sum to 1.0. "
                f"Got {weight_sum:.6f} "
                f"(topic={self.weight_topic_coverage}, "
                f"language={self.weight_language_proficiency}, "
                f"difficulty={self.weight_difficulty_alignment})."
            )
        return self

    @model_validator(mode="after")
    def validate_ordering(self) -> ScoringConfig:
        """Ensure tiered thresholds are monotonic."""
        if not (self.years_intermediate < self.years_advanced < self.years_expert):
            raise ValueError(
                "Experience thresholds must be strictly increasing "
                f"(intermediate={self.years_intermediate}, "
                f"advanced={self.years_advanced}, expert={self.years_expert})."
            )
        if not (
            self.low_score_cutoff < self.practice_score_cutoff <= self.min_passing_score
        ):
            raise ValueError(
                "Expected low_score_cutoff < practice_score_cutoff <= min_passing_score "
                f"(got {self.low_score_cutoff}, {self.practice_score_cutoff}, "
                f"{self.min_passing_score})."
            )
        if self.low_proficiency > self.competent_proficiency:
            raise ValueError(
                "low_proficiency must not exceed competent_proficiency "
                f"(got {self.low_proficiency} > {self.competent_proficiency})."
            )
        if self.near_threshold_attempts >= self.max_attempts:
            raise ValueError(
                "near_threshold_attempts must be below max_attempts "
                f"(got {self.near_threshold_attempts} >= {self.max_attempts})."
            )
        return self

    @property
    def weights(self) -> dict[str, float]:
        """Aggregate weights keyed by factor name."""
        return {
            "topicCoverage": self.weight_topic_coverage,
            "languageProficiency": self.weight_language_proficiency,
            "difficultyAlignment": self.weight_difficulty_alignment,
        }
