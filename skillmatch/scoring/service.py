"""Project recommendation service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from skillmatch.scoring.components import (
    aggregate_score,
    build_match_factors,
    difficulty_alignment_score,
    language_proficiency_score,
    topic_coverage_score,
)
from skillmatch.scoring.config import ScoringConfig
from skillmatch.scoring.diversity import diversity_rerank
from skillmatch.scoring.models import (
    ProjectProfile,
    ProjectScore,
    Recommendation,
    UserProfile,
)

logger = logging.getLogger(__name__)


def score_band(score: float) -> str:
    """Label a recommendation score for display."""
    if score >= 90:
        return "excellent"
    if score >= 75:
        return "good"
    if score >= 55:
        return "acceptable"
    return "below_threshold"


class SkillMatchingService:
    """Scores projects for a user and builds ranked recommendations."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    @property
    def threshold(self) -> float:
        return self.config.recommendation_threshold

    def score_project(self, user: UserProfile, project: ProjectProfile) -> ProjectScore:
        """Score a single (user, project) pair with a full breakdown."""
        topic = topic_coverage_score(user.topics, project.topics, self.config)
        language = language_proficiency_score(
            user.languages, project.languages, self.config
        )
        difficulty = difficulty_alignment_score(
            user.years_experience, project.required_experience_level, self.config
        )
        score = aggregate_score(topic, language, difficulty, self.config)

        logger.debug(
            "Scored project %s for user %s: %.2f (topic=%.2f language=%.2f difficulty=%.2f)",
            project.project_id,
            user.user_id,
            score,
            topic.score,
            language.score,
            difficulty,
        )

        return ProjectScore(
            project_id=project.project_id,
            title=project.title,
            score=score,
            topic=topic,
            language=language,
            difficulty=difficulty,
            match_factors=build_match_factors(
                user, project, topic, language, difficulty, self.config
            ),
            technologies=project.tech_stack,
        )

    def recommend(
        self,
        user: UserProfile,
        candidates: Sequence[ProjectProfile],
        limit: int = 10,
    ) -> list[Recommendation]:
        """Rank candidate projects for a user.

        Projects scoring below the recommendation threshold are dropped; the
        rest are sorted by descending score (ties keep candidate order) and
        truncated to ``limit``.
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative (got {limit})")

        results = self._score_all(user, candidates)
        qualifying = [r for r in results if r.score >= self.threshold]
        qualifying.sort(key=lambda r: r.score, reverse=True)

        recommendations = [
            Recommendation.from_project_score(r) for r in qualifying[:limit]
        ]
        logger.info(
            "Recommended %d of %d projects for user %s (threshold=%.1f)",
            len(recommendations),
            len(candidates),
            user.user_id,
            self.threshold,
        )
        return recommendations

    def rerank_for_diversity(
        self, recommendations: Sequence[Recommendation], diversity_weight: float
    ) -> list[Recommendation]:
        """Re-order recommendations to reduce technology-stack redundancy."""
        return diversity_rerank(recommendations, diversity_weight)

    def format_recommendations(self, recommendations: Sequence[Recommendation]) -> str:
        """Format recommendations for CLI output."""
        if not recommendations:
            return f"No projects scored at or above {self.threshold:.0f}."

        lines: list[str] = []
        for index, rec in enumerate(recommendations, start=1):
            factors = rec.match_factors
            lines.append(
                f"{index}. {rec.title or rec.project_id} "
                f"(score={rec.score:.2f}, {score_band(rec.score)})"
            )
            if factors.topic_matches:
                lines.append(f"   Topics matched: {', '.join(factors.topic_matches)}")
            if factors.topic_gaps:
                lines.append(f"   Topics missing: {', '.join(factors.topic_gaps)}")
            if factors.language_matches:
                lines.append(
                    f"   Languages matched: {', '.join(factors.language_matches)}"
                )
            if factors.language_gaps:
                lines.append(f"   Language gaps: {', '.join(factors.language_gaps)}")
            experience = factors.experience_level
            lines.append(
                f"   Experience: {experience.user_years:g}y vs "
                f"{experience.required_level} ({experience.required_years:g}y)"
            )
        return "\n".join(lines)

    def format_score(self, result: ProjectScore) -> str:
        """Format a single project score breakdown for CLI output."""
        lines = [
            f"{result.title or result.project_id} ({result.project_id})",
            f"Score: {result.score:.2f} ({score_band(result.score)}, "
            f"threshold={self.threshold:.0f})",
            "Components: "
            f"topic={result.topic.score:.2f} "
            f"language={result.language.score:.2f} "
            f"difficulty={result.difficulty:.2f}",
            f"Language coverage: {result.language.coverage:.0%}",
        ]
        if result.topic.missing:
            lines.append(f"Missing topics: {', '.join(result.topic.missing)}")
        if result.language.gaps:
            lines.append(f"Language gaps: {', '.join(result.language.gaps)}")
        return "\n".join(lines)

    def _score_all(
        self, user: UserProfile, candidates: Sequence[ProjectProfile]
    ) -> list[ProjectScore]:
        if self.config.max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                return list(
                    executor.map(lambda p: self.score_project(user, p), candidates)
                )
        return [self.score_project(user, project) for project in candidates]
