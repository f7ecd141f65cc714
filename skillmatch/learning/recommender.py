"""Learning material recommendations derived from skill gaps."""

from __future__ import annotations

import logging

from skillmatch.learning.models import (
    FailureSummary,
    LearningDifficulty,
    LearningRecommendation,
    RecommendationType,
)
from skillmatch.learning.tracker import FailureTracker
from skillmatch.scoring.config import ScoringConfig
from skillmatch.scoring.matchers import next_proficiency
from skillmatch.scoring.models import UserProfile

logger = logging.getLogger(__name__)


def generate_learning_recommendations(
    user: UserProfile, summary: FailureSummary, config: ScoringConfig
) -> list[LearningRecommendation]:
    """Build learning recommendations for a user's weak spots.

    Languages below the competent proficiency get a tutorial targeting the
    next tier, topics with little experience get topic material, and the
    average failed score adds either a fundamentals or a practice
    recommendation (never both).
    """
    recommendations: list[LearningRecommendation] = []

    for language in user.languages:
        proficiency = language.proficiency
        if proficiency >= config.competent_proficiency:
            continue
        recommendations.append(
            LearningRecommendation(
                user_id=user.user_id,
                type=RecommendationType.LANGUAGE,
                target_skill=language.name,
                current_level=proficiency,
                target_level=next_proficiency(proficiency),
                difficulty=(
                    LearningDifficulty.BEGINNER
                    if proficiency < config.low_proficiency
                    else LearningDifficulty.INTERMEDIATE
                ),
                reason="language_below_competent",
            )
        )

    for topic in user.topics:
        if topic.experience_level >= config.topic_experience_cutoff:
            continue
        recommendations.append(
            LearningRecommendation(
                user_id=user.user_id,
                type=RecommendationType.TOPIC,
                target_skill=topic.name,
                current_level=float(topic.experience_level),
                target_level=float(topic.experience_level + 1),
                difficulty=LearningDifficulty.BEGINNER,
                reason="low_topic_experience",
            )
        )

    if summary.avg_score < config.low_score_cutoff:
        recommendations.append(
            LearningRecommendation(
                user_id=user.user_id,
                type=RecommendationType.FUNDAMENTALS,
                target_skill="programming fundamentals",
                current_level=summary.avg_score,
                target_level=float(config.min_passing_score),
                difficulty=LearningDifficulty.BEGINNER,
                reason="low_average_score",
            )
        )
    elif summary.avg_score < config.practice_score_cutoff:
        recommendations.append(
            LearningRecommendation(
                user_id=user.user_id,
                type=RecommendationType.PRACTICE,
                target_skill="coding practice",
                current_level=summary.avg_score,
                target_level=float(config.min_passing_score),
                difficulty=LearningDifficulty.INTERMEDIATE,
                reason="near_passing_score",
            )
        )

    return recommendations


class LearningRecommender:
    """Decides when a user gets remedial material and what it covers."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()
        self.tracker = FailureTracker(self.config)

    def recommend_learning_materials(
        self, user: UserProfile, summary: FailureSummary
    ) -> list[LearningRecommendation]:
        """Generate recommendations regardless of the attempt threshold."""
        recommendations = generate_learning_recommendations(user, summary, self.config)
        logger.info(
            "Generated %d learning recommendation(s) for user %s "
            "(failures=%d, avg_score=%.1f)",
            len(recommendations),
            user.user_id,
            summary.failure_count,
            summary.avg_score,
        )
        return recommendations

    def recommend_if_needed(
        self, user: UserProfile, summary: FailureSummary
    ) -> list[LearningRecommendation]:
        """Generate recommendations only once the user reached max attempts."""
        if not self.tracker.needs_learning_support(summary.failure_count):
            return []
        return self.recommend_learning_materials(user, summary)
