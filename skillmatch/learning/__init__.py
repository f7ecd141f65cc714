"""Failure tracking and learning recommendations.

Public API:
    - FailureTracker: threshold checks and failed-attempt aggregation
    - LearningRecommender: remedial material for struggling users
    - generate_learning_recommendations: pure recommendation builder
"""

from skillmatch.learning.models import (
    AttemptAnalytics,
    FailureSummary,
    LearningDifficulty,
    LearningRecommendation,
    RecommendationType,
)
from skillmatch.learning.recommender import (
    LearningRecommender,
    generate_learning_recommendations,
)
from skillmatch.learning.tracker import FailureTracker, load_attempts

__all__ = [
    "FailureTracker",
    "LearningRecommender",
    "generate_learning_recommendations",
    "load_attempts",
    "AttemptAnalytics",
    "FailureSummary",
    "LearningDifficulty",
    "LearningRecommendation",
    "RecommendationType",
]
