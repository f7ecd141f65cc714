"""Project recommendation scoring.

Public API:
    - SkillMatchingService: score projects, recommend, re-rank for diversity
    - ProfileService: load user profiles and project catalogs
    - UserProfile / ProjectProfile: input snapshots
    - Recommendation / ProjectScore: scoring outputs
    - ScoringConfig: configuration settings
"""

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
    LanguageScore,
    MatchFactors,
    ProjectLanguage,
    ProjectProfile,
    ProjectScore,
    ProjectTopic,
    Recommendation,
    TopicScore,
    UserLanguage,
    UserProfile,
    UserTopic,
)
from skillmatch.scoring.profile import ProfileService
from skillmatch.scoring.service import SkillMatchingService

__all__ = [
    "SkillMatchingService",
    "ProfileService",
    "ScoringConfig",
    "UserProfile",
    "UserTopic",
    "UserLanguage",
    "ProjectProfile",
    "ProjectTopic",
    "ProjectLanguage",
    "TopicScore",
    "LanguageScore",
    "MatchFactors",
    "ProjectScore",
    "Recommendation",
    "topic_coverage_score",
    "language_proficiency_score",
    "difficulty_alignment_score",
    "aggregate_score",
    "build_match_factors",
    "diversity_rerank",
]
