"""Component scorers for a (user, project) pair.

Each scorer is a pure function of read-only profile data and a frozen
``ScoringConfig``; all scores are on a 0-100 scale.
"""

from __future__ import annotations

from collections.abc import Sequence

from skillmatch.scoring.config import ScoringConfig
from skillmatch.scoring.matchers import canonical_name, find_by_name
from skillmatch.scoring.models import (
    ExperienceAlignment,
    LanguageScore,
    MatchFactors,
    ProjectLanguage,
    ProjectProfile,
    ProjectTopic,
    TopicScore,
    UserLanguage,
    UserProfile,
    UserTopic,
)

# Share of a matched topic's weight that is granted regardless of how
# engaged the user is with it; the remainder scales with engagement.
_TOPIC_MATCH_BASE = 0.8


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def required_years(required_level: str, config: ScoringConfig) -> float:
    """Years of experience expected for a project experience tier."""
    thresholds = {
        "beginner": 0.0,
        "intermediate": config.years_intermediate,
        "advanced": config.years_advanced,
        "expert": config.years_expert,
    }
    try:
        return thresholds[required_level]
    except KeyError:
        raise ValueError(f"Unknown experience level '{required_level}'") from None


def topic_coverage_score(
    user_topics: Sequence[UserTopic],
    project_topics: Sequence[ProjectTopic],
    config: ScoringConfig,
) -> TopicScore:
    """Score how well the user's topics cover the project's topics.

    Primary topics carry more weight than secondary ones. A matched topic
    earns most of its weight outright and the rest in proportion to the
    user's experience or interest in it.
    """
    if not project_topics:
        return TopicScore(score=100.0)

    by_name = {canonical_name(t.name): t for t in user_topics}
    matches: list[str] = []
    missing: list[str] = []
    earned = 0.0
    total = 0.0

    for topic in project_topics:
        weight = (
            config.primary_topic_weight
            if topic.is_primary
            else config.secondary_topic_weight
        )
        total += weight

        user_topic = find_by_name(
            topic.name,
            by_name,
            fuzzy=config.name_fuzzy_match,
            threshold=config.name_fuzzy_threshold,
        )
        if user_topic is None:
            missing.append(topic.name)
            continue

        engagement = max(user_topic.experience_level, user_topic.interest_level) / 5
        earned += weight * (_TOPIC_MATCH_BASE + (1 - _TOPIC_MATCH_BASE) * engagement)
        matches.append(topic.name)

    return TopicScore(
        score=round(_clamp(100.0 * earned / total), 2),
        matches=matches,
        missing=missing,
    )


def language_proficiency_score(
    user_languages: Sequence[UserLanguage],
    project_languages: Sequence[ProjectLanguage],
    config: ScoringConfig,
) -> LanguageScore:
    """Score the user's language proficiencies against project requirements.

    Meeting a requirement earns its full weight, falling short earns at most
    half of it (scaled by how close the user is), and a missing language
    earns nothing.
    """
    if not project_languages:
        return LanguageScore(score=100.0, coverage=1.0)

    by_name = {canonical_name(lang.name): lang for lang in user_languages}
    matches: list[str] = []
    gaps: list[str] = []
    possessed = 0
    earned = 0.0
    total = 0.0

    for requirement in project_languages:
        weight = (
            config.primary_language_weight
            if requirement.is_primary
            else config.secondary_language_weight
        )
        total += weight

        user_lang = find_by_name(
            requirement.name,
            by_name,
            fuzzy=config.name_fuzzy_match,
            threshold=config.name_fuzzy_threshold,
        )
        if user_lang is None:
            gaps.append(requirement.name)
            continue

        possessed += 1
        have = user_lang.proficiency
        need = requirement.required_proficiency
        if have >= need:
            earned += weight
            matches.append(requirement.name)
        else:
            earned += weight * 0.5 * (have / need)
            gaps.append(requirement.name)

    return LanguageScore(
        score=round(_clamp(100.0 * earned / total), 2),
        matches=matches,
        gaps=gaps,
        coverage=possessed / len(project_languages),
    )


def difficulty_alignment_score(
    user_years: float, required_level: str, config: ScoringConfig
) -> float:
    """Score the user's years of experience against a project tier.

    Meeting or exceeding the tier's threshold is a flat 100; below it the
    score rises linearly from ``difficulty_floor``.
    """
    threshold = required_years(required_level, config)
    years = max(0.0, user_years)
    if years >= threshold:
        return 100.0

    floor = config.difficulty_floor
    return round(_clamp(floor + (100.0 - floor) * (years / threshold)), 2)


def aggregate_score(
    topic: TopicScore,
    language: LanguageScore,
    difficulty: float,
    config: ScoringConfig,
) -> float:
    """Combine component scores into the weighted fitness score."""
    total = (
        config.weight_topic_coverage * topic.score
        + config.weight_language_proficiency * language.score
        + config.weight_difficulty_alignment * difficulty
    )
    return round(_clamp(total), 2)


def build_match_factors(
    user: UserProfile,
    project: ProjectProfile,
    topic: TopicScore,
    language: LanguageScore,
    difficulty: float,
    config: ScoringConfig,
) -> MatchFactors:
    """Derive the explanation structure for a project score."""
    return MatchFactors(
        topic_matches=list(topic.matches),
        topic_gaps=list(topic.missing),
        language_matches=list(language.matches),
        language_gaps=list(language.gaps),
        experience_level=ExperienceAlignment(
            user_years=user.years_experience,
            required_level=project.required_experience_level,
            required_years=required_years(project.required_experience_level, config),
            score=difficulty,
        ),
    )
