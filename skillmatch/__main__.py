"""Command line entry point for skillmatch."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from skillmatch import __version__
from skillmatch.config.settings import Settings
from skillmatch.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _diversity_weight(value: str) -> float:
    weight = float(value)
    if not (0.0 <= weight <= 1.0):
        raise argparse.ArgumentTypeError("--diversity must be between 0.0 and 1.0")
    return weight


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("--limit must be non-negative")
    return number


def _print_json(payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    print(json.dumps(payload, indent=2, default=_default))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="skillmatch",
        description="Skill matching, project recommendation and code assessment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m skillmatch recommend --profile user.yaml --projects projects.yaml
  python -m skillmatch assess --code solution.js --user-id u1 --project-id p1
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of a summary",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    score_parser = subparsers.add_parser(
        "score",
        help="Score one project for a user with a full breakdown",
    )
    score_parser.add_argument("project_id", help="Project identifier to score")
    score_parser.add_argument("--profile", type=Path, default=None)
    score_parser.add_argument("--projects", type=Path, default=None)

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Rank candidate projects for a user",
    )
    recommend_parser.add_argument("--profile", type=Path, default=None)
    recommend_parser.add_argument("--projects", type=Path, default=None)
    recommend_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=10,
        help="Maximum number of recommendations (default: 10)",
    )
    recommend_parser.add_argument(
        "--diversity",
        type=_diversity_weight,
        default=0.0,
        help="Diversity weight for re-ranking (0.0-1.0, default: 0.0)",
    )

    assess_parser = subparsers.add_parser(
        "assess",
        help="Assess a code submission",
    )
    assess_parser.add_argument(
        "--code", type=Path, required=True, help="Path to the submitted code"
    )
    assess_parser.add_argument("--user-id", default="anonymous")
    assess_parser.add_argument("--project-id", default="unknown")
    assess_parser.add_argument("--challenge-id", default=None)

    learning_parser = subparsers.add_parser(
        "learning",
        help="Suggest learning material from failed attempts",
    )
    learning_parser.add_argument("--profile", type=Path, default=None)
    learning_parser.add_argument("--attempts", type=Path, default=None)
    learning_parser.add_argument(
        "--force",
        action="store_true",
        help="Recommend even if the failed-attempt threshold is not reached",
    )
    learning_parser.add_argument(
        "--stats",
        action="store_true",
        help="Also report pass/fail statistics across all attempts",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    logger = configure_logging(level=parsed.log_level or settings.log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug(f"skillmatch v{__version__} running {parsed.mode}")

    try:
        if parsed.mode in {"score", "recommend"}:
            return _run_matching(parsed, settings)
        if parsed.mode == "assess":
            return _run_assess(parsed)
        if parsed.mode == "learning":
            return _run_learning(parsed, settings)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError is a ValueError subclass.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


def _run_matching(parsed: argparse.Namespace, settings: Settings) -> int:
    from skillmatch.scoring.profile import ProfileService
    from skillmatch.scoring.service import SkillMatchingService

    profiles = ProfileService()
    user = profiles.load_profile(parsed.profile or settings.profile_path)
    for warning in profiles.validate_profile(user):
        logger.warning(f"Profile {user.user_id}: {warning}")
    projects = profiles.load_projects(parsed.projects or settings.projects_path)
    service = SkillMatchingService()

    if parsed.mode == "score":
        project = next((p for p in projects if p.project_id == parsed.project_id), None)
        if project is None:
            print(f"Error: project not found: {parsed.project_id}", file=sys.stderr)
            return 1
        result = service.score_project(user, project)
        if parsed.json:
            _print_json(
                {
                    "projectId": result.project_id,
                    "title": result.title,
                    "score": result.score,
                    "topic": result.topic.score,
                    "language": result.language.score,
                    "languageCoverage": result.language.coverage,
                    "difficulty": result.difficulty,
                    "matchFactors": result.match_factors,
                }
            )
        else:
            print(service.format_score(result))
        return 0

    recommendations = service.recommend(user, projects, limit=parsed.limit)
    if parsed.diversity > 0:
        recommendations = service.rerank_for_diversity(
            recommendations, parsed.diversity
        )

    if parsed.json:
        _print_json(recommendations)
    else:
        print(service.format_recommendations(recommendations))
    return 0


def _run_assess(parsed: argparse.Namespace) -> int:
    from skillmatch.assessment.service import AssessmentService

    if not parsed.code.exists():
        raise FileNotFoundError(f"Code file not found: {parsed.code}")
    code = parsed.code.read_text(encoding="utf-8", errors="replace")

    service = AssessmentService()
    result = service.assess(
        parsed.user_id, parsed.project_id, code, parsed.challenge_id
    )

    if parsed.json:
        _print_json(result)
    else:
        print(service.format_result(result))
    return 0


def _run_learning(parsed: argparse.Namespace, settings: Settings) -> int:
    from skillmatch.learning.models import FailureSummary, RecommendationType
    from skillmatch.learning.recommender import LearningRecommender
    from skillmatch.learning.tracker import load_attempts
    from skillmatch.scoring.matchers import tier_name
    from skillmatch.scoring.profile import ProfileService

    user = ProfileService().load_profile(parsed.profile or settings.profile_path)
    attempts = load_attempts(parsed.attempts or settings.attempts_path)

    recommender = LearningRecommender()
    summaries = recommender.tracker.summarize_failures(
        a for a in attempts if a.user_id == user.user_id
    )
    summary = summaries.get(
        user.user_id,
        FailureSummary(user_id=user.user_id, failure_count=0, avg_score=0.0),
    )

    if parsed.force:
        recommendations = recommender.recommend_learning_materials(user, summary)
    else:
        recommendations = recommender.recommend_if_needed(user, summary)
    stats = (
        _attempt_stats(recommender.tracker, attempts, summary) if parsed.stats else None
    )

    if parsed.json:
        payload = {
            "userId": user.user_id,
            "failureCount": summary.failure_count,
            "avgScore": summary.avg_score,
            "needsLearningSupport": recommender.tracker.needs_learning_support(
                summary.failure_count
            ),
            "recommendations": recommendations,
        }
        if stats is not None:
            payload["stats"] = stats
        _print_json(payload)
        return 0

    print(
        f"User {user.user_id}: {summary.failure_count} failed attempt(s), "
        f"avg score {summary.avg_score:.1f} "
        f"(support at {recommender.tracker.max_attempts})"
    )
    if not recommendations:
        print("No learning recommendations.")
    for rec in recommendations:
        line = f"- [{rec.type.value}/{rec.difficulty.value}] {rec.target_skill}"
        if rec.type is RecommendationType.LANGUAGE:
            line += (
                f" ({tier_name(rec.current_level)}, "
                f"{rec.current_level:g} -> {rec.target_level:g})"
            )
        print(line)

    if stats is not None:
        print(
            f"Attempts: {stats['totalAttempts']} total, "
            f"{stats['passedAttempts']} passed, {stats['failedAttempts']} failed "
            f"(failure rate {stats['failureRate']:.0%})"
        )
        print(
            f"Average score: passed {stats['avgPassedScore']:.1f}, "
            f"failed {stats['avgFailedScore']:.1f} (gap {stats['scoreGap']:.1f}), "
            f"{stats['nearPassingAttempts']} near-passing failure(s)"
        )
        print(
            "Users needing support: "
            + (", ".join(stats["usersNeedingSupport"]) or "none")
        )
        print(
            "Users near threshold: "
            + (", ".join(stats["usersNearThreshold"]) or "none")
        )
        if stats["spansMultipleProjects"]:
            print(f"{user.user_id} failed across multiple projects")
    return 0


def _attempt_stats(tracker, attempts: list, summary) -> dict:
    analytics = tracker.analyze_attempts(attempts)
    return {
        "totalAttempts": analytics.total_attempts,
        "passedAttempts": analytics.passed_attempts,
        "failedAttempts": analytics.failed_attempts,
        "failureRate": analytics.failure_rate,
        "avgPassedScore": analytics.avg_passed_score,
        "avgFailedScore": analytics.avg_failed_score,
        "scoreGap": analytics.score_gap,
        "nearPassingAttempts": analytics.near_passing_attempts,
        "usersNeedingSupport": [
            s.user_id for s in tracker.users_needing_support(attempts)
        ],
        "usersNearThreshold": [
            s.user_id for s in tracker.users_near_threshold(attempts)
        ],
        "spansMultipleProjects": tracker.spans_multiple_projects(summary),
    }


if __name__ == "__main__":
    sys.exit(main())
