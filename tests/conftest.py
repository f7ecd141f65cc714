"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Undo CLI logging setup so caplog sees skillmatch records."""
    from skillmatch.utils.logging import reset_logging

    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep SKILLMATCH_* variables from the host shell out of tests."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("SKILLMATCH_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scoring_config():
    """Default scoring configuration without .env lookup."""
    from skillmatch.scoring.config import ScoringConfig

    return ScoringConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def sample_user():
    """Full-stack JavaScript developer with some Python."""
    from skillmatch.scoring.models import UserProfile

    return UserProfile(
        user_id="user-1",
        years_experience=4,
        topics=[
            {"name": "Web Development", "experience_level": 4, "interest_level": 5},
            {"name": "APIs", "experience_level": 3, "interest_level": 4},
        ],
        languages=[
            {"name": "JavaScript", "proficiency_level": "expert", "years_experience": 4},
            {"name": "Python", "proficiency_level": "beginner", "years_experience": 1},
        ],
    )


@pytest.fixture
def sample_projects():
    """A small catalog with overlapping and distinct technology stacks."""
    from skillmatch.scoring.models import ProjectProfile

    return [
        ProjectProfile(
            project_id="p-web",
            title="Community Website",
            required_experience_level="intermediate",
            topics=[{"name": "Web Development", "is_primary": True}],
            languages=[
                {"name": "JavaScript", "required_level": "intermediate", "is_primary": True}
            ],
            technologies=["JavaScript", "React", "Node.js"],
        ),
        ProjectProfile(
            project_id="p-api",
            title="Public API",
            required_experience_level="intermediate",
            topics=[
                {"name": "APIs", "is_primary": True},
                {"name": "Web Development"},
            ],
            languages=[
                {"name": "JavaScript", "required_level": "advanced", "is_primary": True}
            ],
            technologies=["JavaScript", "React", "Express"],
        ),
        ProjectProfile(
            project_id="p-ml",
            title="Model Training",
            required_experience_level="expert",
            topics=[{"name": "Machine Learning", "is_primary": True}],
            languages=[
                {"name": "Python", "required_level": "advanced", "is_primary": True}
            ],
            technologies=["Python", "PyTorch"],
        ),
    ]


@pytest.fixture
def sample_code() -> str:
    """A submission that exhibits every structural signal."""
    return """
function sumPositive(values) {
  let total = 0;
  for (const value of values) {
    if (value > 0) {
      total += value;
    }
  }
  return total;
}
""".lstrip()
