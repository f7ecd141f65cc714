"""Tests for scoring configuration."""

import pytest


class TestScoringConfig:
    """Test ScoringConfig settings."""

    def test_scoring_config_has_defaults(self):
        """ScoringConfig should load with sensible defaults."""
        from skillmatch.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.weight_topic_coverage == 0.40
        assert config.weight_language_proficiency == 0.40
        assert config.weight_difficulty_alignment == 0.20

        assert config.recommendation_threshold == 55.0
        assert config.min_passing_score == 70
        assert config.max_attempts == 8

        assert config.primary_topic_weight == 2.0
        assert config.secondary_topic_weight == 1.0
        assert config.years_intermediate == 3.0
        assert config.years_advanced == 5.0
        assert config.years_expert == 8.0
        assert config.difficulty_floor == 30.0
        assert config.competent_proficiency == 5.0
        assert config.low_proficiency == 3.0

        assert config.name_fuzzy_match is False
        assert config.max_workers == 1

    def test_scoring_config_reads_from_environment_variables(self, monkeypatch):
        """ScoringConfig should read from environment variables."""
        from skillmatch.scoring.config import ScoringConfig

        monkeypatch.setenv("SKILLMATCH_RECOMMENDATION_THRESHOLD", "60")
        monkeypatch.setenv("SKILLMATCH_MIN_PASSING_SCORE", "75")
        monkeypatch.setenv("SKILLMATCH_MAX_ATTEMPTS", "10")
        monkeypatch.setenv("SKILLMATCH_NAME_FUZZY_MATCH", "true")
        monkeypatch.setenv("SKILLMATCH_MAX_WORKERS", "4")

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.recommendation_threshold == 60.0
        assert config.min_passing_score == 75
        assert config.max_attempts == 10
        assert config.name_fuzzy_match is True
        assert config.max_workers == 4

    def test_weights_property_uses_factor_names(self):
        """weights should expose the aggregate weights by factor name."""
        from skillmatch.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.weights == {
            "topicCoverage": 0.40,
            "languageProficiency": 0.40,
            "difficultyAlignment": 0.20,
        }

    def test_config_is_frozen(self):
        """Config instances should be immutable."""
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        with pytest.raises(ValidationError):
            config.recommendation_threshold = 10.0  # type: ignore[misc]


class TestScoringConfigValidation:
    """Test cross-field validation."""

    def test_weights_must_sum_to_one(self):
        """Weights that do not sum to 1.0 should be rejected."""
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError, match="sum to 1.0"):
            ScoringConfig(  # type: ignore[call-arg]
                _env_file=None,
                weight_topic_coverage=0.5,
                weight_language_proficiency=0.5,
                weight_difficulty_alignment=0.5,
            )

    def test_custom_weights_summing_to_one_are_accepted(self):
        from skillmatch.scoring.config import ScoringConfig

        config = ScoringConfig(  # type: ignore[call-arg]
            _env_file=None,
            weight_topic_coverage=0.5,
            weight_language_proficiency=0.3,
            weight_difficulty_alignment=0.2,
        )

        assert config.weight_topic_coverage == 0.5

    def test_threshold_out_of_range_is_rejected(self):
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError):
            ScoringConfig(_env_file=None, recommendation_threshold=101)  # type: ignore[call-arg]

    def test_max_attempts_must_be_positive(self):
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError):
            ScoringConfig(_env_file=None, max_attempts=0)  # type: ignore[call-arg]

    def test_experience_thresholds_must_increase(self):
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError, match="strictly increasing"):
            ScoringConfig(  # type: ignore[call-arg]
                _env_file=None, years_intermediate=6.0, years_advanced=5.0
            )

    def test_score_cutoffs_must_be_ordered(self):
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError, match="low_score_cutoff"):
            ScoringConfig(  # type: ignore[call-arg]
                _env_file=None, low_score_cutoff=65.0, practice_score_cutoff=60.0
            )

    def test_near_threshold_must_be_below_max_attempts(self):
        from pydantic import ValidationError

        from skillmatch.scoring.config import ScoringConfig

        with pytest.raises(ValidationError, match="near_threshold_attempts"):
            ScoringConfig(_env_file=None, max_attempts=5)  # type: ignore[call-arg]
