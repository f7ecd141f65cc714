"""Unit tests for the AssessmentService."""

from __future__ import annotations

import logging

import pytest


class TestAssess:
    """Test assessment outcomes."""

    def test_passing_submission_can_join(self, sample_code):
        from skillmatch.assessment.service import AssessmentService

        result = AssessmentService().assess("u1", "p1", sample_code, "c1")

        assert result.success is True
        assert result.score == 100
        assert result.passed is True
        assert result.can_join_project is True
        assert result.feedback.startswith("Excellent")
        assert result.hints == []
        assert result.challenge_id == "c1"

    def test_failing_submission_is_not_an_error(self):
        from skillmatch.assessment.service import AssessmentService

        result = AssessmentService().assess("u1", "p1", "const x = 5;")

        assert result.success is True
        assert result.score == 0
        assert result.passed is False
        assert result.can_join_project is False
        assert len(result.hints) == 5

    def test_empty_submission_fails(self):
        from skillmatch.assessment.service import AssessmentService

        result = AssessmentService().assess("u1", "p1", None)

        assert result.score == 0
        assert result.passed is False

    def test_passing_score_boundary(self):
        """A score exactly at the passing score passes."""
        from skillmatch.assessment.service import AssessmentService
        from skillmatch.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None, min_passing_score=65)  # type: ignore[call-arg]
        # function + return + conditional = 65
        code = "function f(x) {\n  if (x) { return 1; }\n}\n"

        result = AssessmentService(config).assess("u1", "p1", code)

        assert result.score == 65
        assert result.passed is True
        assert result.can_join_project is True

    def test_just_below_passing_score_fails(self):
        from skillmatch.assessment.service import AssessmentService

        code = "function f(x) {\n  if (x) { return 1; }\n}\n"

        result = AssessmentService().assess("u1", "p1", code)

        assert result.score == 65
        assert result.passed is False
        assert result.hints == [
            "Use a loop to process collections of input.",
            "Flesh out the solution; it is very short.",
        ]

    def test_alias_matches_assess(self, sample_code):
        from skillmatch.assessment.service import AssessmentService

        service = AssessmentService()

        assert service.assess_coding_skill("u1", "p1", sample_code).passed is True

    def test_logs_outcome(self, sample_code, caplog):
        from skillmatch.assessment.service import AssessmentService

        with caplog.at_level(logging.INFO, logger="skillmatch"):
            AssessmentService().assess("u1", "p1", sample_code)

        assert "Assessed user u1 for project p1: score=100 passed=True" in caplog.text


class TestAssessmentResult:
    """Test AssessmentResult invariants and serialization."""

    def test_can_join_requires_passed(self):
        from skillmatch.assessment.models import AssessmentResult

        with pytest.raises(ValueError, match="can_join_project"):
            AssessmentResult(
                user_id="u1",
                project_id="p1",
                challenge_id=None,
                score=10,
                passed=False,
                feedback="x",
                can_join_project=True,
            )

    def test_to_dict_uses_camel_case(self, sample_code):
        from skillmatch.assessment.service import AssessmentService

        data = AssessmentService().assess("u1", "p1", sample_code).to_dict()

        assert data["success"] is True
        assert data["userId"] == "u1"
        assert data["projectId"] == "p1"
        assert data["canJoinProject"] is True
        assert data["signals"]["loop"] == 20

    def test_format_result(self):
        from skillmatch.assessment.service import AssessmentService

        service = AssessmentService()
        output = service.format_result(service.assess("u1", "p1", "return 1;"))

        assert "Score: 20/100 (FAILED, passing=70)" in output
        assert "Can join project: no" in output
        assert "Signals: return_statement" in output
        assert "Hint: Wrap your logic in a function." in output


class TestChallengeAttempt:
    """Test the stored attempt model."""

    def test_from_dict(self):
        from skillmatch.assessment.models import AttemptStatus, ChallengeAttempt

        attempt = ChallengeAttempt.from_dict(
            {"user_id": "u1", "project_id": "p1", "score": 40, "status": "failed"}
        )

        assert attempt.status is AttemptStatus.FAILED
        assert attempt.score == 40.0

    def test_score_out_of_range_is_rejected(self):
        from pydantic import ValidationError

        from skillmatch.assessment.models import ChallengeAttempt

        with pytest.raises(ValidationError):
            ChallengeAttempt(user_id="u1", project_id="p1", score=120, status="passed")
