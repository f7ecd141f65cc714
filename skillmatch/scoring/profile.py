"""Profile and project catalog loading."""

from __future__ import annotations

from pathlib import Path

from skillmatch.scoring.models import ProjectProfile, UserProfile
from skillmatch.utils.documents import load_document, load_mapping


class ProfileService:
    """Service for loading and validating user profiles and project catalogs."""

    def load_profile(self, path: Path | str) -> UserProfile:
        """Load and validate a user profile from YAML or JSON."""
        return UserProfile.model_validate(load_mapping(path))

    def load_projects(self, path: Path | str) -> list[ProjectProfile]:
        """Load a project catalog.

        Accepts either a top-level list of projects or a mapping with a
        ``projects`` list.
        """
        data = load_document(path)
        if isinstance(data, dict):
            data = data.get("projects", [])
        if not isinstance(data, list):
            raise ValueError(f"Project catalog must be a list: {path}")

        projects: list[ProjectProfile] = []
        for entry in data:
            if not isinstance(entry, dict):
                raise ValueError(f"Project entries must be mappings: {path}")
            projects.append(ProjectProfile.model_validate(entry))
        return projects

    def validate_profile(self, profile: UserProfile) -> list[str]:
        """Return warnings for incomplete profiles."""
        warnings: list[str] = []

        if not profile.topics:
            warnings.append("Topic list is empty")
        if not profile.languages:
            warnings.append("Language list is empty")
        if profile.years_experience == 0:
            warnings.append("Years of experience is zero")

        return warnings
