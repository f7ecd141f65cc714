"""Application settings for the skillmatch CLI."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKILLMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    # Default input locations
    profile_path: Path = Field(
        default=Path("data/profile.yaml"),
        description="Path to the user profile (YAML/JSON)",
    )
    projects_path: Path = Field(
        default=Path("data/projects.yaml"),
        description="Path to the candidate project catalog (YAML/JSON)",
    )
    attempts_path: Path = Field(
        default=Path("data/attempts.json"),
        description="Path to exported challenge attempts (YAML/JSON)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(valid))}")
        return upper
