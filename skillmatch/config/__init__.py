"""Application configuration."""

from skillmatch.config.settings import Settings

__all__ = ["Settings"]
