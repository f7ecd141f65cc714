"""Skill matching and assessment scoring engine."""

__version__ = "0.1.0"
