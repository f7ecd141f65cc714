"""Name matching and proficiency utilities for skill scoring."""

from __future__ import annotations

import math
import re
from difflib import SequenceMatcher

_NAME_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ecmascript": "javascript",
    "ts": "typescript",
    "python3": "python",
    "py": "python",
    "golang": "go",
    "c sharp": "c#",
    "csharp": "c#",
    "cpp": "c++",
    "nodejs": "node.js",
    "node js": "node.js",
    "node": "node.js",
    "reactjs": "react",
    "react.js": "react",
    "react js": "react",
    "postgres": "postgresql",
    "mongo db": "mongodb",
    "mongo": "mongodb",
    "ml": "machine learning",
    "web dev": "web development",
}

# Ordered proficiency tiers on the 0-5 scale; 0 means no proficiency.
PROFICIENCY_TIERS: dict[str, float] = {
    "beginner": 1.0,
    "intermediate": 2.0,
    "advanced": 3.0,
    "expert": 4.0,
}
MAX_PROFICIENCY = 5.0


def normalize_name(name: str) -> str:
    """Normalize a topic or language name for comparison.

    Performs lowercasing, whitespace normalization, and trims common
    surrounding punctuation while preserving meaningful characters
    like "+", "#", and "." (e.g. "C++", "C#", "Node.js").
    """
    value = name.strip().lower()
    value = re.sub(r"\([^)]*\)", "", value)
    value = re.sub(r"\s+", " ", value)
    return value.strip(" ,;")


def canonical_name(name: str) -> str:
    """Return the alias-resolved canonical form of a name."""
    normalized = normalize_name(name)
    return _NAME_ALIASES.get(normalized, normalized)


def names_match(
    name1: str, name2: str, fuzzy: bool = False, threshold: float = 0.85
) -> bool:
    """Return True if two topic/language names are considered a match."""
    canonical1 = canonical_name(name1)
    canonical2 = canonical_name(name2)

    if canonical1 == canonical2:
        return True

    if not fuzzy:
        return False

    if threshold <= 0.0:
        return True
    if threshold > 1.0:
        return False

    similarity = SequenceMatcher(None, canonical1, canonical2).ratio()
    return similarity >= threshold


def find_by_name(
    name: str, candidates: dict[str, object], fuzzy: bool = False, threshold: float = 0.85
):
    """Look up a candidate keyed by canonical name.

    Exact canonical hits win; fuzzy matching is only attempted when enabled
    and nothing matched exactly.
    """
    key = canonical_name(name)
    if key in candidates:
        return candidates[key]
    if not fuzzy:
        return None
    for candidate_key, value in candidates.items():
        if names_match(key, candidate_key, fuzzy=True, threshold=threshold):
            return value
    return None


def proficiency_value(level: str | float | int) -> float:
    """Map a tier name or numeric level onto the 0-5 proficiency scale."""
    if isinstance(level, str):
        normalized = level.strip().lower()
        if normalized not in PROFICIENCY_TIERS:
            raise ValueError(
                f"Unknown proficiency level '{level}' "
                f"(expected one of: {', '.join(PROFICIENCY_TIERS)})"
            )
        return PROFICIENCY_TIERS[normalized]
    value = float(level)
    if not (0.0 <= value <= MAX_PROFICIENCY):
        raise ValueError(f"Proficiency must be between 0 and 5 (got {level})")
    return value


def tier_name(value: float) -> str:
    """Return the highest tier name reached by a numeric proficiency."""
    name = "beginner"
    for tier, tier_value in PROFICIENCY_TIERS.items():
        if value >= tier_value:
            name = tier
    return name


def next_proficiency(value: float) -> float:
    """Return the next whole step on the proficiency scale, capped at 5."""
    return min(float(math.floor(value) + 1), MAX_PROFICIENCY)
