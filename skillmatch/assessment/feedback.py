"""Score-to-feedback messages for code assessments."""

from __future__ import annotations

import math

_FEEDBACK_BANDS: tuple[tuple[float, str], ...] = (
    (
        90,
        "Excellent work! Your solution is well structured, with clear functions, "
        "control flow and iteration.",
    ),
    (
        75,
        "Good job! Your solution covers the core logic; a little more structure "
        "would make it even stronger.",
    ),
    (
        60,
        "Nice start. Your solution shows the basics; keep building on it with "
        "clearer functions, conditions and loops.",
    ),
    (
        0,
        "Your solution needs improvement. Try organizing the logic into functions "
        "that use conditions, loops and return values.",
    ),
)

_HINTS: dict[str, str] = {
    "function_definition": "Wrap your logic in a function.",
    "return_statement": "Return a result from your function.",
    "conditional": "Handle edge cases with a condition.",
    "loop": "Use a loop to process collections of input.",
    "sufficient_lines": "Flesh out the solution; it is very short.",
}


def generate_feedback(score: float) -> str:
    """Return a tier-appropriate feedback message for a 0-100 score."""
    if math.isnan(score) or not (0 <= score <= 100):
        raise ValueError(f"score must be between 0 and 100 (got {score})")

    for minimum, message in _FEEDBACK_BANDS[:-1]:
        if score >= minimum:
            return message
    return _FEEDBACK_BANDS[-1][1]


def hints_for(missing_signals: list[str]) -> list[str]:
    """Map missing structural signals to improvement hints."""
    return [_HINTS[name] for name in missing_signals if name in _HINTS]
