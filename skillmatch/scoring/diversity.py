"""Maximal-marginal-relevance re-ranking over technology tags."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from skillmatch.scoring.matchers import canonical_name


class Rankable(Protocol):
    score: float
    technologies: list[str]


T = TypeVar("T", bound=Rankable)


def overlap_penalty(candidate_tags: set[str], selected_tags: set[str]) -> float:
    """Percentage of a candidate's tags already covered by selected items."""
    if not candidate_tags:
        return 0.0
    return 100.0 * len(candidate_tags & selected_tags) / len(candidate_tags)


def diversity_rerank(items: Sequence[T], diversity_weight: float) -> list[T]:
    """Re-order a relevance-ranked list to reduce technology redundancy.

    Greedily selects the item maximizing
    ``(1 - w) * score - w * overlap_penalty``; ties keep input order.
    A weight of 0 returns the input order unchanged.
    """
    if not (0.0 <= diversity_weight <= 1.0):
        raise ValueError(
            f"diversity_weight must be between 0.0 and 1.0 (got {diversity_weight})"
        )
    if diversity_weight == 0.0 or len(items) < 2:
        return list(items)

    remaining = [
        (item, {canonical_name(tag) for tag in item.technologies if tag.strip()})
        for item in items
    ]
    selected: list[T] = []
    selected_tags: set[str] = set()

    while remaining:
        best_index = 0
        best_value = float("-inf")
        for index, (item, tags) in enumerate(remaining):
            value = (1.0 - diversity_weight) * item.score - diversity_weight * (
                overlap_penalty(tags, selected_tags)
            )
            if value > best_value:
                best_index = index
                best_value = value

        item, tags = remaining.pop(best_index)
        selected.append(item)
        selected_tags |= tags

    return selected
