"""
Secondary archetype selection.

The candidate is the best-ranked archetype other than the primary (by id, so
archetypes tied with the primary stay eligible). It becomes the secondary only
if it clears the dataset's eligibility thresholds.
"""

from __future__ import annotations

from typing import Sequence

from investor_diagnostic.engine.models import EligibilityThresholds, RankedArchetype


def secondary_candidate(
    ranking: Sequence[RankedArchetype],
    primary: RankedArchetype,
) -> RankedArchetype | None:
    """First ranking entry that is not the primary; None with a single archetype."""
    for entry in ranking:
        if entry.id != primary.id:
            return entry
    return None


def is_eligible(primary_score: float, candidate_score: float, thresholds: EligibilityThresholds) -> bool:
    gap = primary_score - candidate_score
    # gap is never negative while the candidate comes from the base ranking;
    # the lower bound still applies to callers passing their own candidate.
    return (
        candidate_score >= thresholds.min_score
        and gap <= thresholds.max_gap_from_primary
        and gap >= thresholds.min_gap_from_primary
    )


def select_secondary(
    ranking: Sequence[RankedArchetype],
    primary: RankedArchetype,
    thresholds: EligibilityThresholds,
) -> RankedArchetype | None:
    candidate = secondary_candidate(ranking, primary)
    if candidate is None:
        return None
    if not is_eligible(primary.score, candidate.score, thresholds):
        return None
    return candidate
