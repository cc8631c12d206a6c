"""
Score aggregation: sum the weight deltas of the submitted answers per archetype.

Order-independent (pure addition), so any permutation of responses yields the
same scores. Answers without a weight row contribute nothing.
"""

from __future__ import annotations

from typing import Iterable

from investor_diagnostic.engine.models import Responses, WeightTable


def empty_scores(archetype_ids: Iterable[str]) -> dict[str, float]:
    """Every declared archetype starts at 0, even if no answer touches it."""
    return {archetype_id: 0 for archetype_id in archetype_ids}


def aggregate(
    weights: WeightTable,
    responses: Responses,
    archetype_ids: Iterable[str],
) -> dict[str, float]:
    """
    Return {archetype_id: score} for the given responses.

    Only the answer id of each (question_id, answer_id) pair is looked up;
    unknown answer ids and non-string values are ignored. Deltas for archetypes
    outside archetype_ids are ignored too, so the result always has exactly
    the declared keys.
    """
    scores = empty_scores(archetype_ids)
    for answer_id in responses.values():
        row = weights.get(answer_id) if isinstance(answer_id, str) else None
        if not row:
            continue
        for archetype_id, delta in row.items():
            if archetype_id in scores:
                scores[archetype_id] += delta
    return scores


def weight_for(weights: WeightTable, answer_id: str | None, archetype_id: str) -> float:
    """Delta a single answer gives one archetype; 0 when either is unknown."""
    if not answer_id:
        return 0
    row = weights.get(answer_id)
    if not row:
        return 0
    return row.get(archetype_id, 0)
