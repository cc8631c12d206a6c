"""
Base ranking and primary selection with a fixed tie-break cascade.

The base ranking (score desc, declaration index asc) decides who is ahead of
whom everywhere downstream. Tie-breaking only chooses among archetypes that
share the top score; it never promotes a lower-scoring archetype.

Order of resolution when the top score is shared:
  1. Each tie-break question in order: skip if unanswered, otherwise keep only
     the candidates that the respondent's answer weights highest.
  2. Earliest-declared remaining candidate.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from investor_diagnostic.diagnostic_logging import get_logger
from investor_diagnostic.engine.aggregator import weight_for
from investor_diagnostic.engine.models import Archetype, RankedArchetype, Responses, WeightTable

logger = get_logger(__name__)


def base_ranking(scores: Mapping[str, float], archetypes: Sequence[Archetype]) -> tuple[RankedArchetype, ...]:
    """All declared archetypes sorted by (score desc, declaration index asc)."""
    indexed = [
        RankedArchetype(id=a.id, name=a.name, one_liner=a.one_liner, score=scores.get(a.id, 0), index=idx)
        for idx, a in enumerate(archetypes)
    ]
    return tuple(sorted(indexed, key=lambda r: (-r.score, r.index)))


def top_tied(ranking: Sequence[RankedArchetype]) -> tuple[RankedArchetype, ...]:
    """Entries sharing the top score, in ranking order."""
    if not ranking:
        return ()
    top_score = ranking[0].score
    return tuple(r for r in ranking if r.score == top_score)


def break_tie(
    tied: Sequence[RankedArchetype],
    weights: WeightTable,
    responses: Responses,
    tie_break_order: Sequence[str],
) -> RankedArchetype:
    """
    Pick one archetype from a non-empty tied group.

    Narrowing builds a new tuple at every step; the input is not modified.
    """
    if not tied:
        raise ValueError("tied group must not be empty")
    candidates = tuple(tied)
    if len(candidates) == 1:
        return candidates[0]

    for question_id in tie_break_order:
        answer_id = responses.get(question_id)
        if not answer_id or not isinstance(answer_id, str):
            continue
        tie_scores = [(c, weight_for(weights, answer_id, c.id)) for c in candidates]
        best = max(s for _, s in tie_scores)
        candidates = tuple(c for c, s in tie_scores if s == best)
        logger.debug(
            "tie_break_narrowed",
            question_id=question_id,
            answer_id=answer_id,
            best=best,
            remaining=[c.id for c in candidates],
        )
        if len(candidates) == 1:
            return candidates[0]

    chosen = min(candidates, key=lambda c: c.index)
    logger.debug(
        "tie_break_fallback_declaration_order",
        remaining=[c.id for c in candidates],
        chosen=chosen.id,
    )
    return chosen


def rank_and_select_primary(
    scores: Mapping[str, float],
    archetypes: Sequence[Archetype],
    weights: WeightTable,
    responses: Responses,
    tie_break_order: Sequence[str],
) -> tuple[tuple[RankedArchetype, ...], RankedArchetype]:
    """
    Return (base_ranking, primary).

    Raises:
        ValueError: archetypes is empty (the loader never produces such a context).
    """
    ranking = base_ranking(scores, archetypes)
    if not ranking:
        raise ValueError("cannot rank an empty archetype list")
    primary = break_tie(top_tied(ranking), weights, responses, tie_break_order)
    return ranking, primary
