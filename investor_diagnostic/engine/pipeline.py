"""
Evaluation pipeline: aggregate -> rank/tie-break -> secondary -> confidence.

evaluate() is pure and reentrant: the context is only read, and every stage
returns a new value, so one loaded context can serve any number of
concurrent callers.
"""

from __future__ import annotations

from types import MappingProxyType

from investor_diagnostic.diagnostic_logging import get_logger
from investor_diagnostic.engine.aggregator import aggregate
from investor_diagnostic.engine.confidence import confidence
from investor_diagnostic.engine.models import (
    ArchetypeRecord,
    ArchetypeScore,
    Confidence,
    DiagnosticContext,
    InvestorResult,
    Responses,
)
from investor_diagnostic.engine.ranking import rank_and_select_primary
from investor_diagnostic.engine.secondary import is_eligible, secondary_candidate

logger = get_logger(__name__)


def has_scored_answer(context: DiagnosticContext, responses: Responses) -> bool:
    """True if at least one submitted answer id has a non-empty weight row."""
    return any(isinstance(a, str) and bool(context.weights.get(a)) for a in responses.values())


def evaluate(context: DiagnosticContext, responses: Responses | None) -> InvestorResult:
    """
    Classify one respondent.

    Args:
        context: Loaded dataset (see dataset.load_dataset).
        responses: {question_id: answer_id}; may be partial, empty or None,
            and may contain unknown ids.

    Returns:
        A fresh InvestorResult. Never raises for degenerate responses: with no
        usable answer every score is 0, the first-declared archetype is
        primary and confidence is high.
    """
    answers = dict(responses or {})
    scores = aggregate(context.weights, answers, context.archetype_ids)
    ranking, primary = rank_and_select_primary(
        scores,
        context.archetypes,
        context.weights,
        answers,
        context.tie_break_order,
    )
    candidate = secondary_candidate(ranking, primary)
    runner_up_score = candidate.score if candidate is not None else None
    secondary = None
    if candidate is not None and is_eligible(primary.score, candidate.score, context.thresholds):
        secondary = candidate
    if has_scored_answer(context, answers):
        level = confidence(primary.score, runner_up_score)
    else:
        # Nothing was scored: the primary is the declared default, not a contested pick
        level = Confidence.HIGH

    result = InvestorResult(
        scores=MappingProxyType(scores),
        ranked=tuple(ArchetypeScore(id=r.id, name=r.name, score=r.score) for r in ranking),
        primary=ArchetypeRecord.from_ranked(primary),
        secondary=ArchetypeRecord.from_ranked(secondary) if secondary else None,
        confidence=level,
        runner_up_score=runner_up_score,
    )
    logger.debug(
        "diagnostic_evaluated",
        diagnostic_id=context.meta.diagnostic_id,
        answered=len(answers),
        primary=result.primary.id,
        primary_score=result.primary.score,
        secondary=result.secondary.id if result.secondary else None,
        confidence=level.value,
    )
    return result
