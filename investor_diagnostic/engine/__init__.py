"""
Investor diagnostic engine: dataset loading and rule-based classification.

Loader -> aggregator -> ranking/tie-break -> secondary -> confidence. No ML,
no randomness: the result is a pure function of (dataset, responses).
"""

from investor_diagnostic.engine.aggregator import aggregate
from investor_diagnostic.engine.confidence import confidence
from investor_diagnostic.engine.dataset import (
    clear_default_dataset_cache,
    load_dataset,
    load_dataset_file,
    load_default_dataset,
)
from investor_diagnostic.engine.models import (
    Answer,
    Archetype,
    ArchetypeRecord,
    ArchetypeScore,
    Confidence,
    DiagnosticContext,
    DiagnosticMeta,
    EligibilityThresholds,
    InvestorResult,
    Question,
    RankedArchetype,
)
from investor_diagnostic.engine.pipeline import evaluate
from investor_diagnostic.engine.ranking import base_ranking, break_tie, rank_and_select_primary
from investor_diagnostic.engine.secondary import is_eligible, secondary_candidate, select_secondary

__all__ = [
    "aggregate",
    "confidence",
    "clear_default_dataset_cache",
    "load_dataset",
    "load_dataset_file",
    "load_default_dataset",
    "Answer",
    "Archetype",
    "ArchetypeRecord",
    "ArchetypeScore",
    "Confidence",
    "DiagnosticContext",
    "DiagnosticMeta",
    "EligibilityThresholds",
    "InvestorResult",
    "Question",
    "RankedArchetype",
    "evaluate",
    "base_ranking",
    "break_tie",
    "rank_and_select_primary",
    "is_eligible",
    "secondary_candidate",
    "select_secondary",
]
