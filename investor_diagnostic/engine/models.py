"""
Typed, immutable records for the investor diagnostic.

The dataset side (questions, archetypes, weights, thresholds) is built once by
the loader into a DiagnosticContext. The evaluation side (ranking entries,
archetype records, InvestorResult) is built fresh for every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_DIAGNOSTIC_ID = "diagnostic_investisseur_v1"
DEFAULT_VERSION = "1.0.0"
DEFAULT_LANGUAGE = "fr-CA"

# Consulted in order when several archetypes share the top score
DEFAULT_TIE_BREAK_ORDER: tuple[str, ...] = ("q4_structure", "q3_drawdown_reaction", "q2_horizon")

WeightTable = Mapping[str, Mapping[str, float]]
Responses = Mapping[str, str]


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Answer:
    id: str
    text: str


@dataclass(frozen=True)
class Question:
    id: str
    label: str
    prompt: str
    """Display prompt shown to the respondent; equals label when the dataset has none."""
    type: str
    answers: tuple[Answer, ...]

    def get_answer(self, answer_id: str) -> Answer | None:
        for answer in self.answers:
            if answer.id == answer_id:
                return answer
        return None


@dataclass(frozen=True)
class Archetype:
    id: str
    name: str
    one_liner: str


@dataclass(frozen=True)
class EligibilityThresholds:
    """
    Bounds a runner-up must satisfy to be reported as secondary.

    min_gap_from_primary is negative by default; with the base ranking the gap
    is never negative, so it only matters if selection stops drawing from it.
    """

    min_score: float = 4
    max_gap_from_primary: float = 4
    min_gap_from_primary: float = -2


@dataclass(frozen=True)
class DiagnosticMeta:
    diagnostic_id: str = DEFAULT_DIAGNOSTIC_ID
    version: str = DEFAULT_VERSION
    language: str = DEFAULT_LANGUAGE


@dataclass(frozen=True)
class DiagnosticContext:
    """
    A loaded, validated dataset. Read-only; share it across evaluations.

    Build with dataset.load_dataset(); never mutate the mappings.
    """

    meta: DiagnosticMeta
    questions: tuple[Question, ...]
    archetypes: tuple[Archetype, ...]
    weights: WeightTable
    thresholds: EligibilityThresholds
    tie_break_order: tuple[str, ...] = DEFAULT_TIE_BREAK_ORDER

    @property
    def archetype_ids(self) -> tuple[str, ...]:
        return tuple(a.id for a in self.archetypes)

    def get_archetype(self, archetype_id: str) -> Archetype | None:
        for archetype in self.archetypes:
            if archetype.id == archetype_id:
                return archetype
        return None

    def get_question(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def answer_text(self, question_id: str, answer_id: str | None) -> str | None:
        """Display text of an answer, or None when either id is unknown."""
        if not answer_id:
            return None
        question = self.get_question(question_id)
        if question is None:
            return None
        answer = question.get_answer(answer_id)
        return answer.text if answer else None


@dataclass(frozen=True)
class RankedArchetype:
    """One archetype in the base ranking; index is its declaration position."""

    id: str
    name: str
    one_liner: str
    score: float
    index: int


@dataclass(frozen=True)
class ArchetypeScore:
    id: str
    name: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "score": _number(self.score)}


@dataclass(frozen=True)
class ArchetypeRecord:
    id: str
    name: str
    score: float
    one_liner: str

    @classmethod
    def from_ranked(cls, entry: RankedArchetype) -> ArchetypeRecord:
        return cls(id=entry.id, name=entry.name, score=entry.score, one_liner=entry.one_liner)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "score": _number(self.score),
            "one_liner": self.one_liner,
        }


@dataclass(frozen=True)
class InvestorResult:
    """
    Outcome of one evaluation. Owned by the caller; the engine keeps no reference.

    ranked is the base order (score desc, declaration order), not the
    tie-broken order, so primary may differ from ranked[0] on a tie.
    """

    scores: Mapping[str, float]
    ranked: tuple[ArchetypeScore, ...]
    primary: ArchetypeRecord
    secondary: ArchetypeRecord | None
    confidence: Confidence
    runner_up_score: float | None = field(default=None, compare=False)
    """Score of the secondary candidate whether or not it was eligible; None if there is none."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "scores": {k: _number(v) for k, v in self.scores.items()},
            "ranked": [r.to_dict() for r in self.ranked],
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict() if self.secondary else None,
            "confidence": self.confidence.value,
        }


def freeze_weights(rows: Mapping[str, Mapping[str, float]]) -> WeightTable:
    """Wrap a weight table (and each row) in read-only mapping proxies."""
    return MappingProxyType({answer_id: MappingProxyType(dict(row)) for answer_id, row in rows.items()})


def _number(value: float) -> int | float:
    """Integral floats serialize as ints so 4.0 and 4 render identically."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
