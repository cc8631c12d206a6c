"""
Dataset schema: pydantic v2 models for the raw questionnaire JSON.

Only structure is enforced here (types, required keys, non-empty archetype
list). Cross-references between sections (weights pointing at archetypes,
tie-breakers pointing at questions) are resolved by the loader.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from investor_diagnostic.engine.models import (
    DEFAULT_DIAGNOSTIC_ID,
    DEFAULT_LANGUAGE,
    DEFAULT_VERSION,
    EligibilityThresholds,
)

_DEFAULTS = EligibilityThresholds()


class _Schema(BaseModel):
    # Unknown keys are authoring metadata and are ignored. Numbers must be finite.
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)


class AnswerSchema(_Schema):
    id: str = Field(..., min_length=1)
    text: str


class QuestionSchema(_Schema):
    id: str = Field(..., min_length=1)
    label: str
    prompt: Optional[str] = None
    type: Literal["single_choice"] = "single_choice"
    answers: list[AnswerSchema] = Field(default_factory=list)


class ArchetypeSchema(_Schema):
    id: str = Field(..., min_length=1)
    name: str
    one_liner: str = ""


class WeightsSchema(_Schema):
    by_answer: dict[str, dict[str, float]] = Field(default_factory=dict)


class SecondaryEligibilitySchema(_Schema):
    min_score: float = _DEFAULTS.min_score
    max_gap_from_primary: float = _DEFAULTS.max_gap_from_primary
    min_gap_from_primary: float = _DEFAULTS.min_gap_from_primary


class ClassificationSchema(_Schema):
    secondary_eligibility: SecondaryEligibilitySchema = Field(default_factory=SecondaryEligibilitySchema)
    tie_breakers: Optional[list[str]] = None


class DatasetSchema(_Schema):
    diagnostic_id: str = DEFAULT_DIAGNOSTIC_ID
    version: str = DEFAULT_VERSION
    language: str = DEFAULT_LANGUAGE
    questions: list[QuestionSchema] = Field(default_factory=list)
    archetypes: list[ArchetypeSchema] = Field(..., min_length=1)
    weights: WeightsSchema = Field(default_factory=WeightsSchema)
    classification: ClassificationSchema = Field(default_factory=ClassificationSchema)
