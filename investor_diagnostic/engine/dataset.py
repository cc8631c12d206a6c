"""
Dataset loader: raw questionnaire definition -> DiagnosticContext.

Accepts a mapping, a JSON string or a path. Validates structure once with the
pydantic schema and fails fast with ConfigError; evaluation never re-parses.
Weight entries that reference undeclared archetypes are dropped with a
warning so older engines tolerate newer datasets.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from investor_diagnostic.config.env import get_dataset_path
from investor_diagnostic.core.exceptions import ConfigError
from investor_diagnostic.diagnostic_logging import bind_diagnostic, get_logger
from investor_diagnostic.engine.models import (
    DEFAULT_TIE_BREAK_ORDER,
    Answer,
    Archetype,
    DiagnosticContext,
    DiagnosticMeta,
    EligibilityThresholds,
    Question,
    freeze_weights,
)
from investor_diagnostic.engine.schema import DatasetSchema

logger = get_logger(__name__)

MAPPING_SOURCE = "<mapping>"
STRING_SOURCE = "<string>"


def load_dataset(source: Mapping[str, Any] | str | os.PathLike[str]) -> DiagnosticContext:
    """
    Build a validated DiagnosticContext from a raw dataset.

    Args:
        source: Parsed JSON mapping, a JSON document string, or a path to a
            JSON file. Strings that do not start with "{" are treated as paths.

    Raises:
        ConfigError: unreadable or unparsable source, schema violation, empty
            archetype list, duplicate archetype or answer ids.
    """
    if isinstance(source, Mapping):
        return _build_context(source, MAPPING_SOURCE)
    if isinstance(source, str) and source.lstrip().startswith("{"):
        return _build_context(_parse_json(source, STRING_SOURCE), STRING_SOURCE)
    if isinstance(source, (str, os.PathLike)):
        return load_dataset_file(source)
    raise ConfigError(f"Unsupported dataset source type: {type(source).__name__}")


def load_dataset_file(path: str | os.PathLike[str]) -> DiagnosticContext:
    """Read a JSON dataset from disk and load it."""
    p = Path(path)
    label = str(p)
    if not p.is_file():
        logger.error("dataset_load_failed", path=label, error="file not found")
        raise ConfigError("Dataset file not found", source=label)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("dataset_load_failed", path=label, error=str(e))
        raise ConfigError(f"Dataset file unreadable: {e}", source=label) from e
    return _build_context(_parse_json(text, label), label)


@lru_cache(maxsize=1)
def _load_default(path: str) -> DiagnosticContext:
    return load_dataset_file(path)


def load_default_dataset() -> DiagnosticContext:
    """
    Load the configured dataset (INVESTOR_DIAGNOSTIC_DATASET or the bundled
    questionnaire) once per path and reuse it for the process lifetime.
    """
    return _load_default(str(get_dataset_path()))


def clear_default_dataset_cache() -> None:
    _load_default.cache_clear()


def _parse_json(text: str, label: str) -> Mapping[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("dataset_load_failed", path=label, error=str(e))
        raise ConfigError(f"Dataset is not valid JSON: {e}", source=label) from e
    if not isinstance(data, dict):
        raise ConfigError("Dataset root must be a JSON object", source=label)
    return data


def _build_context(raw: Mapping[str, Any], label: str) -> DiagnosticContext:
    try:
        schema = DatasetSchema.model_validate(raw)
    except ValidationError as e:
        logger.error("dataset_load_failed", path=label, error_count=e.error_count(), errors=_short_errors(e))
        raise ConfigError(f"Dataset failed schema validation: {_short_errors(e)}", source=label) from e

    archetypes = tuple(Archetype(id=a.id, name=a.name, one_liner=a.one_liner) for a in schema.archetypes)
    _require_unique([a.id for a in archetypes], "archetype", label)

    questions: list[Question] = []
    for q in schema.questions:
        answers = tuple(Answer(id=a.id, text=a.text) for a in q.answers)
        _require_unique([a.id for a in answers], f"answer in question {q.id!r}", label)
        questions.append(
            Question(id=q.id, label=q.label, prompt=q.prompt or q.label, type=q.type, answers=answers)
        )
    _require_unique([q.id for q in questions], "question", label)

    declared = {a.id for a in archetypes}
    rows: dict[str, dict[str, float]] = {}
    for answer_id, row in schema.weights.by_answer.items():
        kept: dict[str, float] = {}
        for archetype_id, delta in row.items():
            if archetype_id not in declared:
                logger.warning(
                    "dataset_unknown_archetype_weight",
                    path=label,
                    answer_id=answer_id,
                    archetype_id=archetype_id,
                )
                continue
            kept[archetype_id] = delta
        rows[answer_id] = kept

    elig = schema.classification.secondary_eligibility
    thresholds = EligibilityThresholds(
        min_score=elig.min_score,
        max_gap_from_primary=elig.max_gap_from_primary,
        min_gap_from_primary=elig.min_gap_from_primary,
    )
    tie_breakers = schema.classification.tie_breakers
    tie_break_order = tuple(tie_breakers) if tie_breakers is not None else DEFAULT_TIE_BREAK_ORDER

    question_ids = {q.id for q in questions}
    unknown_tie_breakers = [qid for qid in tie_break_order if question_ids and qid not in question_ids]
    if unknown_tie_breakers:
        logger.warning("dataset_unknown_tie_breaker", path=label, question_ids=unknown_tie_breakers)

    context = DiagnosticContext(
        meta=DiagnosticMeta(diagnostic_id=schema.diagnostic_id, version=schema.version, language=schema.language),
        questions=tuple(questions),
        archetypes=archetypes,
        weights=freeze_weights(rows),
        thresholds=thresholds,
        tie_break_order=tie_break_order,
    )
    bind_diagnostic(context.meta.diagnostic_id, context.meta.version).info(
        "dataset_loaded",
        path=label,
        questions=len(context.questions),
        archetypes=len(context.archetypes),
        weighted_answers=len(rows),
    )
    return context


def _require_unique(ids: list[str], kind: str, label: str) -> None:
    seen: set[str] = set()
    for item in ids:
        if item in seen:
            logger.error("dataset_load_failed", path=label, error=f"duplicate {kind} id", id=item)
            raise ConfigError(f"Duplicate {kind} id: {item!r}", source=label)
        seen.add(item)


def _short_errors(e: ValidationError, limit: int = 3) -> str:
    parts = []
    for err in e.errors()[:limit]:
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc or '<root>'}: {err.get('msg', '')}")
    return "; ".join(parts)
