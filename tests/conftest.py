"""
Pytest fixtures for investor diagnostic tests.

SMALL_DATASET mirrors the reference tie-break scenario: archetypes A, B, C
declared in that order, x1 = {A: 3, B: 1}, x2 = {B: 3, A: 1}, tie-breakers
q1 then q2.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from investor_diagnostic.engine.dataset import clear_default_dataset_cache, load_dataset

SMALL_DATASET: dict[str, Any] = {
    "diagnostic_id": "diagnostic_test",
    "version": "0.0.1",
    "language": "en",
    "questions": [
        {
            "id": "q1",
            "label": "First",
            "prompt": "First question?",
            "type": "single_choice",
            "answers": [{"id": "x1", "text": "One"}, {"id": "x7", "text": "Seven"}],
        },
        {
            "id": "q2",
            "label": "Second",
            "type": "single_choice",
            "answers": [{"id": "x2", "text": "Two"}, {"id": "x8", "text": "Eight"}],
        },
        {
            "id": "q3",
            "label": "Third",
            "type": "single_choice",
            "answers": [{"id": "x3", "text": "Three"}, {"id": "x4", "text": "Four"}],
        },
    ],
    "archetypes": [
        {"id": "A", "name": "Alpha", "one_liner": "First declared."},
        {"id": "B", "name": "Beta", "one_liner": "Second declared."},
        {"id": "C", "name": "Gamma", "one_liner": "Third declared."},
    ],
    "weights": {
        "by_answer": {
            "x1": {"A": 3, "B": 1},
            "x2": {"B": 3, "A": 1},
            "x3": {"C": 9},
            "x4": {"A": 2, "B": 2},
            "x7": {"A": 1, "B": 3},
            "x8": {"A": 3, "B": 1},
        }
    },
    "classification": {
        "secondary_eligibility": {"min_score": 4, "max_gap_from_primary": 4, "min_gap_from_primary": -2},
        "tie_breakers": ["q1", "q2"],
    },
}


@pytest.fixture
def raw_dataset() -> dict[str, Any]:
    """Deep copy of SMALL_DATASET; tests may mutate it freely."""
    return copy.deepcopy(SMALL_DATASET)


@pytest.fixture
def context(raw_dataset):
    return load_dataset(raw_dataset)


@pytest.fixture
def bundled_context(monkeypatch):
    """Bundled fr-CA questionnaire, ignoring any INVESTOR_DIAGNOSTIC_DATASET override."""
    monkeypatch.delenv("INVESTOR_DIAGNOSTIC_DATASET", raising=False)
    clear_default_dataset_cache()
    from investor_diagnostic.engine.dataset import load_default_dataset

    yield load_default_dataset()
    clear_default_dataset_cache()
