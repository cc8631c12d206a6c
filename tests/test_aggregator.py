"""
Tests for score aggregation (engine.aggregator.aggregate).
"""

from __future__ import annotations

import itertools

from investor_diagnostic.engine.aggregator import aggregate, empty_scores, weight_for


def test_every_archetype_starts_at_zero(context):
    """Declared archetypes are present even when untouched."""
    assert aggregate(context.weights, {}, context.archetype_ids) == {"A": 0, "B": 0, "C": 0}
    assert empty_scores(["A", "B"]) == {"A": 0, "B": 0}


def test_reference_scenario_scores(context):
    """x1 + x2 -> A=4, B=4, C=0."""
    scores = aggregate(context.weights, {"q1": "x1", "q2": "x2"}, context.archetype_ids)
    assert scores == {"A": 4, "B": 4, "C": 0}


def test_commutative_over_permutations(bundled_context):
    """Any insertion order of the same responses yields identical scores."""
    items = [
        ("q1_goal", "q1_b"),
        ("q2_horizon", "q2_a"),
        ("q3_drawdown_reaction", "q3_e"),
        ("q4_structure", "q4_e"),
        ("q5_info_source", "q5_d"),
    ]
    expected = aggregate(bundled_context.weights, dict(items), bundled_context.archetype_ids)
    for perm in itertools.permutations(items):
        assert aggregate(bundled_context.weights, dict(perm), bundled_context.archetype_ids) == expected


def test_negative_deltas_subtract(bundled_context):
    """q2_a gives architecte -1."""
    scores = aggregate(bundled_context.weights, {"q2_horizon": "q2_a"}, bundled_context.archetype_ids)
    assert scores["architecte"] == -1
    assert scores["navigateur"] == 2
    assert scores["explorateur"] == 2


def test_unknown_answer_is_inert(context):
    """Unknown answer ids change nothing versus omitting the question."""
    base = aggregate(context.weights, {"q1": "x1"}, context.archetype_ids)
    with_unknown = aggregate(context.weights, {"q1": "x1", "q2": "does_not_exist"}, context.archetype_ids)
    with_unknown_question = aggregate(context.weights, {"q1": "x1", "q99": "x99"}, context.archetype_ids)
    assert with_unknown == base
    assert with_unknown_question == base


def test_non_string_answer_ignored(context):
    scores = aggregate(context.weights, {"q1": None, "q2": 3}, context.archetype_ids)  # type: ignore[dict-item]
    assert scores == {"A": 0, "B": 0, "C": 0}


def test_answer_used_under_any_question_id(context):
    """Only the answer id is looked up; the question id is not checked."""
    scores = aggregate(context.weights, {"q3": "x1"}, context.archetype_ids)
    assert scores == {"A": 3, "B": 1, "C": 0}


def test_result_is_fresh_dict(context):
    """Two calls never share state."""
    first = aggregate(context.weights, {"q1": "x1"}, context.archetype_ids)
    first["A"] = 1000
    second = aggregate(context.weights, {"q1": "x1"}, context.archetype_ids)
    assert second["A"] == 3


def test_weight_for(context):
    assert weight_for(context.weights, "x1", "A") == 3
    assert weight_for(context.weights, "x1", "C") == 0
    assert weight_for(context.weights, "unknown", "A") == 0
    assert weight_for(context.weights, None, "A") == 0
