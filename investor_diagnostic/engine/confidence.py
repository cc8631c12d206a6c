"""
Confidence label from the raw gap between primary and runner-up.

Uses the secondary candidate's score whether or not it was eligible: the label
describes separation, not the secondary assignment.
"""

from __future__ import annotations

from investor_diagnostic.engine.models import Confidence

HIGH_CONFIDENCE_MIN_GAP = 5
MEDIUM_CONFIDENCE_MIN_GAP = 2


def confidence(primary_score: float, candidate_score: float | None) -> Confidence:
    """gap >= 5 -> high, 2 <= gap < 5 -> medium, gap < 2 -> low; no candidate -> high."""
    if candidate_score is None:
        return Confidence.HIGH
    gap = primary_score - candidate_score
    if gap >= HIGH_CONFIDENCE_MIN_GAP:
        return Confidence.HIGH
    if gap >= MEDIUM_CONFIDENCE_MIN_GAP:
        return Confidence.MEDIUM
    return Confidence.LOW
