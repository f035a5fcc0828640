"""Weighted multi-factor scoring and Fibonacci effort-unit rounding."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from epic_estimate.core.factors import FACTOR_WEIGHTS
from epic_estimate.core.models import (
    MAX_RATING,
    MIN_RATING,
    EffortDimension,
    EstimatedTask,
    TaskScore,
    TaskSpec,
)

# Supported effort units, ascending. The last entry is the cap.
EFFORT_UNITS: tuple[int, ...] = (1, 2, 3, 5, 8)

# Weights and ratings carry a single decimal place; anything finer is float drift.
_RAW_SCORE_PRECISION = 6


def round_up_to_effort_unit(raw_score: float) -> int:
    """Return the smallest supported effort unit >= ``raw_score``.

    Scores above the largest unit are capped at it, and a score of zero still
    costs the smallest unit.
    """
    for unit in EFFORT_UNITS:
        if raw_score <= unit:
            return unit
    return EFFORT_UNITS[-1]


def compute_raw_score(rating: Mapping[EffortDimension, int]) -> float:
    """Weighted sum of a complete rating."""
    _validate_rating(rating)
    total = math.fsum(rating[d] * FACTOR_WEIGHTS[d] for d in EffortDimension)
    return round(total, _RAW_SCORE_PRECISION)


def score_rating(rating: Mapping[EffortDimension, int]) -> TaskScore:
    """Score a complete rating.

    Raises:
        ValueError: If a dimension is missing or a value is not an integer
            between 0 and 3.
    """
    raw_score = compute_raw_score(rating)
    return TaskScore(raw_score=raw_score, effort_unit=round_up_to_effort_unit(raw_score))


def score_task(spec: TaskSpec) -> EstimatedTask:
    """Freeze a collected task together with its score."""
    score = score_rating(spec.factors)
    return EstimatedTask(
        name=spec.name,
        category=spec.category,
        assigned_to=spec.assigned_to,
        factors=MappingProxyType(dict(spec.factors)),
        notes=MappingProxyType(dict(spec.notes)),
        raw_score=score.raw_score,
        effort_unit=score.effort_unit,
    )


def _validate_rating(rating: Mapping[EffortDimension, int]) -> None:
    missing = [d.value for d in EffortDimension if d not in rating]
    if missing:
        raise ValueError(f"rating is missing dimensions: {', '.join(missing)}")
    for dimension in EffortDimension:
        value = rating[dimension]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"{dimension.value} rating must be an integer, got {value!r}"
            )
        if not (MIN_RATING <= value <= MAX_RATING):
            raise ValueError(
                f"{dimension.value} rating must be between {MIN_RATING} and "
                f"{MAX_RATING}, got {value}"
            )
