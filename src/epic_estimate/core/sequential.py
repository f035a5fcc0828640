"""Single-worker timeline: effort units to days, summed across the epic."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from datetime import date, timedelta
from types import MappingProxyType

from epic_estimate.core.models import EstimatedTask, SequentialEstimate

# Days per task at each effort unit. Larger units are less efficient per point.
POINTS_TO_DAYS: Mapping[int, float] = MappingProxyType(
    {
        1: 1.0,
        2: 1.0,
        3: 1.5,
        5: 2.5,
        8: 5.0,
    }
)


def points_to_days(effort_unit: int) -> float:
    """Return the duration of one task; unsupported units contribute 0."""
    return POINTS_TO_DAYS.get(effort_unit, 0.0)


def sequential_estimate(tasks: Sequence[EstimatedTask], today: date) -> SequentialEstimate:
    """Sum points and durations over ``tasks`` as if done one after another.

    ``total_days`` keeps fractional days. The delivery date rounds it up to
    whole calendar days from ``today``.
    """
    total_points = sum(task.effort_unit for task in tasks)
    total_days = math.fsum(points_to_days(task.effort_unit) for task in tasks)
    delivery_date = today + timedelta(days=math.ceil(total_days))
    return SequentialEstimate(
        total_points=total_points,
        total_days=total_days,
        delivery_date=delivery_date,
    )
