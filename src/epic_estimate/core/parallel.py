"""Team timeline: independent per-worker queues running concurrently."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from collections.abc import Sequence
from datetime import date, timedelta
from types import MappingProxyType

from epic_estimate.core.models import EstimatedTask, ParallelEstimate, Worker, WorkerLoad

logger = logging.getLogger("epic_estimate")


def parallel_estimate(
    tasks: Sequence[EstimatedTask],
    workers: Sequence[Worker],
    today: date,
) -> ParallelEstimate:
    """Estimate delivery when every worker drains their own tasks in parallel.

    Each worker needs ``ceil(points / capacity)`` whole days. The epic
    finishes when the most heavily loaded worker does.

    Tasks assigned to a worker id missing from ``workers`` are left out of
    the breakdown. Assignment integrity is checked when tasks are collected.

    Args:
        tasks: Scored tasks, each carrying its assigned worker id.
        workers: Team members with their daily capacity.
        today: Start date for the delivery projection.

    Returns:
        A ``ParallelEstimate`` whose breakdown is keyed by worker id, in the
        order workers first appear among ``tasks``.
    """
    workers_by_id = {worker.id: worker for worker in workers}

    points_by_worker: dict[str, int] = defaultdict(int)
    for task in tasks:
        if task.assigned_to not in workers_by_id:
            logger.debug(
                "Task %r assigned to unknown worker %r; excluded from parallel estimate",
                task.name,
                task.assigned_to,
            )
            continue
        points_by_worker[task.assigned_to] += task.effort_unit

    breakdown: dict[str, WorkerLoad] = {}
    for worker_id, points in points_by_worker.items():
        worker = workers_by_id[worker_id]
        days = math.ceil(points / worker.capacity)
        breakdown[worker_id] = WorkerLoad(
            worker_id=worker_id,
            name=worker.name,
            points=points,
            days=days,
        )

    total_days = max((load.days for load in breakdown.values()), default=0)
    return ParallelEstimate(
        total_days=total_days,
        delivery_date=today + timedelta(days=total_days),
        breakdown=MappingProxyType(breakdown),
    )
