"""Estimation pipeline — orchestrates core engines into an Epic record."""

from __future__ import annotations

import logging
from datetime import date, datetime

from epic_estimate.core import (
    Epic,
    EpicInput,
    assemble_epic,
    parallel_estimate,
    score_task,
    sequential_estimate,
)

logger = logging.getLogger("epic_estimate")


def run_estimate_pipeline(
    epic_input: EpicInput,
    *,
    today: date | None = None,
    created_at: datetime | None = None,
) -> Epic:
    """Score every task, compute both timelines and assemble the record.

    ``today`` is resolved once so the sequential and parallel delivery
    dates share the same starting day.
    """
    if today is None:
        today = date.today()

    tasks = []
    for spec in epic_input.tasks:
        task = score_task(spec)
        logger.debug(
            "Scored task %r: raw %.2f -> %d point(s)",
            task.name,
            task.raw_score,
            task.effort_unit,
        )
        tasks.append(task)

    sequential = sequential_estimate(tasks, today)
    logger.debug(
        "Sequential estimate: %d point(s), %.1f day(s), delivery %s",
        sequential.total_points,
        sequential.total_days,
        sequential.delivery_date,
    )

    parallel = parallel_estimate(tasks, epic_input.workers, today)
    logger.debug(
        "Parallel estimate: %d day(s) across %d worker(s), delivery %s",
        parallel.total_days,
        len(parallel.breakdown),
        parallel.delivery_date,
    )

    return assemble_epic(
        epic_input.name,
        tasks,
        epic_input.workers,
        sequential,
        parallel,
        created_at=created_at,
    )
