"""Assemble finalized tasks, workers and estimates into an Epic record."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from types import MappingProxyType

from epic_estimate.core.models import (
    Epic,
    EstimatedTask,
    ParallelEstimate,
    SequentialEstimate,
    Worker,
)


def assemble_epic(
    name: str,
    tasks: Sequence[EstimatedTask],
    workers: Sequence[Worker],
    sequential: SequentialEstimate,
    parallel: ParallelEstimate,
    *,
    created_at: datetime | None = None,
) -> Epic:
    """Bundle already-computed parts into an immutable ``Epic``.

    The record takes its own copies of the task and worker sequences and the
    parallel breakdown, so later changes to the caller's containers do not
    leak in.
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc)

    return Epic(
        name=name,
        tasks=tuple(tasks),
        workers=tuple(workers),
        sequential=sequential,
        parallel=replace(parallel, breakdown=MappingProxyType(dict(parallel.breakdown))),
        created_at=created_at,
    )
