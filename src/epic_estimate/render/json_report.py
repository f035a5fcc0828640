"""JSON report renderer and persisted record schema."""

from __future__ import annotations

import json
from typing import Any

from epic_estimate.core.models import EffortDimension, Epic, EstimatedTask, Worker

SCHEMA_VERSION = "1.0"
DEFAULT_TOOL_NAME = "Epic Estimation Tool"


def render_json_report(epic: Epic, *, tool_name: str = DEFAULT_TOOL_NAME) -> str:
    """Render an epic as canonical JSON."""
    payload = build_epic_record(epic, tool_name=tool_name)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def build_epic_record(epic: Epic, *, tool_name: str = DEFAULT_TOOL_NAME) -> dict[str, Any]:
    """Build the versioned record written to estimation files."""
    created_at = epic.created_at.isoformat()
    sequential_delivery = epic.sequential.delivery_date.isoformat()

    return {
        "name": epic.name,
        "tasks": [_task_payload(task) for task in epic.tasks],
        "developers": [_worker_payload(worker) for worker in epic.workers],
        "totalPoints": epic.total_points,
        "estimatedDays": epic.total_days,
        "estimatedDeliveryDate": sequential_delivery,
        "parallelEstimate": {
            "totalDays": epic.parallel.total_days,
            "deliveryDate": epic.parallel.delivery_date.isoformat(),
            "breakdown": {
                worker_id: {
                    "name": load.name,
                    "days": load.days,
                    "points": load.points,
                }
                for worker_id, load in epic.parallel.breakdown.items()
            },
        },
        "createdAt": created_at,
        "version": SCHEMA_VERSION,
        "metadata": {
            "tool": tool_name,
            "generatedAt": created_at,
            "totalTasks": len(epic.tasks),
            "totalPoints": epic.total_points,
            "estimatedDays": epic.total_days,
            "estimatedDeliveryDate": sequential_delivery,
        },
    }


def _task_payload(task: EstimatedTask) -> dict[str, Any]:
    return {
        "name": task.name,
        "category": task.category.value,
        "assignedTo": task.assigned_to,
        "factors": {d.value: task.factors[d] for d in EffortDimension},
        "notes": {d.value: task.notes.get(d, "") for d in EffortDimension},
        "rawScore": task.raw_score,
        "fibonacciEstimate": task.effort_unit,
    }


def _worker_payload(worker: Worker) -> dict[str, Any]:
    return {
        "id": worker.id,
        "name": worker.name,
        "role": worker.role.value,
        "capacity": worker.capacity,
    }
