"""Filesystem persistence for assembled epic estimates."""

from __future__ import annotations

import json
import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any

from epic_estimate.core.epic import assemble_epic
from epic_estimate.core.models import (
    Category,
    EffortDimension,
    Epic,
    EstimatedTask,
    ParallelEstimate,
    SequentialEstimate,
    Worker,
    WorkerLoad,
)
from epic_estimate.render.json_report import (
    DEFAULT_TOOL_NAME,
    SCHEMA_VERSION,
    render_json_report,
)

logger = logging.getLogger("epic_estimate")


def epic_filename(epic: Epic) -> str:
    """Return ``<slug>-<YYYY-MM-DD>-<HH-MM-SS>.json`` for an epic."""
    slug = re.sub(r"[^a-zA-Z0-9\s-]", "", epic.name)
    slug = re.sub(r"\s+", "-", slug.strip()).lower() or "epic"
    stamp = epic.created_at.strftime("%Y-%m-%d-%H-%M-%S")
    return f"{slug}-{stamp}.json"


def save_epic(
    epic: Epic,
    directory: str | Path,
    *,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> Path:
    """Write ``epic`` as a JSON record under ``directory`` and return its path.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / epic_filename(epic)
    path.write_text(render_json_report(epic, tool_name=tool_name), encoding="utf-8")
    logger.info("Saved epic %r to %s", epic.name, path)
    return path


def load_epic(path: str | Path) -> Epic:
    """Read a saved estimate record back into an ``Epic``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        OSError: If the file cannot be read.
        ValueError: If the file is not a valid estimate record.
    """
    epic, _tool_name = load_epic_record(path)
    return epic


def load_epic_record(path: str | Path) -> tuple[Epic, str]:
    """Like ``load_epic``, also returning the tool name stored in the record metadata."""
    record_path = Path(path)
    if not record_path.exists():
        raise FileNotFoundError(f"Estimate file not found: {record_path}")

    try:
        record = json.loads(record_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed JSON in estimate file {record_path}: {exc}") from exc

    if not isinstance(record, dict):
        raise ValueError(f"Invalid estimate file at {record_path}: root must be an object")

    version = record.get("version")
    if version != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported estimate schema version {version!r} in {record_path} "
            f"(expected {SCHEMA_VERSION!r})"
        )

    try:
        epic = _epic_from_record(record)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid estimate file at {record_path}: {exc!r}") from exc

    metadata = record.get("metadata")
    tool_name = metadata.get("tool") if isinstance(metadata, dict) else None
    if not isinstance(tool_name, str) or not tool_name.strip():
        tool_name = DEFAULT_TOOL_NAME
    return epic, tool_name


def _epic_from_record(record: dict[str, Any]) -> Epic:
    workers = [
        Worker.model_validate(
            {
                "id": raw["id"],
                "name": raw["name"],
                "role": raw["role"],
                "capacity": raw["capacity"],
            }
        )
        for raw in record["developers"]
    ]
    tasks = [_task_from_record(raw) for raw in record["tasks"]]

    sequential = SequentialEstimate(
        total_points=int(record["totalPoints"]),
        total_days=float(record["estimatedDays"]),
        delivery_date=_parse_date(record["estimatedDeliveryDate"]),
    )

    raw_parallel = record["parallelEstimate"]
    parallel = ParallelEstimate(
        total_days=int(raw_parallel["totalDays"]),
        delivery_date=_parse_date(raw_parallel["deliveryDate"]),
        breakdown={
            worker_id: WorkerLoad(
                worker_id=worker_id,
                name=str(raw["name"]),
                points=int(raw["points"]),
                days=int(raw["days"]),
            )
            for worker_id, raw in raw_parallel["breakdown"].items()
        },
    )

    return assemble_epic(
        str(record["name"]),
        tasks,
        workers,
        sequential,
        parallel,
        created_at=_parse_timestamp(record["createdAt"]),
    )


def _task_from_record(raw: dict[str, Any]) -> EstimatedTask:
    factors = {EffortDimension(key): int(value) for key, value in raw["factors"].items()}
    notes = {EffortDimension(key): str(value) for key, value in (raw.get("notes") or {}).items()}
    return EstimatedTask(
        name=str(raw["name"]),
        category=Category(raw["category"]),
        assigned_to=str(raw["assignedTo"]),
        factors=MappingProxyType({d: factors[d] for d in EffortDimension}),
        notes=MappingProxyType({d: notes.get(d, "") for d in EffortDimension}),
        raw_score=float(raw["rawScore"]),
        effort_unit=int(raw["fibonacciEstimate"]),
    )


def _parse_date(value: str) -> date:
    # Full timestamps are accepted too; only the calendar day is kept.
    return date.fromisoformat(value[:10])


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
