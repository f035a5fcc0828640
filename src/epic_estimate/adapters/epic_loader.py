"""Non-interactive epic input: workers and rated tasks from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from epic_estimate.adapters.config_loader import format_validation_errors, read_yaml_mapping
from epic_estimate.core.models import DEFAULT_CAPACITY, EpicInput

logger = logging.getLogger("epic_estimate")


def worker_id_for(position: int) -> str:
    """Return the generated id for the worker at 1-based ``position``."""
    return f"dev-{position}"


def load_epic_input(
    path: str | Path,
    *,
    default_capacity: float = DEFAULT_CAPACITY,
) -> EpicInput:
    """Load and validate an epic file.

    Workers may omit ``id`` (generated as ``dev-N`` by position) and
    ``capacity`` (``default_capacity``). A task's ``assigned_to`` may name a
    worker by id or by its unique display name.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the YAML is malformed or fails validation.
    """
    epic_path = Path(path)
    raw_data = read_yaml_mapping(epic_path, kind="epic")
    prepared = _prepare(raw_data, default_capacity=default_capacity, source=epic_path)

    try:
        epic_input = EpicInput.model_validate(prepared)
    except ValidationError as exc:
        detail_text = format_validation_errors(exc)
        raise ValueError(f"Invalid epic file at {epic_path}:\n{detail_text}") from exc

    logger.debug(
        "Loaded epic %r from %s: %d worker(s), %d task(s)",
        epic_input.name,
        epic_path,
        len(epic_input.workers),
        len(epic_input.tasks),
    )
    return epic_input


def _prepare(raw: dict[str, Any], *, default_capacity: float, source: Path) -> dict[str, Any]:
    prepared = dict(raw)

    workers = raw.get("workers")
    if isinstance(workers, list):
        filled: list[Any] = []
        for position, worker in enumerate(workers, start=1):
            if isinstance(worker, dict):
                worker = dict(worker)
                worker.setdefault("id", worker_id_for(position))
                worker.setdefault("capacity", default_capacity)
            filled.append(worker)
        prepared["workers"] = filled

        tasks = raw.get("tasks")
        if isinstance(tasks, list):
            prepared["tasks"] = [
                _resolve_assignee(task, filled, source) if isinstance(task, dict) else task
                for task in tasks
            ]
    return prepared


def _resolve_assignee(task: dict[str, Any], workers: list[Any], source: Path) -> dict[str, Any]:
    assignee = task.get("assigned_to")
    if not isinstance(assignee, str):
        return task

    worker_dicts = [w for w in workers if isinstance(w, dict)]
    if any(w.get("id") == assignee for w in worker_dicts):
        return task

    by_name = [w for w in worker_dicts if w.get("name") == assignee]
    if len(by_name) > 1:
        raise ValueError(
            f"Invalid epic file at {source}: task {task.get('name')!r} is assigned to "
            f"{assignee!r}, which names more than one worker; use a worker id"
        )
    if by_name:
        return {**task, "assigned_to": by_name[0]["id"]}
    return task
