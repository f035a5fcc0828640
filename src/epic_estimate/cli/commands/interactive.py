"""Interactive collection of workers and rated tasks."""

from __future__ import annotations

import math
from collections.abc import Sequence

import typer

from epic_estimate.adapters.epic_loader import worker_id_for
from epic_estimate.core import (
    FACTOR_DESCRIPTIONS,
    FACTOR_WEIGHTS,
    Category,
    EffortDimension,
    EpicInput,
    TaskSpec,
    Worker,
    describe_effort_unit,
    score_rating,
)
from epic_estimate.core.models import MAX_RATING, MIN_RATING


def collect_epic_input(*, default_capacity: float) -> EpicInput:
    """Prompt for an epic name, its team, then one or more tasks."""
    typer.echo("=== Epic Estimation ===")
    typer.echo("Press Ctrl+C at any time to exit\n")

    name = _prompt_text("Epic name")
    workers = collect_workers(default_capacity=default_capacity)

    tasks: list[TaskSpec] = []
    while True:
        spec = collect_task(workers)
        tasks.append(spec)
        _echo_task_added(spec, workers)
        if not typer.confirm("Add another task?", default=False):
            break

    return EpicInput(name=name, workers=workers, tasks=tasks)


def collect_workers(*, default_capacity: float) -> list[Worker]:
    """Prompt for workers until the user declines to add another."""
    typer.echo("\n=== Team Setup ===")
    typer.echo(
        f"Each worker can handle approximately {_format_number(default_capacity)} points per day"
    )

    workers: list[Worker] = []
    while True:
        position = len(workers) + 1
        name = _prompt_text(f"Worker {position} name")
        role = _prompt_category(f"Role for {name}")
        capacity = _prompt_capacity(name, default_capacity)
        workers.append(
            Worker(id=worker_id_for(position), name=name, role=role, capacity=capacity)
        )
        if not typer.confirm("Add another worker?", default=False):
            return workers


def collect_task(workers: Sequence[Worker]) -> TaskSpec:
    """Prompt for one task: name, category, assignee and all eight ratings."""
    typer.echo("\n=== Creating New Task ===")
    name = _prompt_text("Task name")

    while True:
        category = _prompt_category("Category")
        available = [w for w in workers if w.role == category]
        if available:
            break
        typer.echo(
            f"⚠️  No {category.value} workers available. Choose another category."
        )

    if len(available) == 1:
        assignee = available[0]
        typer.echo(f"Assigned to {assignee.name} (only {category.value} worker)")
    else:
        index = _prompt_choice(
            f"Assign to which {category.value} worker?",
            labels=[f"{w.name} ({_format_number(w.capacity)} pts/day)" for w in available],
            keys=[w.name for w in available],
        )
        assignee = available[index]

    factors: dict[EffortDimension, int] = {}
    notes: dict[EffortDimension, str] = {}
    for dimension in EffortDimension:
        typer.echo("")
        for line in factor_guide_lines(dimension):
            typer.echo(line)
        value = _prompt_rating(dimension)
        factors[dimension] = value
        if value > 0:
            note = typer.prompt(
                f"Note for {dimension.value} (optional, press Enter to skip)",
                default="",
                show_default=False,
            )
            notes[dimension] = note.strip()

    return TaskSpec(
        name=name,
        category=category,
        assigned_to=assignee.id,
        factors=factors,
        notes=notes,
    )


def factor_guide_lines(dimension: EffortDimension, *, show_weight: bool = False) -> list[str]:
    """Return the rating guidance for one dimension."""
    description = FACTOR_DESCRIPTIONS[dimension]
    title = f"--- {dimension.label} ---"
    if show_weight:
        title = f"--- {dimension.label} (weight {FACTOR_WEIGHTS[dimension]}) ---"
    return [
        title,
        f"Meaning: {description.meaning}",
        f"{MIN_RATING} (Low/Easy): {', '.join(description.low_examples)}",
        f"{MAX_RATING} (High/Hard): {', '.join(description.high_examples)}",
    ]


def _echo_task_added(spec: TaskSpec, workers: Sequence[Worker]) -> None:
    score = score_rating(spec.factors)
    assignee = next((w.name for w in workers if w.id == spec.assigned_to), spec.assigned_to)
    typer.echo("\n--- Task Added ---")
    typer.echo(f"Task: {spec.name}")
    typer.echo(f"Category: {spec.category.value}")
    typer.echo(f"Assigned To: {assignee}")
    typer.echo(f"Raw Score: {score.raw_score:.1f}")
    typer.echo(f"Effort Points: {score.effort_unit}")
    typer.echo(f"Time Estimate: {describe_effort_unit(score.effort_unit)}")


def _prompt_text(message: str) -> str:
    while True:
        value = str(typer.prompt(message)).strip()
        if value:
            return value
        typer.echo("❌ A value is required")


def _prompt_category(message: str) -> Category:
    categories = list(Category)
    index = _prompt_choice(
        message,
        labels=[c.value for c in categories],
        keys=[c.value for c in categories],
    )
    return categories[index]


def _prompt_choice(message: str, *, labels: Sequence[str], keys: Sequence[str]) -> int:
    """Prompt for one option by 1-based number or by (case-insensitive) key."""
    for number, label in enumerate(labels, start=1):
        typer.echo(f"  {number}) {label}")
    lowered = [key.lower() for key in keys]
    while True:
        raw = str(typer.prompt(message)).strip()
        if raw.isdigit() and 1 <= int(raw) <= len(labels):
            return int(raw) - 1
        if raw.lower() in lowered:
            return lowered.index(raw.lower())
        typer.echo(f"❌ Choose a number from 1 to {len(labels)}")


def _prompt_capacity(name: str, default_capacity: float) -> float:
    while True:
        raw = str(
            typer.prompt(
                f"Daily capacity for {name} (points per day)",
                default=_format_number(default_capacity),
            )
        ).strip()
        try:
            capacity = float(raw)
        except ValueError:
            typer.echo("❌ Please enter a number")
            continue
        if not math.isfinite(capacity) or capacity <= 0:
            typer.echo("❌ Capacity must be greater than 0")
            continue
        return capacity


def _prompt_rating(dimension: EffortDimension) -> int:
    while True:
        raw = str(
            typer.prompt(f"{dimension.value} ({MIN_RATING}-{MAX_RATING})", default="0")
        ).strip()
        if not raw:
            return 0
        try:
            parsed = float(raw)
        except ValueError:
            typer.echo("❌ Please enter a valid number (0, 1, 2, or 3)")
            continue
        if not math.isfinite(parsed) or not (MIN_RATING <= parsed <= MAX_RATING):
            typer.echo(f"❌ Value must be between {MIN_RATING} and {MAX_RATING}")
            continue
        if not parsed.is_integer():
            typer.echo("❌ Please enter a whole number (0, 1, 2, or 3)")
            continue
        return int(parsed)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
