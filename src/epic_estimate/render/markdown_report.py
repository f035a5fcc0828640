"""Markdown report renderer."""

from __future__ import annotations

from epic_estimate.core.models import Epic


def render_markdown_report(epic: Epic) -> str:
    """Render an epic estimate as GitHub-compatible Markdown."""
    lines: list[str] = [
        f"# Epic: {_escape_cell(epic.name)}",
        "",
        f"Total tasks: {len(epic.tasks)}  ",
        f"Total points: {epic.total_points}",
        "",
    ]
    lines.extend(_render_sequential(epic))
    lines.extend([""])
    lines.extend(_render_parallel(epic))
    lines.extend([""])
    lines.extend(_render_team_breakdown(epic))
    lines.extend([""])
    lines.extend(_render_task_table(epic))
    lines.extend([""])
    lines.extend(_render_task_notes(epic))
    lines.append("")
    return "\n".join(lines)


def _render_sequential(epic: Epic) -> list[str]:
    sequential = epic.sequential
    return [
        "## Sequential Estimate (1 Worker)",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Total points | {sequential.total_points} |",
        f"| Estimated days | {format_days(sequential.total_days)} |",
        f"| Estimated delivery date | {sequential.delivery_date.isoformat()} |",
    ]


def _render_parallel(epic: Epic) -> list[str]:
    parallel = epic.parallel
    count = len(epic.workers)
    noun = "Worker" if count == 1 else "Workers"
    return [
        f"## Parallel Estimate ({count} {noun})",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Estimated days | {format_days(parallel.total_days)} |",
        f"| Estimated delivery date | {parallel.delivery_date.isoformat()} |",
    ]


def _render_team_breakdown(epic: Epic) -> list[str]:
    lines = [
        "## Team Breakdown",
        "",
        "| Worker | Points | Days |",
        "| --- | --- | --- |",
    ]
    for load in epic.parallel.breakdown.values():
        lines.append(f"| {_escape_cell(load.name)} | {load.points} | {format_days(load.days)} |")
    if not epic.parallel.breakdown:
        lines.append("| N/A | 0 | 0 days |")
    return lines


def _render_task_table(epic: Epic) -> list[str]:
    lines = [
        "## Task Breakdown",
        "",
        "| # | Task | Category | Worker | Raw Score | Points |",
        "| --- | --- | --- | --- | --- | --- |",
    ]
    for index, task in enumerate(epic.tasks, start=1):
        worker = epic.worker_name(task.assigned_to) or task.assigned_to
        lines.append(
            f"| {index} | {_escape_cell(task.name)} | {task.category.value} | "
            f"{_escape_cell(worker)} | {task.raw_score:.1f} | {task.effort_unit} |"
        )
    return lines


def _render_task_notes(epic: Epic) -> list[str]:
    lines = ["## Task Notes", ""]
    found = False
    for task in epic.tasks:
        notes = [
            (dimension, note)
            for dimension, note in task.notes.items()
            if note and task.factors.get(dimension, 0) > 0
        ]
        if not notes:
            continue
        found = True
        lines.append(f"- **{_escape_cell(task.name)}**")
        for dimension, note in notes:
            lines.append(f"  - {dimension.value}: {_escape_cell(note)}")
    if not found:
        lines.append("No task notes.")
    return lines


def format_days(value: float) -> str:
    """Format a day count, dropping the decimal for whole days."""
    rounded = round(value, 1)
    if abs(rounded - int(rounded)) < 1e-9:
        text = str(int(rounded))
    else:
        text = f"{rounded:.1f}"
    return f"{text} day" if text == "1" else f"{text} days"


def _escape_cell(value: str) -> str:
    normalized = value.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    return normalized.replace("|", "\\|")
