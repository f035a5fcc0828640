"""Show command — re-render a saved estimate file."""

from __future__ import annotations

from pathlib import Path

import typer

from epic_estimate.adapters.epic_store import load_epic_record
from epic_estimate.render import render_json_report, render_markdown_report


def run(
    estimate_file: Path = typer.Argument(..., help="Path to a saved estimate JSON file."),
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
) -> None:
    """Display a previously saved epic estimate."""
    if format not in ("markdown", "json"):
        typer.echo(f"Error: Unknown format: {format!r}. Use markdown or json.", err=True)
        raise typer.Exit(code=2)

    try:
        epic, tool_name = load_epic_record(estimate_file)
    except FileNotFoundError:
        typer.echo(f"Error: File not found: {estimate_file}", err=True)
        raise typer.Exit(code=2)
    except OSError as exc:
        typer.echo(f"Error: Failed to read estimate file {estimate_file}: {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    if format == "markdown":
        typer.echo(render_markdown_report(epic))
    else:
        # Keep the tool name the record was saved with.
        typer.echo(render_json_report(epic, tool_name=tool_name), nl=False)
