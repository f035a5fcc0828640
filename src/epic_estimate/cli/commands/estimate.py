"""Estimate command — collect an epic, estimate it, render and save."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer

from epic_estimate.adapters.config_loader import load_default_settings, load_settings
from epic_estimate.adapters.epic_loader import load_epic_input
from epic_estimate.adapters.epic_store import save_epic
from epic_estimate.cli.commands._pipeline import run_estimate_pipeline
from epic_estimate.cli.commands.interactive import collect_epic_input
from epic_estimate.render import render_json_report, render_markdown_report

logger = logging.getLogger("epic_estimate")

_FORMATS = ("markdown", "json")


def run(
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Epic YAML file with workers and rated tasks. Prompts interactively when omitted.",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to settings YAML."
    ),
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for the saved estimate file."
    ),
    save: Optional[bool] = typer.Option(
        None, "--save/--no-save", help="Save the estimate as JSON (default from settings)."
    ),
    today: Optional[str] = typer.Option(
        None, "--today", help="Start date for delivery projections (YYYY-MM-DD)."
    ),
) -> None:
    """Estimate story points and delivery dates for an epic."""
    if format not in _FORMATS:
        _error(f"Unknown format: {format!r}. Use markdown or json.", 2)

    start_date: date | None = None
    if today is not None:
        try:
            start_date = date.fromisoformat(today)
        except ValueError:
            _error(f"Invalid --today date: {today!r}. Use YYYY-MM-DD.", 2)

    # --- Load settings ---
    try:
        settings = load_settings(config) if config else load_default_settings()
    except FileNotFoundError:
        _error(f"Config file not found: {config}", 2)
    except OSError as exc:
        _error(f"Failed to read config file {config}: {exc}", 1)
    except ValueError as exc:
        _error(f"Config validation error: {exc}", 2)

    # --- Collect epic input ---
    if file is not None:
        try:
            epic_input = load_epic_input(file, default_capacity=settings.default_capacity)
        except FileNotFoundError:
            _error(f"File not found: {file}", 2)
        except OSError as exc:
            _error(f"Failed to read epic file {file}: {exc}", 1)
        except ValueError as exc:
            _error(str(exc), 2)
    else:
        try:
            epic_input = collect_epic_input(default_capacity=settings.default_capacity)
        except (typer.Abort, KeyboardInterrupt, EOFError):
            typer.echo("\n\n👋 Goodbye! Thanks for using the estimation tool.")
            raise typer.Exit(code=0)

    # --- Run pipeline ---
    epic = run_estimate_pipeline(epic_input, today=start_date)

    # --- Output ---
    if format == "markdown":
        typer.echo(render_markdown_report(epic))
    else:
        typer.echo(render_json_report(epic, tool_name=settings.tool_name), nl=False)

    should_save = settings.save if save is None else save
    if not should_save:
        return

    directory = output_dir if output_dir is not None else settings.output_dir
    try:
        path = save_epic(epic, directory, tool_name=settings.tool_name)
    except OSError as exc:
        logger.debug("Save failed", exc_info=True)
        typer.echo(f"Warning: Failed to save epic: {exc}", err=True)
        typer.echo("Continuing without saving...", err=True)
        return
    typer.echo(f"Epic saved to: {path}", err=True)


def _error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)
