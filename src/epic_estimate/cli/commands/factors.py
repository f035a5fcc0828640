"""Factors command — print the rating guide."""

from __future__ import annotations

import typer

from epic_estimate.cli.commands.interactive import factor_guide_lines
from epic_estimate.core import EFFORT_UNITS, EffortDimension, describe_effort_unit, points_to_days
from epic_estimate.render import format_days


def run() -> None:
    """Show each effort dimension with its weight and rating examples."""
    typer.echo("Effort Dimensions")
    typer.echo("=" * 40)
    for dimension in EffortDimension:
        typer.echo("")
        for line in factor_guide_lines(dimension, show_weight=True):
            typer.echo(line)

    typer.echo("")
    typer.echo("Effort Units")
    typer.echo("=" * 40)
    for unit in EFFORT_UNITS:
        typer.echo(f"{describe_effort_unit(unit)} ({format_days(points_to_days(unit))})")
