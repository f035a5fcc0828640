"""Typer application entrypoint."""

import logging
from typing import Optional

import typer

from epic_estimate.cli.commands import estimate, factors, show
from epic_estimate.version import __version__

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help=(
        "Estimate epic story points and delivery dates from multi-factor task ratings.\n\n"
        "Run `epic-estimate factors` for the rating guide."
    ),
)

app.command("estimate")(estimate.run)
app.command("show")(show.run)
app.command("factors")(factors.run)


def _print_version(value: bool) -> None:
    if not value:
        return
    typer.echo(f"epic-estimate {__version__}")
    raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send DEBUG records to stderr when ``verbose``; otherwise leave logging alone."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, force=True)


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log scoring and scheduling steps to stderr."
    ),
    version: Optional[bool] = typer.Option(  # noqa: ARG001
        None,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Print the epic-estimate version and exit.",
    ),
) -> None:
    configure_logging(verbose)


def main() -> None:
    """Console-script entry point."""
    app()
