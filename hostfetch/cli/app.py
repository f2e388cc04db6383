"""Typer-based CLI application for hostfetch."""

import logging
import os
from typing import Annotated, Optional

import typer
from pydantic import BaseModel, ConfigDict, Field

from hostfetch import __version__
from hostfetch.core.snapshot import collect_snapshot, collect_snapshot_serial
from hostfetch.utils.formatters import Palette, render_snapshot

app = typer.Typer(
    name="hostfetch",
    help="Display system information: OS, kernel, uptime, shell, CPU, RAM, "
    "GPU, architecture, and disk usage.",
    add_completion=False,
)

NO_COLOR_ENV = "NO_COLOR"
LOG_LEVELS = ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]


class DisplayOptions(BaseModel):
    """Resolved display settings."""

    model_config = ConfigDict(frozen=True)

    color_enabled: bool = Field(default=True, description="Emit ANSI colors")


def resolve_display_options(nocolors: bool) -> DisplayOptions:
    """Combine the --nocolors flag with the NO_COLOR environment variable.

    NO_COLOR disables color when present, whatever its value.
    """
    return DisplayOptions(color_enabled=not (nocolors or NO_COLOR_ENV in os.environ))


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"hostfetch v{__version__}")
        raise typer.Exit()


def configure_logging(log_level: str) -> None:
    """Configure diagnostics on stderr.

    Raises:
        typer.Exit: If the level name is invalid
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in LOG_LEVELS:
        typer.echo(
            f"❌ Invalid log level: {log_level}. "
            "Must be debug, info, warn, or error.",
            err=True,
        )
        raise typer.Exit(1)

    # Map WARN to WARNING for Python logging
    if log_level_upper == "WARN":
        log_level_upper = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(levelname)s: %(message)s",
    )


@app.command()
def main(
    nocolors: Annotated[
        bool,
        typer.Option("--nocolors", help="Disable colored output"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    # Runtime options (hidden from help - for developers)
    log_level: Annotated[
        str,
        typer.Option(
            envvar="HOSTFETCH_LOG_LEVEL",
            help="Logging level (debug, info, warn, error)",
            case_sensitive=False,
            hidden=True,
        ),
    ] = "warn",
    serial: Annotated[
        bool,
        typer.Option("--serial", help="Collect facts one at a time", hidden=True),
    ] = False,
):
    """Display system information.

    Examples:
        hostfetch
        hostfetch --nocolors
        NO_COLOR=1 hostfetch
    """
    configure_logging(log_level)
    options = resolve_display_options(nocolors)

    snapshot = collect_snapshot_serial() if serial else collect_snapshot()

    for line in render_snapshot(snapshot, Palette(enabled=options.color_enabled)):
        typer.echo(line, color=options.color_enabled)


if __name__ == "__main__":
    app()
