"""
Command line entry point.

    gym-log parse --file workouts.txt [--format json]
"""

import enum
import logging
from pathlib import Path
from typing import Annotated

import typer

from .config import SETTINGS
from .errors import GymLogParserError
from .logging_setup import setup_logging
from .parser import parse_exercise_log_file
from .render import render_records, render_records_json

logger = logging.getLogger(__name__)


class LogLevel(str, enum.Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


app = typer.Typer(
    name="gym-log",
    help="Parse and view log data for gym exercises.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: Annotated[
        LogLevel, typer.Option("--log-level", case_sensitive=False, help="Root log level")
    ] = LogLevel(SETTINGS.LOG_LEVEL),
) -> None:
    setup_logging(log_level.value)


@app.command("parse")
def parse_command(
    file: Annotated[Path, typer.Option("--file", "-f", help="Exercise log file to parse")],
    output_format: Annotated[
        str, typer.Option("--format", help="Output format: text or json")
    ] = SETTINGS.OUTPUT_FORMAT,
    strict_target_range: Annotated[
        bool,
        typer.Option(
            "--strict-target-range/--no-strict-target-range",
            help="Reject targets whose min reps exceed max reps",
        ),
    ] = SETTINGS.FF_STRICT_TARGET_RANGE,
) -> None:
    """Parse an exercise log file and display the parsed data."""
    fmt = output_format.lower()
    if fmt not in ("text", "json"):
        raise typer.BadParameter("must be 'text' or 'json'", param_hint="--format")

    try:
        records = parse_exercise_log_file(file, strict_target_range=strict_target_range)
    except GymLogParserError as e:
        logger.debug("Failed to parse %s: %s", file, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    logger.info("Parsed %d records from %s", len(records), file)
    typer.echo(render_records_json(records) if fmt == "json" else render_records(records))


if __name__ == "__main__":
    app()
