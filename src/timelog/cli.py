"""Command-line interface for the timelog."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from .codec import TIMESTAMP_FMT
from .config import TimelogSettings
from .logfile import open_timelog
from .paths import get_timelog_path
from .reporting import render_daily, render_weekly

app = typer.Typer(help="Track what you work on in a plain-text timelog.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _settings(day_boundary: Optional[int], work_hours: Optional[float] = None) -> TimelogSettings:
    try:
        return TimelogSettings.from_options(day_boundary_hour=day_boundary, work_hours=work_hours)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_datetime(value: Optional[str], fmt: str, option: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, fmt)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected {fmt!r}, got {value!r}.", param_hint=option) from exc


@app.command()
def record(
    description: List[str] = typer.Argument(..., help="What you just finished doing."),
    at: Optional[str] = typer.Option(
        None,
        "--at",
        help="When the activity ended (YYYY-MM-DD HH:MM). Defaults to now.",
    ),
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help="Location of the timelog file."
    ),
    day_boundary: Optional[int] = typer.Option(
        None, "--day-boundary", help="Hour at which a new workday starts (default 4)."
    ),
) -> None:
    """Record that an activity has just ended."""
    text = " ".join(description).strip()
    if not text:
        raise typer.BadParameter("You must specify an activity description.")
    end_time = _parse_datetime(at, TIMESTAMP_FMT, "--at")
    with open_timelog(log_path or get_timelog_path(), settings=_settings(day_boundary)) as store:
        store.record(text, end_time)


@app.command()
def daily(
    date: Optional[str] = typer.Option(
        None, "--date", help="Date (YYYY-MM-DD) to report on. Defaults to today."
    ),
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help="Location of the timelog file."
    ),
    work_hours: Optional[float] = typer.Option(
        None, "--work-hours", help="Length of a workday in hours (default 8)."
    ),
) -> None:
    """Print the activities and totals for one day."""
    target = _parse_datetime(date, "%Y-%m-%d", "--date")
    settings = _settings(None, work_hours)
    with open_timelog(log_path or get_timelog_path(), settings=settings) as store:
        render_daily(store, sys.stdout, target)


@app.command()
def weekly(
    date: Optional[str] = typer.Option(
        None, "--date", help="Any date (YYYY-MM-DD) in the week to report on."
    ),
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help="Location of the timelog file."
    ),
) -> None:
    """Print the activities and totals for a Monday-to-Sunday week."""
    target = _parse_datetime(date, "%Y-%m-%d", "--date")
    with open_timelog(log_path or get_timelog_path()) as store:
        render_weekly(store, sys.stdout, target)
