"""Daily and weekly reports built from the activity store."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, TextIO, Union

from .models import Activity, ReportLine
from .store import ActivityStore

DayLike = Union[date, datetime]


def format_duration(seconds: float) -> str:
    """Format seconds as ``H h MM min``, dropping anything below a minute."""
    total_minutes = max(0, int(seconds)) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours} h {minutes:02d} min"


def is_slacking(description: str, marker: str = "**") -> bool:
    return description.endswith(marker)


def aggregate(activities: Iterable[Activity]) -> list[ReportLine]:
    """Sum durations per description, sorted by description."""
    totals: defaultdict[str, float] = defaultdict(float)
    for activity in activities:
        totals[activity.description] += activity.duration_seconds
    return [
        ReportLine(description=description, seconds=int(seconds))
        for description, seconds in sorted(totals.items(), key=lambda item: item[0])
    ]


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


class ReportPrinter:
    """Render reports for a store to a text stream."""

    def __init__(self, store: ActivityStore, output: TextIO) -> None:
        self.store = store
        self.output = output
        self.settings = store.settings

    def print_daily(self, day: Optional[DayLike] = None) -> None:
        target = self._resolve_day(day)
        selected = [a for a in self.store.activities if a.start_time.date() == target]
        working, _ = self._print_lines(selected)
        time_left = max(0, self.settings.daily_work_seconds - working)
        self._print(f"Time left at work:    {format_duration(time_left)}")

    def print_weekly(self, day: Optional[DayLike] = None) -> None:
        monday, sunday = week_bounds(self._resolve_day(day))
        selected = [
            a for a in self.store.activities if monday <= a.start_time.date() <= sunday
        ]
        self._print_lines(selected)

    def _print_lines(self, activities: list[Activity]) -> tuple[int, int]:
        """Print report lines and the working/slacking totals."""
        lines = aggregate(activities)
        for line in lines:
            self._print(f"{format_duration(line.seconds)}   {line.description}")

        marker = self.settings.slacking_marker
        time_working = 0
        time_slacking = 0
        for line in lines:
            if is_slacking(line.description, marker):
                time_slacking += line.seconds
            else:
                time_working += line.seconds

        if activities:
            self._print()
        self._print(f"Time spent working:   {format_duration(time_working)}")
        self._print(f"Time spent slacking:  {format_duration(time_slacking)}")
        return time_working, time_slacking

    def _resolve_day(self, day: Optional[DayLike]) -> date:
        if day is None:
            return self.store.clock().date()
        if isinstance(day, datetime):
            return day.date()
        return day

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)


def render_daily(store: ActivityStore, output: TextIO, day: Optional[DayLike] = None) -> None:
    ReportPrinter(store, output).print_daily(day)


def render_weekly(store: ActivityStore, output: TextIO, day: Optional[DayLike] = None) -> None:
    ReportPrinter(store, output).print_weekly(day)
