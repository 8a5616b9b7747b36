"""Configuration models and helpers for the timelog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(slots=True)
class TimelogSettings:
    """Rules used when recording activities and building reports."""

    # A new workday starts at this hour, not at midnight.
    day_boundary_hour: int = 4
    daily_work: timedelta = timedelta(hours=8)
    slacking_marker: str = "**"

    @property
    def daily_work_seconds(self) -> int:
        return int(self.daily_work.total_seconds())

    @classmethod
    def from_options(
        cls,
        day_boundary_hour: int | None = None,
        work_hours: float | None = None,
    ) -> "TimelogSettings":
        settings = cls()
        if day_boundary_hour is not None:
            if not 0 <= day_boundary_hour <= 23:
                raise ValueError(f"Day boundary hour must be 0-23, got {day_boundary_hour}")
            settings.day_boundary_hour = day_boundary_hour
        if work_hours is not None:
            if work_hours < 0:
                raise ValueError(f"Work hours must not be negative, got {work_hours}")
            settings.daily_work = timedelta(hours=work_hours)
        return settings
