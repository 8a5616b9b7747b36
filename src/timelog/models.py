"""Domain models for the timelog and its reports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union


@dataclass(slots=True, frozen=True)
class LogEntry:
    """A well-formed timelog line: when something ended and what it was."""

    timestamp: datetime
    description: str


@dataclass(slots=True, frozen=True)
class Blank:
    """A blank line separating two days or sessions."""

    line: str = "\n"


@dataclass(slots=True, frozen=True)
class Malformed:
    """A line that is not a timelog entry. Kept verbatim."""

    line: str


ParsedLine = Union[LogEntry, Blank, Malformed]


@dataclass(slots=True, frozen=True)
class Activity:
    """Work performed between two consecutive log entries."""

    start_time: datetime
    end_time: datetime
    description: str

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()


@dataclass(slots=True)
class ReportLine:
    description: str
    seconds: int
