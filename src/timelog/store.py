"""Activity store: rebuilds activities from the timelog and appends new ones."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, TextIO

from .codec import SEPARATOR, parse_line, render_line
from .config import TimelogSettings
from .models import Activity, Blank, LogEntry, ParsedLine

logger = logging.getLogger(__name__)

MAX_ACTIVITY_SPAN = timedelta(days=1)


def crosses_day_boundary(start: datetime, end: datetime, boundary_hour: int) -> bool:
    """Return True when ``start`` and ``end`` cannot belong to one activity."""
    if end < start:
        return True
    if end - start > MAX_ACTIVITY_SPAN:
        return True
    if start.date() != end.date():
        return True
    return start.hour < boundary_hour <= end.hour


class ActivityStore:
    """Owns the activities reconstructed from a timelog stream.

    Lines are read once at construction. Every line written afterwards goes
    to ``sink``, which is only ever appended to.
    """

    def __init__(
        self,
        lines: Iterable[str],
        sink: TextIO,
        settings: Optional[TimelogSettings] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.settings = settings or TimelogSettings()
        self.clock = clock
        self._sink = sink
        self._activities: list[Activity] = []
        self._history: list[ParsedLine] = []
        self._unterminated = False
        self.next_start_time: Optional[datetime] = None
        self._load(lines)

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(self._activities)

    @property
    def history(self) -> tuple[ParsedLine, ...]:
        return tuple(self._history)

    def record(self, description: str, end_time: Optional[datetime] = None) -> Optional[Activity]:
        """Append an activity that ended at ``end_time`` (default: now).

        Returns the new activity, or None when the entry only marks the start
        of a new day.
        """
        if not description or not description.strip():
            raise ValueError("An activity description is required.")
        if "\n" in description or "\r" in description:
            raise ValueError("An activity description must fit on a single line.")

        # The log only holds minutes; keep memory in step with the file.
        end_time = (end_time or self.clock()).replace(second=0, microsecond=0)
        candidate = self._take_start_time()
        start_time = candidate
        if start_time is not None and crosses_day_boundary(
            start_time, end_time, self.settings.day_boundary_hour
        ):
            start_time = None

        activity: Optional[Activity] = None
        if start_time is None:
            if candidate is not None and not self._at_separator():
                self._write(Blank(SEPARATOR), SEPARATOR)
            self.next_start_time = end_time
            logger.debug("Starting a new day at %s", end_time)
        else:
            activity = Activity(start_time=start_time, end_time=end_time, description=description)
            self._activities.append(activity)
            logger.debug(
                "Recorded activity %r from %s to %s", description, start_time, end_time
            )

        entry = LogEntry(timestamp=end_time, description=description)
        self._write(entry, render_line(end_time, description))
        return activity

    def render_history(self, output: TextIO) -> None:
        """Write every loaded and recorded line to ``output``."""
        for item in self._history:
            if isinstance(item, LogEntry):
                output.write(render_line(item.timestamp, item.description))
            else:
                output.write(item.line)

    def _load(self, lines: Iterable[str]) -> None:
        pending_start: Optional[datetime] = None
        for line in lines:
            item = parse_line(line)
            self._history.append(item)
            if not isinstance(item, LogEntry):
                pending_start = None
                continue
            if pending_start is not None:
                self._activities.append(
                    Activity(
                        start_time=pending_start,
                        end_time=item.timestamp,
                        description=item.description,
                    )
                )
            pending_start = item.timestamp
        self._unterminated = bool(self._history) and not line.endswith("\n")
        self.next_start_time = pending_start
        logger.debug(
            "Loaded %d activities from %d lines.", len(self._activities), len(self._history)
        )

    def _take_start_time(self) -> Optional[datetime]:
        """Consume the pending start, falling back to the last activity's end.

        Nothing chains across a blank or malformed line at the end of the log.
        """
        start, self.next_start_time = self.next_start_time, None
        if start is None and self._activities and not self._at_separator():
            start = self._activities[-1].end_time
        return start

    def _at_separator(self) -> bool:
        return bool(self._history) and not isinstance(self._history[-1], LogEntry)

    def _write(self, item: ParsedLine, text: str) -> None:
        if self._unterminated:
            # Never glue a new line onto the last line of a hand-edited file.
            self._sink.write("\n")
            last = self._history[-1]
            if not isinstance(last, LogEntry):
                self._history[-1] = type(last)(last.line + "\n")
            self._unterminated = False
        self._sink.write(text)
        self._history.append(item)


def load(
    source: Iterable[str],
    sink: Optional[TextIO] = None,
    settings: Optional[TimelogSettings] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> ActivityStore:
    """Build a store from ``source``, appending to ``sink`` or to ``source`` itself."""
    if sink is None:
        sink = source  # type: ignore[assignment]
    return ActivityStore(source, sink, settings=settings, clock=clock)
