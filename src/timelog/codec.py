"""Reading and writing single timelog lines."""

from __future__ import annotations

import re
from datetime import datetime

from .models import Blank, LogEntry, Malformed, ParsedLine

TIMESTAMP_FMT = "%Y-%m-%d %H:%M"
SEPARATOR = "\n"

_ENTRY_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}): (.*)", re.ASCII)


def parse_line(line: str) -> ParsedLine:
    """Classify a raw line as an entry, a blank separator or junk."""
    text = line[:-1] if line.endswith("\n") else line
    if not text.strip():
        return Blank(line)

    match = _ENTRY_PATTERN.fullmatch(text)
    if match is None:
        return Malformed(line)

    year, month, day, hour, minute = (int(value) for value in match.groups()[:5])
    try:
        timestamp = datetime(year, month, day, hour, minute)
    except ValueError:
        return Malformed(line)
    return LogEntry(timestamp=timestamp, description=match.group(6))


def format_timestamp(timestamp: datetime) -> str:
    # strftime does not pad years below 1000 on every platform.
    return (
        f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d} "
        f"{timestamp.hour:02d}:{timestamp.minute:02d}"
    )


def render_line(timestamp: datetime, description: str) -> str:
    return f"{format_timestamp(timestamp)}: {description}\n"
