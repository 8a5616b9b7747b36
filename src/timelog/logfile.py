"""Opening the timelog file and binding it to an activity store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from .config import TimelogSettings
from .store import ActivityStore, load

logger = logging.getLogger(__name__)


def open_log_file(path: Path) -> TextIO:
    """Open (creating if missing) the timelog for reading and appending."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    stream = open(path, "a+", encoding="utf-8", newline="")
    stream.seek(0)
    return stream


@contextmanager
def open_timelog(
    path: Path,
    *,
    settings: Optional[TimelogSettings] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Iterator[ActivityStore]:
    stream = open_log_file(path)
    try:
        store = load(stream, settings=settings, clock=clock)
        logger.debug("Opened timelog %s with %d activities.", path, len(store.activities))
        yield store
    finally:
        stream.close()
