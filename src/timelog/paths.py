"""Locating the timelog file."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "Timelog"
TIMELOG_ENV_VAR = "TIMELOG_FILE"
TIMELOG_FILENAME = "timelog.txt"


def get_data_dir() -> Path:
    """Return the per-user directory holding the timelog, creating it if needed."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_timelog_path() -> Path:
    """Return ``$TIMELOG_FILE`` when set, else the file in the data directory."""
    override = os.environ.get(TIMELOG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_data_dir() / TIMELOG_FILENAME
