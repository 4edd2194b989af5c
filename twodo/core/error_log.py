"""Append fatal errors to the error log file with a local timestamp."""

import os
from datetime import datetime

import pytz

from twodo.config import get_settings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_timestamp(timezone: str | None = None) -> str:
    tz = pytz.timezone(timezone or get_settings().TIMEZONE)
    return datetime.now(tz).strftime(TIMESTAMP_FORMAT)


def log_to_file(message: str, filepath: str, timezone: str | None = None) -> None:
    """Append `[timestamp] message` to filepath, creating its directory if needed."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, "a", encoding="utf-8") as fh:
        fh.write(f"[{current_timestamp(timezone)}] {message}\n")
