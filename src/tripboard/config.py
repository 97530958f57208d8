"""
Configuration & Global Constants
================================
This module serves as the central registry for application names, display
formats and environment driven settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic strings (formats, names) scattered
   throughout the views.
2. Deployment: Logging can be tuned without code changes through the
   TRIPBOARD_LOG_LEVEL and TRIPBOARD_LOG_FILE environment variables.

Exports:
    APP_NAME (str): Visible application name.
    LOG_FILE (str | None): Optional path of the log file.
    get_log_level() -> int: Resolved logging level.
"""
import logging
import os
from typing import Optional

ORG_ID = "tripboard"
APP_ID = "tripboard"
APP_NAME = "Trip Board"

# Display formats (strftime)
DAY_FORMAT = "%b %d"
TIME_FORMAT = "%H:%M"
EDITOR_DATETIME_FORMAT = "dd/MM/yy HH:mm"  # Qt format string

# Mock data
MOCK_SEED = 42
MOCK_POINT_COUNT = 8

LOG_FILE: Optional[str] = os.environ.get("TRIPBOARD_LOG_FILE") or None


def get_log_level() -> int:
    """
    Resolve TRIPBOARD_LOG_LEVEL (e.g. "DEBUG") to a logging level.
    Unknown names fall back to INFO.
    """
    name = os.environ.get("TRIPBOARD_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
