"""
Time utility functions for the current wall-clock hour.
Supports an optional display timezone, otherwise the system local time.
"""

from datetime import datetime
from typing import Optional

import pytz


def local_now(timezone_name: Optional[str] = None) -> datetime:
    """
    Current time in the display timezone.

    Args:
        timezone_name: pytz timezone name (e.g. "Europe/Helsinki"). None uses
            the system local time.

    Raises:
        pytz.UnknownTimeZoneError: If the timezone name is not known.
    """
    if timezone_name is None:
        return datetime.now()
    return datetime.now(pytz.timezone(timezone_name))


def current_hour(timezone_name: Optional[str] = None, reference_time: Optional[datetime] = None) -> int:
    """
    Wall-clock hour (0-23) in the display timezone.

    A timezone-aware reference_time is converted to the display timezone; a
    naive one is taken as already local.
    """
    if reference_time is None:
        return local_now(timezone_name).hour

    if timezone_name is not None and reference_time.tzinfo is not None:
        reference_time = reference_time.astimezone(pytz.timezone(timezone_name))
    return reference_time.hour
