"""
Time helpers.

All timestamps in the domain are integer epoch milliseconds, the same unit the
stored snapshots use. Calendar-day boundaries follow the local timezone.
"""

import datetime
import time
from typing import Callable

DAY_MS = 86_400_000
HOUR_MS = 3_600_000

Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def days_from(now: int, days: int) -> int:
    """Timestamp that lies the given number of whole days after now"""
    return now + days * DAY_MS


def start_of_day(now: int) -> int:
    """Local midnight at the start of the calendar day containing now"""
    moment = datetime.datetime.fromtimestamp(now / 1000)
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def start_of_next_day(now: int) -> int:
    """
    Local midnight at the end of the calendar day containing now.

    Computed from the calendar date rather than start_of_day() + DAY_MS so
    days with a DST switch are 23 or 25 hours long.
    """
    today = datetime.datetime.fromtimestamp(now / 1000).date()
    tomorrow = datetime.datetime.combine(today + datetime.timedelta(days=1), datetime.time.min)
    return int(tomorrow.timestamp() * 1000)

