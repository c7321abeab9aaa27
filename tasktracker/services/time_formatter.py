"""
Relative time labels ("Tomorrow", "3 days ago", "in 2 hours").

Pure functions: the caller passes "now" so labels are reproducible and never
cached across queries.
"""

from tasktracker.domain.clock import DAY_MS, HOUR_MS
from tasktracker.i18n import tr


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder that keeps the sign of value (C-style, not Python's floor modulo)"""
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def _plural(singular: str, plural: str, n: int) -> str:
    return tr(plural if n > 1 else singular, n=n)


def format_relative_time(timestamp: int, now: int) -> str:
    """
    Describe timestamp relative to now.

    Whole days are floored, so anything less than a full day in the past
    already counts as "Yesterday". Timestamps more than 365 days away are
    expressed in whole years. Never raises.

    Args:
        timestamp: Target time in epoch milliseconds
        now: Reference time in epoch milliseconds

    Returns:
        Localized label
    """
    diff = timestamp - now
    days = diff // DAY_MS
    hours = _truncated_remainder(diff, DAY_MS) // HOUR_MS

    if abs(days) > 365:
        years = abs(days) // 365
        if days > 0:
            return _plural("time.in_year", "time.in_years", years)
        return _plural("time.year_ago", "time.years_ago", years)

    if abs(days) >= 1:
        if days == 1:
            return tr("time.tomorrow")
        if days == -1:
            return tr("time.yesterday")
        if days > 0:
            return tr("time.in_days", n=days)
        return tr("time.days_ago", n=abs(days))

    if hours > 0:
        return _plural("time.in_hour", "time.in_hours", hours)
    if hours < 0:
        return _plural("time.hour_ago", "time.hours_ago", abs(hours))

    return tr("time.today")


def format_overdue_label() -> str:
    """Label for the overdue banner; format_relative_time() never returns it"""
    return tr("time.overdue")
