"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta


def step_dates(start: date, end: date, step: relativedelta) -> Iterator[date]:
    """Yield start, start + step, ... while the date is <= end (inclusive).

    Each date is stepped from the previous one, so a monthly walk that was
    clamped once (Jan 31 -> Feb 28) continues from the clamped day. The
    walk ends quietly if the next step would leave the supported date range.
    """
    current = start
    while current <= end:
        yield current
        try:
            current = current + step
        except (OverflowError, ValueError):
            # Stepped past date.max, which is after any end date
            return


def subtract_days(from_date: date, days: int) -> date:
    """Move a date back by calendar days (no business-day or holiday logic)"""
    return from_date - timedelta(days=days)
