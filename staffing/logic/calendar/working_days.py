"""Working-calendar derivation: business days of a date range, grouped by month."""
from collections import Counter
from datetime import date, timedelta
from enum import IntEnum
from typing import Dict, Iterable, List, Optional

__all__ = ["Month", "working_days", "count_working_days", "working_days_per_month"]

# Monday=0 .. Friday=4 (date.weekday())
LAST_WORKING_WEEKDAY = 4


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name


def working_days(start_date: Optional[date], end_date: Optional[date]) -> List[date]:
    """Return every Monday..Friday date in [start_date, end_date], ascending.

    An inverted or incomplete range yields an empty list.
    """
    if start_date is None or end_date is None or start_date > end_date:
        return []
    days = []
    current = start_date
    one_day = timedelta(days=1)
    while current <= end_date:
        if current.weekday() <= LAST_WORKING_WEEKDAY:
            days.append(current)
        current += one_day
    return days


def count_working_days(start_date: Optional[date], end_date: Optional[date]) -> int:
    return len(working_days(start_date, end_date))


def working_days_per_month(days: Iterable[date]) -> Dict[Month, int]:
    """Count dates per month of year (the year itself is ignored)."""
    counter = Counter(Month(d.month) for d in days)
    return {month: counter[month] for month in sorted(counter)}
