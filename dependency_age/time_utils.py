"""
Shared datetime helpers.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable, Optional


logger = logging.getLogger(__name__)

EPOCH_ORIGIN = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def ensure_local(dt: datetime) -> datetime:
    """Return a timezone-aware datetime in the local time zone."""
    return dt.astimezone()


def system_clock() -> datetime:
    """Current wall-clock time in the local time zone."""
    return datetime.now().astimezone()


def epoch_millis_to_local(millis: int) -> datetime:
    """Convert milliseconds since the epoch to a local datetime."""
    return (EPOCH_ORIGIN + timedelta(milliseconds=millis)).astimezone()


def local_to_epoch_millis(dt: datetime) -> int:
    """Milliseconds elapsed between the epoch origin and ``dt``."""
    return round((ensure_local(dt) - EPOCH_ORIGIN) / _ONE_MILLISECOND)


def age_in_days(
    published_at: datetime,
    clock: Callable[[], datetime] = system_clock,
) -> int:
    """Whole days elapsed between ``published_at`` and ``clock()``."""
    elapsed = ensure_local(clock()) - ensure_local(published_at)
    # timedelta.days floors, truncate toward zero instead
    return int(elapsed / timedelta(days=1))


def average_dates(dates: Iterable[date]) -> Optional[date]:
    """Average dates by epoch day and return the midpoint date.

    Datetimes are reduced to their calendar date first. Returns None with a
    warning when no dates are given.
    """
    epoch_day = EPOCH_ORIGIN.date()
    offsets = []
    for value in dates:
        if isinstance(value, datetime):
            value = value.date()
        offsets.append((value - epoch_day).days)

    if not offsets:
        logger.warning("No dates to average")
        return None

    mean_offset = int(sum(offsets) / len(offsets))
    return epoch_day + timedelta(days=mean_offset)
