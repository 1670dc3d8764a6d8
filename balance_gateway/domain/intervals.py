"""Calendar interval units and backward bucket boundaries"""

from datetime import datetime
from enum import Enum
from typing import List

from dateutil.relativedelta import relativedelta

from balance_gateway.domain.exceptions import InvalidIntervalError
from balance_gateway.domain.models import BucketWindow

MIN_INTERVALS = 1
MAX_INTERVALS = 200


class IntervalUnit(str, Enum):
    """Granularity of one history bucket"""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def step(self) -> relativedelta:
        """One unit as a calendar-aware offset (months clamp to month end, years respect leap days)"""
        return _STEPS[self]


_STEPS = {
    IntervalUnit.HOUR: relativedelta(hours=1),
    IntervalUnit.DAY: relativedelta(days=1),
    IntervalUnit.WEEK: relativedelta(weeks=1),
    IntervalUnit.MONTH: relativedelta(months=1),
    IntervalUnit.YEAR: relativedelta(years=1),
}


def parse_interval(token: str) -> IntervalUnit:
    """Map a request token like "week" to an IntervalUnit"""
    try:
        return IntervalUnit(token)
    except ValueError:
        raise InvalidIntervalError(
            f"Unsupported interval {token!r}, expected one of "
            f"{', '.join(unit.value for unit in IntervalUnit)}"
        ) from None


def validate_count(count: int) -> int:
    if not MIN_INTERVALS <= count <= MAX_INTERVALS:
        raise InvalidIntervalError(
            f"Interval count must be between {MIN_INTERVALS} and {MAX_INTERVALS}, got {count}"
        )
    return count


def bucket_boundaries(anchor: datetime, unit: IntervalUnit, count: int) -> List[datetime]:
    """
    Step backward from `anchor` one unit at a time, returning `count + 1` instants.

    Each boundary is derived from the previous one, so stepping a month back from
    Mar 31 gives Feb 28 (or 29) and the next step gives Jan 28.
    """
    boundaries = [anchor]
    for _ in range(count):
        boundaries.append(boundaries[-1] - unit.step)
    return boundaries


def bucket_windows(anchor: datetime, unit: IntervalUnit, count: int) -> List[BucketWindow]:
    """
    Windows for `count` buckets, most recent first.

    Bucket k covers (b[k+1], b[k]] where b[0] is the anchor.
    """
    validate_count(count)
    boundaries = bucket_boundaries(anchor, unit, count)
    return [
        BucketWindow(start=boundaries[k + 1], end=boundaries[k])
        for k in range(count)
    ]
