"""Date manipulation utilities"""

from datetime import datetime, timezone

from dateutil.parser import isoparse

from balance_gateway.domain.exceptions import DataIntegrityError


def parse_timestamp(value: str) -> datetime:
    """
    Parse a stored timestamp such as "2018-04-13T08:06:10.000Z".

    Naive values are taken to be UTC. The result is always timezone-aware.

    Raises:
        DataIntegrityError: If the value is missing or not an ISO-8601 instant
    """
    if not isinstance(value, str) or not value:
        raise DataIntegrityError(f"Missing or non-text timestamp: {value!r}")

    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        raise DataIntegrityError(f"Unparseable timestamp {value!r}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format an instant in the stored representation (UTC, millisecond precision)"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def calendar_month_index(moment: datetime) -> int:
    """Months since year zero, used for coarse month-boundary counting"""
    return moment.year * 12 + moment.month


def months_between(first: datetime, second: datetime) -> int:
    """
    Number of calendar-month boundaries between two instants.

    Jan 31 -> Feb 1 counts as one month while Feb 1 -> Feb 28 counts as zero.
    """
    return abs(calendar_month_index(second) - calendar_month_index(first))


def to_epoch_seconds(moment: datetime) -> int:
    """Whole seconds since the Unix epoch"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())
