"""Unit tests for timestamp parsing and calendar helpers"""

import pytest
from datetime import datetime, timezone, timedelta
from balance_gateway.utils.date_utils import (
    parse_timestamp,
    format_timestamp,
    calendar_month_index,
    months_between,
    to_epoch_seconds,
)
from balance_gateway.domain.exceptions import DataIntegrityError


def test_parse_stored_format():
    """Test the stored millisecond UTC format"""
    parsed = parse_timestamp("2018-04-13T08:06:10.000Z")

    assert parsed == datetime(2018, 4, 13, 8, 6, 10, tzinfo=timezone.utc)
    assert parsed.tzinfo is not None


def test_parse_naive_is_utc():
    """Test values without an offset are taken as UTC"""
    assert parse_timestamp("2018-04-13T08:06:10") == datetime(2018, 4, 13, 8, 6, 10, tzinfo=timezone.utc)


def test_parse_offset_normalized_to_utc():
    """Test explicit offsets are converted to UTC"""
    parsed = parse_timestamp("2018-04-13T10:06:10+02:00")

    assert parsed == datetime(2018, 4, 13, 8, 6, 10, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


@pytest.mark.parametrize("value", ["", "yesterday", "2018-13-45T00:00:00.000Z", None, 20180413])
def test_parse_garbage_raises(value):
    """Test unparseable stored timestamps are data integrity faults"""
    with pytest.raises(DataIntegrityError):
        parse_timestamp(value)


def test_format_timestamp():
    """Test formatting back to the stored representation"""
    moment = datetime(2018, 4, 13, 8, 6, 10, 123456, tzinfo=timezone.utc)

    assert format_timestamp(moment) == "2018-04-13T08:06:10.123Z"
    assert parse_timestamp(format_timestamp(moment)) == moment.replace(microsecond=123000)


def test_calendar_month_index():
    """Test month index is year * 12 + month"""
    assert calendar_month_index(datetime(2018, 1, 1)) == 2018 * 12 + 1
    assert calendar_month_index(datetime(2018, 12, 31)) == 2018 * 12 + 12


def test_months_between_counts_boundaries_not_days():
    """Test coarse month distance: boundary crossings, not elapsed time"""
    assert months_between(datetime(2018, 1, 31), datetime(2018, 2, 1)) == 1
    assert months_between(datetime(2018, 2, 1), datetime(2018, 2, 28)) == 0
    assert months_between(datetime(2018, 11, 15), datetime(2019, 2, 15)) == 3
    # Order does not matter
    assert months_between(datetime(2019, 2, 15), datetime(2018, 11, 15)) == 3


def test_to_epoch_seconds():
    """Test epoch conversion"""
    assert to_epoch_seconds(datetime(1970, 1, 2, tzinfo=timezone.utc)) == 86400
    assert to_epoch_seconds(datetime(1970, 1, 2)) == 86400
