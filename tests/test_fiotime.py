from datetime import datetime, timedelta, timezone

import pytest

from fiocommon.fiotime import FioTime, convert_fio_time, format_fio_time

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

SAMPLES = [
    0,
    -86400,
    951782400,
    951868800,
    1234567890,
    1609459199,
    1606780800,
    2000000000,
    4102444800,
    -2208988800,
]


def _utc(t):
    return EPOCH + timedelta(seconds=t)


def test_epoch_formats():
    assert format_fio_time(convert_fio_time(0)) == "1970-01-01T00:00:00"


@pytest.mark.parametrize("t", SAMPLES)
def test_matches_calendar(t):
    dt = _utc(t)
    tm = convert_fio_time(t)
    assert (tm.month, tm.day, tm.hour, tm.minute, tm.second) == (
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
    )
    expected_year = dt.year + (1 if dt.month == 12 else 0)
    assert tm.year == expected_year


@pytest.mark.parametrize("t", SAMPLES)
def test_weekday_and_yearday(t):
    dt = _utc(t)
    tm = convert_fio_time(t)
    assert tm.weekday == (dt.weekday() + 1) % 7
    assert tm.yearday == dt.timetuple().tm_yday - 1


def test_december_carries_next_year():
    tm = convert_fio_time(1609459199)
    assert tm.month == 12
    assert tm.year == _utc(1609459199).year + 1


def test_leap_day():
    tm = convert_fio_time(951782400)
    assert (tm.month, tm.day) == (2, 29)
    assert tm.year == 2000


def test_format_pads_fields():
    tm = FioTime(year=2021, month=3, day=5, hour=7, minute=8, second=9)
    assert format_fio_time(tm) == "2021-03-05T07:08:09"


def test_format_two_digit_fields_unpadded():
    tm = FioTime(year=2021, month=11, day=25, hour=17, minute=48, second=59)
    assert format_fio_time(tm) == "2021-11-25T17:48:59"


def test_out_of_range_rejected():
    with pytest.raises(OverflowError):
        convert_fio_time((2**31 - 1) * 31622400 + 1)
    with pytest.raises(OverflowError):
        convert_fio_time(-(2**31) * 31622400 - 1)