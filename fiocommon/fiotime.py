"""Conversion of epoch seconds into calendar time."""

from __future__ import annotations

from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# 2000-03-01, the start of a 400-year cycle just after a leap day.
LEAPOCH = 946684800 + 86400 * (31 + 29)
DAYS_PER_400Y = 365 * 400 + 97
DAYS_PER_100Y = 365 * 100 + 24
DAYS_PER_4Y = 365 * 4 + 1

_DAYS_IN_MONTH = (31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, 29)


@dataclass(frozen=True)
class FioTime:
    """Broken-down time; ``month`` is 1-based, ``weekday`` 0 is Sunday, ``yearday`` 0-based."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int = 0
    yearday: int = 0


def convert_fio_time(t: int) -> FioTime:
    """Convert epoch seconds into a FioTime.

    Months counted from March roll the year over from December onwards, so
    December carries the following year number.
    """
    if t < _INT_MIN * 31622400 or t > _INT_MAX * 31622400:
        raise OverflowError("time value out of range")

    days, remsecs = divmod(t - LEAPOCH, 86400)
    wday = (3 + days) % 7

    qc_cycles, remdays = divmod(days, DAYS_PER_400Y)

    c_cycles = min(remdays // DAYS_PER_100Y, 3)
    remdays -= c_cycles * DAYS_PER_100Y

    q_cycles = min(remdays // DAYS_PER_4Y, 24)
    remdays -= q_cycles * DAYS_PER_4Y

    remyears = min(remdays // 365, 3)
    remdays -= remyears * 365

    leap = int(not remyears and (q_cycles or not c_cycles))
    yday = remdays + 31 + 28 + leap
    if yday >= 365 + leap:
        yday -= 365 + leap

    years = remyears + 4 * q_cycles + 100 * c_cycles + 400 * qc_cycles

    months = 0
    for length in _DAYS_IN_MONTH:
        if length > remdays:
            break
        remdays -= length
        months += 1

    if years + 100 > _INT_MAX or years + 100 < _INT_MIN:
        raise OverflowError("year out of range")

    year = years + 2000
    month = months + 3
    if month >= 12:
        month -= 12
        year += 1
        if month == 0:
            month = 12

    return FioTime(
        year=year,
        month=month,
        day=remdays + 1,
        hour=remsecs // 3600,
        minute=remsecs // 60 % 60,
        second=remsecs % 60,
        weekday=wday,
        yearday=yday,
    )


def _pad(value: int) -> str:
    return ("0" if value < 10 else "") + str(value)


def format_fio_time(tm: FioTime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS``."""
    return (
        f"{tm.year}-{_pad(tm.month)}-{_pad(tm.day)}"
        f"T{_pad(tm.hour)}:{_pad(tm.minute)}:{_pad(tm.second)}"
    )