"""
Calendar utilities.

Converts day-of-year ("Julian day") plus year into Gregorian day and
month, and builds absolute UTC timestamps.
"""

from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from seisnav.errors import FormatError


# First day-of-year of each month
MONTH_STARTS = np.array([1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335])
MONTH_STARTS_LEAP = np.array([1, 32, 61, 92, 122, 153, 183, 214, 245, 275, 306, 336])

UNIX_EPOCH = np.datetime64("1970-01-01", "D")
SECONDS_PER_DAY = 86400

LEAP_RULES = ("julian", "gregorian")


def is_leap_year(year: int, leap_rule: str = "julian") -> bool:
    """
    Leap-year test.

    The "julian" rule treats every year divisible by 4 as a leap year, which
    is what P1-90 tooling has historically done. The "gregorian" rule adds
    the century exception (1900 is not a leap year, 2000 is).
    """
    if leap_rule not in LEAP_RULES:
        raise ValueError(f"Unknown leap rule: {leap_rule}")
    if leap_rule == "julian":
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int, leap_rule: str = "julian") -> int:
    return 366 if is_leap_year(year, leap_rule) else 365


def gregorian(
    julian_day: Union[int, ArrayLike],
    year: int,
    leap_rule: str = "julian",
) -> tuple[Union[int, NDArray[np.int64]], Union[int, NDArray[np.int64]]]:
    """
    Convert day-of-year to Gregorian (day, month).

    Args:
        julian_day: Day of the year, 1-based (scalar or array)
        year: Calendar year the days belong to
        leap_rule: "julian" or "gregorian" (see is_leap_year)

    Returns:
        Tuple of (day, month), scalars for scalar input, arrays otherwise

    Raises:
        FormatError: If a day lies outside 1..365 (366 in leap years)
    """
    last = days_in_year(year, leap_rule)
    starts = MONTH_STARTS_LEAP if last == 366 else MONTH_STARTS

    jday = np.asarray(julian_day, dtype=np.int64)
    outside = (jday < 1) | (jday > last)
    if np.any(outside):
        bad = int(np.ravel(jday)[np.argmax(np.ravel(outside))])
        raise FormatError("julian_day", detail=f"day {bad} is not in 1-{last} for {year}")

    month = np.searchsorted(starts, jday, side="right")
    first = starts[month - 1]
    day = jday - first + 1

    if jday.ndim == 0:
        return int(day), int(month)
    return day.astype(np.int64), month.astype(np.int64)


def utc_seconds(
    year: int,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike,
    minute: ArrayLike,
    second: ArrayLike,
) -> NDArray[np.float64]:
    """
    Seconds since 1970-01-01T00:00:00 UTC (no leap seconds).

    Days past the end of a month roll over into the following month.

    Raises:
        FormatError: If a month is outside 1-12 or a day is below 1
    """
    month = np.asarray(month, dtype=np.int64)
    day = np.asarray(day, dtype=np.int64)
    if np.any((month < 1) | (month > 12)):
        raise FormatError("month", detail=f"months must be 1-12, got {np.unique(month).tolist()}")
    if np.any(day < 1):
        raise FormatError("day", detail="days must be at least 1")

    month_start = np.datetime64(f"{year:04d}-01", "M") + (month - 1)
    dates = month_start.astype("datetime64[D]") + (day - 1)
    days = (dates - UNIX_EPOCH).astype(np.int64)

    seconds = (
        np.asarray(hour, dtype=np.float64) * 3600
        + np.asarray(minute, dtype=np.float64) * 60
        + np.asarray(second, dtype=np.float64)
    )
    return days.astype(np.float64) * SECONDS_PER_DAY + seconds
