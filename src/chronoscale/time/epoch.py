"""Conversions between nanosecond time points, fractional day counts, and calendar fields.

Every function in this module is scale-agnostic: a nanosecond count is measured from
1970-01-01T00:00:00 in whichever time scale the caller has labeled it with.
"""

from __future__ import annotations

# Standard Library Imports
import calendar
from datetime import datetime, timedelta
from typing import NamedTuple

# Third Party Imports
from numpy import isfinite

# Local Imports
from ..common.exceptions import OutOfRangeError
from . import constants as const

_UNIX_EPOCH = datetime(1970, 1, 1)


class CalendarFields(NamedTuple):
    """Broken-down calendar representation of a nanosecond time point."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    weekday: int
    """int: day of the week, Monday is 0."""
    yearday: int
    """int: day of the year, January 1st is 1."""


def checkNanoseconds(nanoseconds: int) -> int:
    """Validate that `nanoseconds` fits in a signed 64-bit integer.

    Raises:
        OutOfRangeError: if the value overflows the representable span.
    """
    if not const.INT64_MIN <= nanoseconds <= const.INT64_MAX:
        raise OutOfRangeError(f"Nanosecond count out of valid range: {nanoseconds}")
    return nanoseconds


def nanosecondsToMJD(nanoseconds: int) -> float:
    """Convert a nanosecond count into a Modified Julian Date."""
    return float(nanoseconds) / const.NSEC_PER_DAY + const.EPOCH_IN_MJD


def nanosecondsToJD(nanoseconds: int) -> float:
    """Convert a nanosecond count into a Julian Date."""
    return nanosecondsToMJD(nanoseconds) + const.MJD_TO_JD


def mjdToNanoseconds(mjd: float) -> int:
    """Convert a Modified Julian Date into a nanosecond count.

    The fractional day is truncated toward zero at nanosecond resolution.

    Args:
        mjd (``float``): Modified Julian Date

    Raises:
        OutOfRangeError: if `mjd` is more than :data:`.MAX_DAYS` from the epoch, or isn't finite.

    Returns:
        ``int``: nanoseconds since the epoch
    """
    if not isfinite(mjd):
        raise OutOfRangeError(f"MJD out of valid range: {mjd}")
    if mjd > const.EPOCH_IN_MJD + const.MAX_DAYS or mjd < const.EPOCH_IN_MJD - const.MAX_DAYS:
        raise OutOfRangeError(f"MJD out of valid range: {mjd}")
    return int((mjd - const.EPOCH_IN_MJD) * const.NSEC_PER_DAY)


def jdToNanoseconds(julian_date: float) -> int:
    """Convert a Julian Date into a nanosecond count.

    See Also:
        :func:`.mjdToNanoseconds`
    """
    return mjdToNanoseconds(julian_date - const.MJD_TO_JD)


def calendarToNanoseconds(year, month, day, hour, minute, second) -> int:
    """Convert calendar fields into whole nanoseconds since the epoch.

    The fields are interpreted on the proleptic Gregorian calendar with no time zone and no
    daylight saving. Day, hour, minute and second values past their usual limits roll over into
    the next unit, e.g. a second of ``60`` lands on the following minute.

    Note:
        The seconds count from :func:`calendar.timegm` has no error sentinel, so
        1969-12-31T23:59:59, whose count is exactly -1, converts like any other date.

    Args:
        year (``int``): calendar year, must be within [1902, 2261]
        month (``int``): month of the year (1-12)
        day (``int``): day of the month
        hour (``int``): hours in the day
        minute (``int``): minutes in the hour
        second (``int``): whole seconds in the minute

    Raises:
        OutOfRangeError: if `year` is outside the supported range or the date is unconvertible.

    Returns:
        ``int``: nanoseconds since the epoch, a whole number of seconds
    """
    if year < const.MIN_YEAR or year > const.MAX_YEAR:
        raise OutOfRangeError(f"Year out of valid range: {year}")

    try:
        secs = calendar.timegm((year, month, day, hour, minute, second))
    except ValueError as err:
        raise OutOfRangeError(
            f"Unconvertible date: {year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}",
        ) from err

    return secs * const.NSEC_PER_SEC


def floorSeconds(nanoseconds: int) -> tuple[int, int]:
    """Split `nanoseconds` into whole seconds and a non-negative nanosecond remainder.

    Whole seconds round toward negative infinity, so -1 ns is -1 s plus 999999999 ns.
    """
    return divmod(nanoseconds, const.NSEC_PER_SEC)


def nanosecondsToCalendar(nanoseconds: int) -> CalendarFields:
    """Decompose a nanosecond count into calendar fields.

    Args:
        nanoseconds (``int``): nanoseconds since the epoch

    Returns:
        :class:`.CalendarFields`: the broken-down date and time
    """
    secs, frac = floorSeconds(nanoseconds)
    date_time = _UNIX_EPOCH + timedelta(seconds=secs)
    return CalendarFields(
        year=date_time.year,
        month=date_time.month,
        day=date_time.day,
        hour=date_time.hour,
        minute=date_time.minute,
        second=date_time.second,
        nanosecond=frac,
        weekday=date_time.weekday(),
        yearday=date_time.timetuple().tm_yday,
    )


def _truncatingDivmod(value: int, divisor: int) -> tuple[int, int]:
    """Integer quotient and remainder with the quotient truncated toward zero."""
    quotient, remainder = divmod(value, divisor)
    if remainder and value < 0:
        quotient += 1
        remainder -= divisor
    return quotient, remainder


def nanosecondsToTimespec(nanoseconds: int) -> tuple[int, int]:
    """Return a ``(seconds, nanoseconds)`` pair, both truncated toward zero."""
    return _truncatingDivmod(nanoseconds, const.NSEC_PER_SEC)


def nanosecondsToTimeval(nanoseconds: int) -> tuple[int, int]:
    """Return a ``(seconds, microseconds)`` pair, both truncated toward zero.

    Sub-microsecond precision is dropped.
    """
    microseconds, _ = _truncatingDivmod(nanoseconds, const.NSEC_PER_USEC)
    return _truncatingDivmod(microseconds, const.NSEC_PER_SEC // const.NSEC_PER_USEC)
