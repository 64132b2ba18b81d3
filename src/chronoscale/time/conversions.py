"""Helper functions that convert nanosecond time points between UTC, TAI, and TT.

UTC and TAI differ by the leap second table, TAI and TT differ by a fixed 32.184 s. Conversions
between UTC and TT pivot through TAI.
"""

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import TYPE_CHECKING

# Local Imports
from . import constants as const
from .epoch import checkNanoseconds, nanosecondsToMJD
from .leap_seconds import getLeapTable, roundHalfAway

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Local Imports
    from .leap_seconds import LeapTable


class TimeScale(Enum):
    """Closed set of supported time scales."""

    UTC = "UTC"
    TAI = "TAI"
    TT = "TT"

    @property
    def suffix(self) -> str:
        """``str``: zone designator appended to ISO-8601 text in this scale."""
        return "Z" if self is TimeScale.UTC else ""

    @classmethod
    def fromString(cls, name: str) -> TimeScale:
        """Return the :class:`.TimeScale` named `name`, ignoring case."""
        try:
            return cls[name.upper()]
        except KeyError:
            err = f"Unknown time scale: {name!r}"
            raise ValueError(err)  # noqa: B904


def utcToTAI(nanoseconds: int, leap_table: LeapTable | None = None) -> int:
    """Convert UTC nanoseconds to TAI nanoseconds.

    Args:
        nanoseconds (``int``): UTC nanoseconds since the epoch
        leap_table (:class:`.LeapTable`, optional): table to use, defaults to the shared table

    Raises:
        OutOfRangeError: if `nanoseconds` precedes the first leap second entry.

    Returns:
        ``int``: TAI nanoseconds since the epoch
    """
    if leap_table is None:
        leap_table = getLeapTable()
    entry = leap_table.entryForUTC(nanoseconds)
    leap_secs = entry.leapSeconds(nanosecondsToMJD(nanoseconds))
    return checkNanoseconds(nanoseconds + roundHalfAway(leap_secs * 1.0e9))


def taiToUTC(nanoseconds: int, leap_table: LeapTable | None = None) -> int:
    """Convert TAI nanoseconds to UTC nanoseconds.

    The drift formula of each entry is defined against the UTC MJD, but only the TAI MJD is known
    here. Dividing by ``1 + drift / 86400`` corrects for that, and is a no-op from 1972 onwards.

    Args:
        nanoseconds (``int``): TAI nanoseconds since the epoch
        leap_table (:class:`.LeapTable`, optional): table to use, defaults to the shared table

    Raises:
        OutOfRangeError: if `nanoseconds` precedes the first leap second entry.

    Returns:
        ``int``: UTC nanoseconds since the epoch
    """
    if leap_table is None:
        leap_table = getLeapTable()
    entry = leap_table.entryForTAI(nanoseconds)
    leap_secs = entry.leapSeconds(nanosecondsToMJD(nanoseconds))
    leap_secs /= 1.0 + entry.drift_per_day / const.SECONDS_PER_DAY
    return checkNanoseconds(nanoseconds - roundHalfAway(leap_secs * 1.0e9))


def taiToTT(nanoseconds: int) -> int:
    """Convert TAI nanoseconds to TT nanoseconds."""
    return checkNanoseconds(nanoseconds + const.TT_MINUS_TAI_NS)


def ttToTAI(nanoseconds: int) -> int:
    """Convert TT nanoseconds to TAI nanoseconds."""
    return checkNanoseconds(nanoseconds - const.TT_MINUS_TAI_NS)


def utcToTT(nanoseconds: int) -> int:
    """Convert UTC nanoseconds to TT nanoseconds, via TAI."""
    return taiToTT(utcToTAI(nanoseconds))


def ttToUTC(nanoseconds: int) -> int:
    """Convert TT nanoseconds to UTC nanoseconds, via TAI."""
    return taiToUTC(ttToTAI(nanoseconds))


_CONVERSIONS: dict[tuple[TimeScale, TimeScale], Callable[[int], int]] = {
    (TimeScale.UTC, TimeScale.TAI): utcToTAI,
    (TimeScale.TAI, TimeScale.UTC): taiToUTC,
    (TimeScale.TAI, TimeScale.TT): taiToTT,
    (TimeScale.TT, TimeScale.TAI): ttToTAI,
    (TimeScale.UTC, TimeScale.TT): utcToTT,
    (TimeScale.TT, TimeScale.UTC): ttToUTC,
}
"""dict: directed conversion function for every ordered pair of distinct time scales."""


def convertNanoseconds(nanoseconds: int, from_scale: TimeScale, to_scale: TimeScale) -> int:
    """Convert `nanoseconds` labeled `from_scale` into the same instant in `to_scale`.

    Raises:
        OutOfRangeError: for UTC/TAI conversions before the first leap second entry, or results
            that overflow 64-bit nanoseconds.
    """
    if from_scale is to_scale:
        return nanoseconds
    return _CONVERSIONS[(from_scale, to_scale)](nanoseconds)
