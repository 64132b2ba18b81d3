"""Defines :class:`.TimePoint` and its per-scale classes :class:`.UTCTime`, :class:`.TAITime`, & :class:`.TTTime`.

A time point is a signed 64-bit count of nanoseconds since 1970-01-01T00:00:00 in its own time
scale. The scale is part of the value, so time points in different scales never mix silently.
Adding a duration or subtracting two points keeps the scale, and mixing scales raises a
``TypeError``. Moving an instant to another scale has to go through :meth:`.TimePoint.convert`.

.. code-block:: python

    utc = UTCTime.fromString("2009-04-02T07:26:39.314159265Z")
    tai = utc.convert(TimeScale.TAI)

    tai - utc  # throws exception
    tai - utc.convert("TAI")  # works, equals 0

"""

from __future__ import annotations

# Standard Library Imports
import operator
import time
from datetime import datetime, timedelta
from functools import total_ordering
from numbers import Integral
from typing import TYPE_CHECKING, ClassVar

# Local Imports
from . import constants as const
from .conversions import TimeScale, convertNanoseconds
from .epoch import (
    calendarToNanoseconds,
    checkNanoseconds,
    jdToNanoseconds,
    mjdToNanoseconds,
    nanosecondsToCalendar,
    nanosecondsToJD,
    nanosecondsToMJD,
    nanosecondsToTimespec,
    nanosecondsToTimeval,
)
from .iso8601 import formatCalendar, parseISO8601

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .epoch import CalendarFields


def timedeltaToNanoseconds(delta: timedelta) -> int:
    """Return the exact number of nanoseconds in `delta`."""
    return ((delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds) * const.NSEC_PER_USEC


@total_ordering
class TimePoint:
    """Immutable nanosecond time point labeled with a :class:`.TimeScale`.

    Calling ``TimePoint(nanoseconds, scale)`` directly returns the matching per-scale class.
    """

    __slots__ = ("_nanoseconds", "_scale")

    SCALE: ClassVar[TimeScale | None] = None
    """:class:`.TimeScale`: scale fixed by a per-scale class, ``None`` on the base class."""

    def __new__(cls, nanoseconds, scale=None):
        """Pick the per-scale class when constructing through :class:`.TimePoint`."""
        scale = cls._resolveScale(scale)
        target = _SCALE_CLASSES[scale] if cls is TimePoint else cls
        return super().__new__(target)

    def __init__(self, nanoseconds, scale=None):
        """Create a time point.

        Args:
            nanoseconds (``int``): nanoseconds since 1970-01-01T00:00:00 in `scale`
            scale (:class:`.TimeScale`, optional): time scale, only required on :class:`.TimePoint`

        Raises:
            TypeError: if `nanoseconds` isn't an integer.
            OutOfRangeError: if `nanoseconds` overflows 64 bits.
        """
        try:
            nanoseconds = operator.index(nanoseconds)
        except TypeError:
            err = f"TimePoint: nanoseconds must be an integer, not {type(nanoseconds).__name__}"
            raise TypeError(err)  # noqa: B904
        self._nanoseconds: int = checkNanoseconds(nanoseconds)
        self._scale: TimeScale = self._resolveScale(scale)

    @classmethod
    def _resolveScale(cls, scale) -> TimeScale:
        if isinstance(scale, str):
            scale = TimeScale.fromString(scale)
        if cls.SCALE is None:
            if scale is None:
                raise TypeError("TimePoint: a time scale is required")
            return scale
        if scale is not None and scale is not cls.SCALE:
            err = f"{cls.__name__}: cannot be created in the {scale.value} time scale"
            raise ValueError(err)
        return cls.SCALE

    @property
    def nanoseconds(self) -> int:
        """``int``: nanoseconds since 1970-01-01T00:00:00 in this time point's scale."""
        return self._nanoseconds

    @property
    def scale(self) -> TimeScale:
        """:class:`.TimeScale`: scale this time point is expressed in."""
        return self._scale

    # Constructors

    @classmethod
    def now(cls, scale=None) -> TimePoint:
        """Return the current time, read from the system UTC clock."""
        scale = cls._resolveScale(scale)
        return TimePoint(convertNanoseconds(time.time_ns(), TimeScale.UTC, scale), scale)

    @classmethod
    def fromCalendar(cls, year, month, day, hour, minute, second, scale=None) -> TimePoint:
        """Create a time point from whole calendar fields.

        Raises:
            OutOfRangeError: if `year` is outside [1902, 2261] or the date is unconvertible.
        """
        scale = cls._resolveScale(scale)
        return TimePoint(calendarToNanoseconds(year, month, day, hour, minute, second), scale)

    @classmethod
    def fromMJD(cls, mjd: float, scale=None) -> TimePoint:
        """Create a time point from a Modified Julian Date."""
        scale = cls._resolveScale(scale)
        return TimePoint(mjdToNanoseconds(mjd), scale)

    @classmethod
    def fromJD(cls, julian_date: float, scale=None) -> TimePoint:
        """Create a time point from a Julian Date."""
        scale = cls._resolveScale(scale)
        return TimePoint(jdToNanoseconds(julian_date), scale)

    @classmethod
    def fromString(cls, text: str, scale=None) -> TimePoint:
        """Create a time point from ISO-8601 text.

        Raises:
            InvalidFormatError: if `text` doesn't match the ISO-8601 grammar for the scale.
            OutOfRangeError: if the calendar date is outside the supported range.
        """
        scale = cls._resolveScale(scale)
        return TimePoint(parseISO8601(text, scale), scale)

    @classmethod
    def fromDatetime(cls, date_time: datetime, scale=None) -> TimePoint:
        """Create a time point from a naive ``datetime``, or one aware of UTC.

        Raises:
            ValueError: if `date_time` carries a non-zero UTC offset.
        """
        scale = cls._resolveScale(scale)
        offset = date_time.utcoffset()
        if offset is not None and offset != timedelta(0):
            err = f"TimePoint: time zone offsets are not supported: {date_time.isoformat()}"
            raise ValueError(err)
        nanoseconds = calendarToNanoseconds(
            date_time.year,
            date_time.month,
            date_time.day,
            date_time.hour,
            date_time.minute,
            date_time.second,
        )
        return TimePoint(nanoseconds + date_time.microsecond * const.NSEC_PER_USEC, scale)

    # Representations

    def toMJD(self) -> float:
        """Return this time point as a Modified Julian Date in its own scale."""
        return nanosecondsToMJD(self._nanoseconds)

    def toJD(self) -> float:
        """Return this time point as a Julian Date in its own scale."""
        return nanosecondsToJD(self._nanoseconds)

    def toCalendar(self) -> CalendarFields:
        """Return this time point broken down into calendar fields."""
        return nanosecondsToCalendar(self._nanoseconds)

    def toString(self) -> str:
        """Return canonical ISO-8601 text, with nine fractional digits and the scale's suffix."""
        return formatCalendar(self.toCalendar(), self._scale)

    def toTimespec(self) -> tuple[int, int]:
        """Return ``(seconds, nanoseconds)``, truncated toward zero."""
        return nanosecondsToTimespec(self._nanoseconds)

    def toTimeval(self) -> tuple[int, int]:
        """Return ``(seconds, microseconds)``, truncated toward zero."""
        return nanosecondsToTimeval(self._nanoseconds)

    def toDatetime(self) -> datetime:
        """Return a naive ``datetime`` with the same calendar fields, at microsecond resolution."""
        fields = self.toCalendar()
        return datetime(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.nanosecond // const.NSEC_PER_USEC,
        )

    def convert(self, to_scale) -> TimePoint:
        """Return the same instant expressed in `to_scale`.

        Args:
            to_scale (:class:`.TimeScale` | ``str``): target time scale

        Raises:
            OutOfRangeError: for UTC/TAI conversions before 1961-01-01.
        """
        if isinstance(to_scale, str):
            to_scale = TimeScale.fromString(to_scale)
        return TimePoint(convertNanoseconds(self._nanoseconds, self._scale, to_scale), to_scale)

    # Arithmetic

    def _checkSameScale(self, other: TimePoint) -> None:
        if other.scale is not self._scale:
            err = (
                f"{type(self).__name__}: Cannot perform operations between {self._scale.value}/"
                f"{other.scale.value} time points, use convert()."
            )
            raise TypeError(err)

    @staticmethod
    def _durationNanoseconds(duration) -> int | None:
        if isinstance(duration, timedelta):
            return timedeltaToNanoseconds(duration)
        if isinstance(duration, Integral) and not isinstance(duration, bool):
            return int(duration)
        return None

    def __add__(self, duration):
        """Return this time point moved forward by `duration` (nanoseconds or ``timedelta``)."""
        if isinstance(duration, TimePoint):
            raise TypeError(f"{type(self).__name__}: Cannot add two time points.")
        delta = self._durationNanoseconds(duration)
        if delta is None:
            return NotImplemented
        return TimePoint(self._nanoseconds + delta, self._scale)

    __radd__ = __add__

    def __sub__(self, other):
        """Return the nanoseconds between two time points, or this time point moved back by a duration."""
        if isinstance(other, TimePoint):
            self._checkSameScale(other)
            return self._nanoseconds - other.nanoseconds
        delta = self._durationNanoseconds(other)
        if delta is None:
            return NotImplemented
        return TimePoint(self._nanoseconds - delta, self._scale)

    def __eq__(self, other):
        """Time points are equal when both the scale and nanoseconds match."""
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._scale is other.scale and self._nanoseconds == other.nanoseconds

    def __lt__(self, other):
        """Order time points of the same scale."""
        if not isinstance(other, TimePoint):
            return NotImplemented
        self._checkSameScale(other)
        return self._nanoseconds < other.nanoseconds

    def __hash__(self):
        """Hash the scale and nanoseconds."""
        return hash((self._scale, self._nanoseconds))

    def __reduce__(self):
        """Pickle as a call to the per-scale class."""
        return (type(self), (self._nanoseconds, self._scale))

    def __repr__(self):
        """Return a string representation of this :class:`.TimePoint`."""
        return f"{type(self).__name__}({self._nanoseconds} ns, ISO={self.toString()})"

    def __str__(self):
        """Return the ISO-8601 text of this :class:`.TimePoint`."""
        return self.toString()


class UTCTime(TimePoint):
    """Time point in Coordinated Universal Time."""

    __slots__ = ()
    SCALE = TimeScale.UTC


class TAITime(TimePoint):
    """Time point in International Atomic Time."""

    __slots__ = ()
    SCALE = TimeScale.TAI


class TTTime(TimePoint):
    """Time point in Terrestrial Time."""

    __slots__ = ()
    SCALE = TimeScale.TT


_SCALE_CLASSES: dict[TimeScale, type[TimePoint]] = {
    TimeScale.UTC: UTCTime,
    TimeScale.TAI: TAITime,
    TimeScale.TT: TTTime,
}
"""dict: per-scale class for each :class:`.TimeScale`."""
