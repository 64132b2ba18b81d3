"""Parse and format the restricted ISO-8601 grammar used for each time scale.

Accepted text is ``YYYY[-]MM[-]DD`` ``T`` ``hh[:]mm[:]ss`` with an optional ``[.,]`` fractional
second. UTC text must end in ``Z``; TAI and TT text must not. Time zone offsets, two digit years,
and partial dates or times are all rejected.
"""

from __future__ import annotations

# Standard Library Imports
import re
from typing import TYPE_CHECKING, Final

# Local Imports
from ..common.exceptions import InvalidFormatError
from .conversions import TimeScale
from .epoch import calendarToNanoseconds, nanosecondsToCalendar

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .epoch import CalendarFields

_DATE_TIME_PATTERN: Final[str] = (
    r"(?P<year>\d{4})-?(?P<month>\d{2})-?(?P<day>\d{2})"
    r"T"
    r"(?P<hour>\d{2}):?(?P<minute>\d{2}):?(?P<second>\d{2})"
    r"(?:[.,](?P<fraction>\d*))?"
)

ISO8601_RE: Final[dict[TimeScale, re.Pattern]] = {
    scale: re.compile(_DATE_TIME_PATTERN + re.escape(scale.suffix), re.ASCII) for scale in TimeScale
}
"""dict: compiled grammar for each :class:`.TimeScale`, only UTC carries the ``Z`` suffix."""

FRACTION_DIGITS: Final[int] = 9


def _fractionToNanoseconds(fraction: str) -> int:
    """Convert fractional second digits to nanoseconds, dropping anything past nine digits."""
    return int(fraction[:FRACTION_DIGITS].ljust(FRACTION_DIGITS, "0"))


def parseISO8601(text: str, scale: TimeScale) -> int:
    """Parse ISO-8601 `text` as nanoseconds since the epoch of `scale`.

    Args:
        text (``str``): ISO-8601 date and time
        scale (:class:`.TimeScale`): time scale `text` is expressed in

    Raises:
        InvalidFormatError: if `text` doesn't match the grammar for `scale`.
        OutOfRangeError: if the calendar date is outside the supported range.

    Returns:
        ``int``: nanoseconds since the epoch
    """
    match = ISO8601_RE[scale].fullmatch(text)
    if match is None:
        raise InvalidFormatError(f"Not in acceptable ISO8601 format for {scale.value}: {text!r}")

    nanoseconds = calendarToNanoseconds(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
    )
    if match["fraction"] is not None:
        nanoseconds += _fractionToNanoseconds(match["fraction"])

    return nanoseconds


def formatCalendar(fields: CalendarFields, scale: TimeScale) -> str:
    """Render calendar fields as canonical ISO-8601 text with nine fractional digits."""
    return (
        f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
        f".{fields.nanosecond:09d}{scale.suffix}"
    )


def formatISO8601(nanoseconds: int, scale: TimeScale) -> str:
    """Format nanoseconds since the epoch of `scale` as canonical ISO-8601 text.

    Negative counts are split with the floor rule, so -1 ns is the last nanosecond of
    1969-12-31T23:59:59.
    """
    return formatCalendar(nanosecondsToCalendar(nanoseconds), scale)
