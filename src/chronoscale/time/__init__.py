"""Contains classes and conversion functions for the UTC, TAI, and TT time scales.

Time points are integer nanosecond counts tagged with their scale, see :mod:`.stardate`. The leap
second table in :mod:`.leap_seconds` is only needed for UTC/TAI conversions, and is loaded the first
time one is requested.
"""

# Local Imports
# forward-facing API import
from .conversions import TimeScale, convertNanoseconds  # noqa: F401
from .leap_seconds import LeapEntry, LeapTable, getLeapTable  # noqa: F401
from .stardate import TAITime, TimePoint, TTTime, UTCTime  # noqa: F401
