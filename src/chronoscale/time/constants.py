"""Global time constants.

This module holds the epoch, day-count, and time scale offsets that are used in various places
across the time package, allowing for a consistent place to store them.

The epoch is 1970-01-01T00:00:00 = JD 2440587.5 = MJD 40587.0, counted in each time scale's own
continuous timeline.
"""

from __future__ import annotations

# Standard Library Imports
from typing import Final

# Day count constants
MJD_TO_JD: Final[float] = 2400000.5
EPOCH_IN_MJD: Final[float] = 40587.0
SECONDS_PER_DAY: Final[float] = 24.0 * 3600.0
NSEC_PER_DAY: Final[float] = 86.4e12

# Integer nanosecond constants
NSEC_PER_SEC: Final[int] = 1_000_000_000
NSEC_PER_USEC: Final[int] = 1_000
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

MAX_DAYS: Final[float] = 106751.99
"""``float``: days either side of the epoch expressible as signed 64-bit nanoseconds.

Earliest representable date is 1677-09-21, latest is 2262-04-12.
"""

MIN_YEAR: Final[int] = 1902
"""``int``: earliest calendar year accepted by calendar construction."""

MAX_YEAR: Final[int] = 2261
"""``int``: latest calendar year accepted by calendar construction."""

TT_MINUS_TAI_NS: Final[int] = 32_184_000_000
"""``int``: fixed offset of Terrestrial Time ahead of TAI (32.184 s), in nanoseconds."""
