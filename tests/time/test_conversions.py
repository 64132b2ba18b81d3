from __future__ import annotations

# Standard Library Imports
import os
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# Chronoscale Imports
from chronoscale.common.exceptions import OutOfRangeError
from chronoscale.time import constants as const
from chronoscale.time.conversions import (
    TimeScale,
    convertNanoseconds,
    taiToTT,
    taiToUTC,
    ttToTAI,
    ttToUTC,
    utcToTAI,
    utcToTT,
)
from chronoscale.time.epoch import calendarToNanoseconds, mjdToNanoseconds
from chronoscale.time.leap_seconds import LocalLeapSecondLoader

# Local Imports
from .. import (
    FIXTURE_DATA_DIR,
    LEAP_DAT_PATH,
    NSECS_TAI,
    NSECS_TT,
    NSECS_UTC,
    TEST_TAI_NS,
    TEST_TT_NS,
    TEST_UTC_NS,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path

    # Chronoscale Imports
    from chronoscale.time.leap_seconds import LeapTable


def testTimeScaleSuffix():
    """Test only UTC carries a zone designator."""
    assert TimeScale.UTC.suffix == "Z"
    assert TimeScale.TAI.suffix == ""
    assert TimeScale.TT.suffix == ""


@pytest.mark.parametrize(
    ("name", "scale"),
    [("UTC", TimeScale.UTC), ("tai", TimeScale.TAI), ("Tt", TimeScale.TT)],
)
def testTimeScaleFromString(name: str, scale: TimeScale):
    """Test looking up scales by name."""
    assert TimeScale.fromString(name) is scale


def testTimeScaleFromStringUnknown():
    """Test an unknown scale name."""
    with pytest.raises(ValueError, match="Unknown time scale"):
        TimeScale.fromString("GPS")


@pytest.mark.parametrize(
    ("mjd", "leap_seconds"),
    [
        (45205.0, 21),
        (41498.99, 10),
        (41499.01, 11),
        (57203.99, 35),
        (57204.01, 36),
        (57000.0, 35),
        (57210.0, 36),
    ],
)
def testLeapSecond(mjd: float, leap_seconds: int):
    """Test integer leap seconds either side of a leap."""
    utc = mjdToNanoseconds(mjd)
    assert utcToTAI(utc) - utc == leap_seconds * const.NSEC_PER_SEC


def testMJD():
    """Test UTC to TAI from an MJD."""
    utc = mjdToNanoseconds(45205.125)
    assert utc == 399006000000000000
    assert utcToTAI(utc) == 399006021000000000


def testNsecs():
    """Test UTC to TAI from nanoseconds."""
    assert utcToTAI(NSECS_UTC) == NSECS_TAI


def testBoundaryMJD():
    """Test UTC to TAI exactly on the 1990-01-01 leap."""
    utc = mjdToNanoseconds(47892.0)
    assert utc == 631152000000000000
    assert utcToTAI(utc) == 631152025000000000


def testCrossBoundaryNsecs():
    """Test UTC to TAI two seconds before the 1990-01-01 leap."""
    assert utcToTAI(631151998000000000) == 631152022000000000


def testNsecsTAI():
    """Test TAI to UTC."""
    assert taiToUTC(NSECS_TAI) == NSECS_UTC


def testNsecsTT():
    """Test TT to TAI and UTC."""
    assert ttToTAI(NSECS_TT) == NSECS_TAI
    assert ttToUTC(NSECS_TT) == NSECS_UTC
    assert utcToTT(NSECS_UTC) == NSECS_TT


def testIsoInstant():
    """Test all three scales of 2009-04-02T07:26:39.314159265 UTC."""
    assert utcToTAI(TEST_UTC_NS) == TEST_TAI_NS
    assert utcToTT(TEST_UTC_NS) == TEST_TT_NS
    assert taiToTT(TEST_TAI_NS) == TEST_TT_NS


@pytest.mark.parametrize(
    "tai",
    [0, -1, 1, NSECS_TAI, TEST_TAI_NS, -(10**18), 10**18, const.INT64_MIN + const.TT_MINUS_TAI_NS],
)
def testFixedTTOffset(tai: int):
    """Test TT is exactly 32.184 s ahead of TAI, both ways."""
    tt = taiToTT(tai)
    assert tt - tai == 32_184_000_000
    assert ttToTAI(tt) == tai


def testTTOverflow():
    """Test the fixed offset still respects the 64-bit range."""
    with pytest.raises(OutOfRangeError):
        taiToTT(const.INT64_MAX)
    with pytest.raises(OutOfRangeError):
        ttToTAI(const.INT64_MIN)


@pytest.mark.parametrize(
    ("tai", "expected_utc"),
    [
        (-1, -8000081761),
        (0, -8000081760),
        (1, -8000081759),
    ],
)
def testDriftingTAIToUTC(tai: int, expected_utc: int):
    """Test TAI to UTC in the drifting era corrects for the TAI MJD."""
    assert taiToUTC(tai) == expected_utc


def testDriftingRoundTrip():
    """Test UTC to TAI and back in 1969, where TAI-UTC drifts continuously."""
    utc = calendarToNanoseconds(1969, 3, 1, 12, 39, 45) + 123450000
    tai = utcToTAI(utc)
    assert tai == -26392807668252446
    assert taiToUTC(tai) == utc

    utc = calendarToNanoseconds(1969, 3, 1, 12, 39, 45) + 123456000
    tai = utcToTAI(utc)
    assert tai == -26392807668246446
    assert taiToUTC(tai) == utc


@pytest.mark.parametrize("year", [1973, 1990, 1999, 2009, 2016, 2020])
def testIntegerEraRoundTrip(year: int):
    """Test UTC to TAI and back is exact once leaps are whole seconds."""
    utc = calendarToNanoseconds(year, 6, 15, 1, 2, 3) + 456789
    assert taiToUTC(utcToTAI(utc)) == utc
    assert ttToUTC(utcToTT(utc)) == utc


def testTableStart(leap_table: LeapTable):
    """Test the first UTC instant of the table converts and the one before it doesn't."""
    start = calendarToNanoseconds(1961, 1, 1, 0, 0, 0)
    assert start == leap_table.earliestUTC()
    assert utcToTAI(start) == start + 1422818000

    with pytest.raises(OutOfRangeError, match="too early"):
        utcToTAI(calendarToNanoseconds(1960, 12, 31, 23, 59, 59))
    with pytest.raises(OutOfRangeError):
        utcToTAI(start - 1)


def testBeforeTable():
    """Test conversions that need the table fail before 1961, but TT/TAI still work."""
    tai = calendarToNanoseconds(1960, 1, 1, 0, 0, 0)
    tt = taiToTT(tai)
    assert ttToTAI(tt) == tai

    with pytest.raises(OutOfRangeError):
        taiToUTC(tai)
    with pytest.raises(OutOfRangeError):
        ttToUTC(tt)
    with pytest.raises(OutOfRangeError):
        utcToTT(tai)
    with pytest.raises(OutOfRangeError):
        utcToTAI(-500000000 * const.NSEC_PER_SEC)


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testCustomLeapTable(datafiles: Path):
    """Test converting with an explicitly supplied table."""
    leap_file = os.path.join(datafiles, LEAP_DAT_PATH, "tai-utc-short.dat")
    table = LocalLeapSecondLoader(leap_file).load()

    # The short table has no leaps between 1972 and 1999
    utc = calendarToNanoseconds(1990, 6, 1, 0, 0, 0)
    assert utcToTAI(utc, leap_table=table) - utc == 10 * const.NSEC_PER_SEC
    assert taiToUTC(utc + 10 * const.NSEC_PER_SEC, leap_table=table) == utc

    with pytest.raises(OutOfRangeError):
        utcToTAI(calendarToNanoseconds(1965, 1, 1, 0, 0, 0), leap_table=table)


@pytest.mark.parametrize("from_scale", list(TimeScale))
@pytest.mark.parametrize("to_scale", list(TimeScale))
def testConvertNanoseconds(from_scale: TimeScale, to_scale: TimeScale):
    """Test the dispatch table against the directed conversion functions."""
    by_scale = {TimeScale.UTC: TEST_UTC_NS, TimeScale.TAI: TEST_TAI_NS, TimeScale.TT: TEST_TT_NS}
    assert convertNanoseconds(by_scale[from_scale], from_scale, to_scale) == by_scale[to_scale]


def testConvertIdentity():
    """Test converting to the same scale never touches the table."""
    early = calendarToNanoseconds(1950, 1, 1, 0, 0, 0)
    assert convertNanoseconds(early, TimeScale.UTC, TimeScale.UTC) == early
