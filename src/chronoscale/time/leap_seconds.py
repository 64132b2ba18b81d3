"""Defines the historical TAI-UTC leap second table and how it is loaded.

The table is built from the USNO ``tai-utc.dat`` record format, where each line gives the date a
new TAI-UTC formula takes effect:

.. code-block:: text

    1961 JAN  1 =JD 2437300.5  TAI-UTC=   1.4228180 S + (MJD - 37300.) X 0.001296 S

Before 1972 the offset drifted continuously as ``offset + (MJD - mjd_reference) * drift``. From
1972 onwards the drift is zero and each entry is an integer number of leap seconds.

A table is built once per loader and is read-only afterwards, so it can be shared between threads.
"""

from __future__ import annotations

# Standard Library Imports
import re
import threading
from abc import ABC, abstractmethod
from collections import namedtuple
from collections.abc import Sequence
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

# Third Party Imports
import numpy as np

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import LeapTableError, OutOfRangeError
from ..common.logger import chronoscaleLogDebug, chronoscaleLogError
from . import constants as const
from .epoch import mjdToNanoseconds

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable, Iterator


LEAP_RECORD_RE = re.compile(
    r"\s*\d{4}\s+[A-Z]{3}\s+\d{1,2}\s+=JD\s*(?P<jd>[\d.]+)"
    r"\s+TAI-UTC=\s*(?P<offset>[\d.]+)\s*S"
    r"\s*\+\s*\(MJD\s*-\s*(?P<mjd_ref>[\d.]+)\s*\)"
    r"\s*X\s*(?P<drift>[\d.]+)\s*S\s*",
)
"""``re.Pattern``: one record of the USNO ``tai-utc.dat`` format."""


def roundHalfAway(value: float) -> int:
    """Round `value` to the nearest integer, with ties rounded away from zero."""
    magnitude = int(np.floor(abs(value) + 0.5))
    return -magnitude if value < 0 else magnitude


@dataclass(frozen=True)
class LeapEntry:
    """One TAI-UTC formula and the instant it takes effect."""

    utc_onset_ns: int
    """int: UTC nanoseconds since the epoch at which this entry takes effect."""

    tai_onset_ns: int
    """int: TAI nanoseconds since the epoch at which this entry takes effect."""

    offset_seconds: float
    """float: constant term of TAI-UTC (seconds)."""

    mjd_reference: float
    """float: reference MJD of the drift term."""

    drift_per_day: float
    """float: rate of change of TAI-UTC (seconds per day), zero from 1972 on."""

    def leapSeconds(self, mjd: float) -> float:
        """Return TAI-UTC in seconds for a UTC `mjd` covered by this entry."""
        return self.offset_seconds + (mjd - self.mjd_reference) * self.drift_per_day


def parseLeapSecondData(lines: Iterable[str]) -> list[LeapEntry]:
    """Parse ``tai-utc.dat`` records into :class:`.LeapEntry` objects.

    Args:
        lines (``iterable``): text lines of the data file, blank lines are skipped

    Raises:
        LeapTableError: if a non-blank line is not a valid record.

    Returns:
        ``list``: entries in the order they appear in `lines`
    """
    entries = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        match = LEAP_RECORD_RE.fullmatch(line.rstrip("\n"))
        if match is None:
            msg = f"Malformed leap second record on line {line_number}: {line.rstrip()!r}"
            chronoscaleLogError(msg)
            raise LeapTableError(msg)

        mjd_utc = float(match["jd"]) - const.MJD_TO_JD
        offset = float(match["offset"])
        mjd_ref = float(match["mjd_ref"])
        drift = float(match["drift"])

        utc_onset_ns = mjdToNanoseconds(mjd_utc)
        tai_onset_ns = utc_onset_ns + roundHalfAway(1.0e9 * (offset + (mjd_utc - mjd_ref) * drift))
        entries.append(
            LeapEntry(
                utc_onset_ns=utc_onset_ns,
                tai_onset_ns=tai_onset_ns,
                offset_seconds=offset,
                mjd_reference=mjd_ref,
                drift_per_day=drift,
            ),
        )

    return entries


class LeapTable(Sequence):
    """Immutable, ordered collection of :class:`.LeapEntry` objects.

    Onsets are kept on two separate axes. The UTC and TAI onsets of the same entry differ by the
    very offset being computed, so each conversion direction has to search its own axis.
    """

    def __init__(self, entries: Iterable[LeapEntry]):
        """Build the table and check its ordering.

        Args:
            entries (``iterable``): :class:`.LeapEntry` objects, earliest first

        Raises:
            LeapTableError: if there are no entries, or onsets aren't strictly increasing.
        """
        self._entries: tuple[LeapEntry, ...] = tuple(entries)
        if not self._entries:
            raise LeapTableError("Leap second table is empty")

        self._utc_onsets = np.array([entry.utc_onset_ns for entry in self._entries], dtype=np.int64)
        self._tai_onsets = np.array([entry.tai_onset_ns for entry in self._entries], dtype=np.int64)
        self._utc_onsets.flags.writeable = False
        self._tai_onsets.flags.writeable = False

        for axis, onsets in (("UTC", self._utc_onsets), ("TAI", self._tai_onsets)):
            if np.any(np.diff(onsets) <= 0):
                msg = f"Leap second onsets are not strictly increasing on the {axis} axis"
                chronoscaleLogError(msg)
                raise LeapTableError(msg)

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    def __getitem__(self, index: int | slice) -> LeapEntry | tuple[LeapEntry, ...]:
        """Return the entry at `index`.

        Slicing returns a plain ``tuple`` of entries, not a :class:`.LeapTable`.
        """
        return self._entries[index]

    def __iter__(self) -> Iterator[LeapEntry]:
        """Iterate over entries, earliest first."""
        return iter(self._entries)

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.LeapTable`."""
        return f"LeapTable({len(self)} entries, TAI-UTC={self._entries[-1].offset_seconds} s)"

    @property
    def utc_onsets(self) -> np.ndarray:
        """``np.ndarray``: read-only UTC onsets, nanoseconds."""
        return self._utc_onsets

    @property
    def tai_onsets(self) -> np.ndarray:
        """``np.ndarray``: read-only TAI onsets, nanoseconds."""
        return self._tai_onsets

    def earliestUTC(self) -> int:
        """Return the UTC onset of the first entry."""
        return self._entries[0].utc_onset_ns

    def earliestTAI(self) -> int:
        """Return the TAI onset of the first entry."""
        return self._entries[0].tai_onset_ns

    @staticmethod
    def _search(onsets: np.ndarray, nanoseconds: int, scale_name: str) -> int:
        index = int(np.searchsorted(onsets, nanoseconds, side="right")) - 1
        if index < 0:
            raise OutOfRangeError(
                f"Time value {nanoseconds} ns too early for {scale_name} leap second lookup",
            )
        return index

    def indexForUTC(self, nanoseconds: int) -> int:
        """Return the index of the latest entry whose UTC onset is at or before `nanoseconds`.

        Raises:
            OutOfRangeError: if `nanoseconds` precedes the first entry.
        """
        return self._search(self._utc_onsets, nanoseconds, "UTC")

    def indexForTAI(self, nanoseconds: int) -> int:
        """Return the index of the latest entry whose TAI onset is at or before `nanoseconds`.

        Raises:
            OutOfRangeError: if `nanoseconds` precedes the first entry.
        """
        return self._search(self._tai_onsets, nanoseconds, "TAI")

    def entryForUTC(self, nanoseconds: int) -> LeapEntry:
        """Return the entry in effect at UTC `nanoseconds`."""
        return self._entries[self.indexForUTC(nanoseconds)]

    def entryForTAI(self, nanoseconds: int) -> LeapEntry:
        """Return the entry in effect at TAI `nanoseconds`."""
        return self._entries[self.indexForTAI(nanoseconds)]


class LeapSecondLoader(ABC):
    """Abstract class defining how leap second data should be loaded."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): Specifies where the leap second content to load is located.
        """
        self._location: str = location

    @abstractmethod
    def readLines(self) -> list[str]:
        """Return the raw text lines of the leap second data."""
        raise NotImplementedError

    def load(self) -> LeapTable:
        """Parse the leap second data into a :class:`.LeapTable`."""
        table = LeapTable(parseLeapSecondData(self.readLines()))
        chronoscaleLogDebug(f"Loaded {len(table)} leap second entries from {self._location!r}")
        return table


class ModuleLeapSecondLoader(LeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded as a Python module resource."""

    DATA_MODULE: str = "chronoscale.time.data"
    """``str``: defines leap second data module location."""

    def readLines(self) -> list[str]:
        """Read the packaged leap second resource."""
        res = resources.files(self.DATA_MODULE).joinpath(self._location)
        with resources.as_file(res) as file_resource, open(file_resource, encoding="utf-8") as data_file:
            return data_file.readlines()


class LocalLeapSecondLoader(LeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded from a local file."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): path to a ``tai-utc.dat`` formatted file.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def readLines(self) -> list[str]:
        """Read the leap second file."""
        try:
            with open(self._path, encoding="utf-8") as data_file:
                return data_file.readlines()
        except FileNotFoundError:
            chronoscaleLogError(f"Could not find leap second file: {self._path}")
            raise


LoaderTag = namedtuple("LoaderTag", ("loader_name", "loader_location"))
"""NamedTuple: Tag used to identify different :class:`.LeapSecondLoader`'s."""

_LOADER_MAP: dict[str, type[LeapSecondLoader]] = {
    "ModuleLeapSecondLoader": ModuleLeapSecondLoader,
    "LocalLeapSecondLoader": LocalLeapSecondLoader,
}
"""dict[str, type]: Maps loader class names to loader class references."""

_LEAP_TABLES: dict[LoaderTag, LeapTable] = {}
"""dict[LoaderTag, LeapTable]: Stores built tables based on tag."""

_LEAP_TABLES_LOCK = threading.Lock()


def getLeapTable(loader_name: str | None = None, loader_location: str | None = None) -> LeapTable:
    """Return the :class:`.LeapTable` specified by `loader_name` and `loader_location`.

    Each table is built on first request and then shared, read-only, by every later caller.

    Args:
        loader_name (str, optional): Name of the concrete :class:`.LeapSecondLoader` to use.
            Defaults to the ``time.LeapSecondLoader`` config value.
        loader_location (str, optional): Location the loader will read leap second data from.
            Defaults to the ``time.LeapSecondLocation`` config value.

    Raises:
        ValueError: if `loader_name` is not a known loader.

    Returns:
        :class:`.LeapTable`: the shared leap second table.
    """
    behave_config = BehavioralConfig.getConfig()
    if loader_name is None:
        loader_name = behave_config.time.LeapSecondLoader

    if loader_location is None:
        loader_location = behave_config.time.LeapSecondLocation

    tag = LoaderTag(loader_name, loader_location)
    table = _LEAP_TABLES.get(tag)
    if table is not None:
        return table

    with _LEAP_TABLES_LOCK:
        table = _LEAP_TABLES.get(tag)
        if table is None:
            try:
                loader = _LOADER_MAP[loader_name](loader_location)
            except KeyError:
                err = f"Specified loader '{loader_name}' is undefined"
                raise ValueError(err)  # noqa: B904
            table = loader.load()
            _LEAP_TABLES[tag] = table

    return table
