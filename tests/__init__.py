"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
LEAP_DAT_PATH = Path("dat")


# Common time points, 2009-04-02T07:26:39.314159265 in each scale
TEST_ISO_UTC: str = "2009-04-02T07:26:39.314159265Z"
TEST_UTC_NS: int = 1238657199314159265
TEST_TAI_NS: int = 1238657233314159265
TEST_TT_NS: int = 1238657265498159265

# 2007-10-19T00:57:53 UTC, where TAI-UTC is 33 s
NSECS_UTC: int = 1192755473000000000
NSECS_TAI: int = 1192755506000000000
NSECS_TT: int = 1192755538184000000
NSECS_MJD: float = 54392.040196759262
