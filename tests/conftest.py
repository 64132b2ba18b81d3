from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# Chronoscale Imports
from chronoscale.common.behavioral_config import BehavioralConfig
from chronoscale.common.logger import Logger
from chronoscale.time.leap_seconds import LeapTable, getLeapTable


@pytest.fixture(autouse=True)
def _resetBehavioralConfig() -> None:
    """Make sure every test starts and ends with the default configuration values.

    Note:
        This is used so tests can assume a "blank" configuration, and it won't leak changes made by
        one test into the next.
    """
    defaults = BehavioralConfig.DEFAULT_SECTIONS
    yield
    config = BehavioralConfig.getConfig()
    for section, section_config in defaults.items():
        for option, value in section_config.items():
            setattr(getattr(config, section), option, value)


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="leap_table")
def getDefaultLeapTable() -> LeapTable:
    """Return the shared, packaged :class:`.LeapTable`."""
    return getLeapTable()
