"""Define the command line interface for the chronoscale conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse

# Local Imports
from ..time.conversions import TimeScale

INPUT_FORMATS = ("iso", "mjd", "jd", "nsec")
"""tuple: representations a time value can be read from or written to."""


def scaleChecker(name):
    """Checks for valid time scale names passed to the CLI parser.

    Args:
        name (``str``): time scale name given to CLI parser.

    Raises:
        argparse.ArgumentTypeError: if the name isn't a known time scale

    Returns:
        :class:`.TimeScale`: the named time scale
    """
    try:
        return TimeScale.fromString(name)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(
        description="Convert an instant between the UTC, TAI, and TT time scales",
    )
    format_group = parser.add_argument_group("Formats")

    parser.add_argument(
        "value",
        metavar="VALUE",
        type=str,
        help="Time value to convert, e.g. 2009-04-02T07:26:39.314159265Z",
    )

    parser.add_argument(
        "-s",
        "--scale",
        dest="from_scale",
        metavar="SCALE",
        default=TimeScale.UTC,
        type=scaleChecker,
        help="Time scale VALUE is given in: UTC, TAI, or TT. DEFAULT: UTC",
    )

    parser.add_argument(
        "-t",
        "--to",
        dest="to_scale",
        metavar="SCALE",
        default=TimeScale.TAI,
        type=scaleChecker,
        help="Time scale to convert to: UTC, TAI, or TT. DEFAULT: TAI",
    )

    format_group.add_argument(
        "-i",
        "--input",
        dest="input_format",
        choices=INPUT_FORMATS,
        default="iso",
        help="Representation of VALUE. DEFAULT: iso",
    )

    format_group.add_argument(
        "-o",
        "--output",
        dest="output_format",
        choices=INPUT_FORMATS,
        default="iso",
        help="Representation of the converted time. DEFAULT: iso",
    )

    return parser
