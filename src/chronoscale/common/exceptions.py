"""Contains all the custom-defined exceptions used in chronoscale."""

from __future__ import annotations


class ChronoscaleError(Exception):
    """Base exception for errors raised by chronoscale."""


class InvalidFormatError(ChronoscaleError, ValueError):
    """Exception indicating text doesn't match the ISO-8601 grammar for a time scale."""


class OutOfRangeError(ChronoscaleError, ValueError):
    """Exception indicating a time value lies outside the domain of an operation.

    This covers the 64-bit nanosecond span, the supported calendar years, and UTC/TAI instants
    earlier than the first leap second table entry.
    """


class LeapTableError(ChronoscaleError):
    """Exception indicating the leap second data is malformed or out of order."""
