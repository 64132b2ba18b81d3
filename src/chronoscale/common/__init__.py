"""Shared infrastructure for chronoscale: configuration, logging, exceptions, and the CLI."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return `dt` as an ISO-8601 stamp that can be used in a file name.

    Colons become dashes and the decimal point is dropped, e.g. ``2009-04-02T07-26-39314159``.

    Args:
        dt (``datetime``, optional): time to stamp, defaults to the current local time

    Returns:
        ``str``: file-name-safe time stamp
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")
