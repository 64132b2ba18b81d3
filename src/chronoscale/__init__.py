"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting instants between the UTC, TAI, and TT time scales. The library itself lives in
:mod:`.time`.
"""

from __future__ import annotations

__version__ = "1.0.0"


def convertValue(
    value: str,
    from_scale,
    to_scale,
    input_format: str = "iso",
    output_format: str = "iso",
) -> str:
    """Convert a textual time value from one time scale and representation to another.

    Args:
        value (``str``): time value, interpreted according to `input_format`
        from_scale (:class:`.TimeScale`): time scale `value` is expressed in
        to_scale (:class:`.TimeScale`): time scale to convert to
        input_format (``str``, optional): one of ``iso``, ``mjd``, ``jd`` or ``nsec``
        output_format (``str``, optional): one of ``iso``, ``mjd``, ``jd`` or ``nsec``

    Raises:
        ValueError: if `value` can't be read or converted. Parse and range failures are raised as
            :class:`.InvalidFormatError` and :class:`.OutOfRangeError` respectively.

    Returns:
        ``str``: the converted time value
    """
    # Local Imports
    from .time.stardate import TimePoint

    if input_format == "iso":
        time_point = TimePoint.fromString(value, from_scale)
    elif input_format == "mjd":
        time_point = TimePoint.fromMJD(float(value), from_scale)
    elif input_format == "jd":
        time_point = TimePoint.fromJD(float(value), from_scale)
    elif input_format == "nsec":
        time_point = TimePoint(int(value), from_scale)
    else:
        raise ValueError(f"Unknown input format: {input_format!r}")

    converted = time_point.convert(to_scale)

    if output_format == "iso":
        return converted.toString()
    if output_format == "mjd":
        return repr(converted.toMJD())
    if output_format == "jd":
        return repr(converted.toJD())
    if output_format == "nsec":
        return str(converted.nanoseconds)
    raise ValueError(f"Unknown output format: {output_format!r}")


def main(argv: list[str] | None = None) -> None:
    """Chronoscale main entry point.

    This is the function that the :command:`chronoscale` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser
    from .common.logger import Logger

    parser = getCommandLineParser()
    args = parser.parse_args(argv)
    logger = Logger("chronoscale")

    try:
        result = convertValue(
            args.value,
            args.from_scale,
            args.to_scale,
            input_format=args.input_format,
            output_format=args.output_format,
        )
    except ValueError as err:
        logger.error(f"Conversion failed: {err}")
        parser.error(str(err))

    print(result)  # noqa: T201
